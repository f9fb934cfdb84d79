"""Generic data grid used by the buyers, sellers and fields pages.

Everything shown here is a computed var on the page's EntityTableState; this
module only lays it out. The selection and action columns are always
rendered and never appear in the Columns menu.
"""

import reflex as rx

from .dialogs import delete_dialog
from .row_menu import row_menu


def data_table(state, add_control: rx.Component) -> rx.Component:
    return rx.box(
        _toolbar(state, add_control),
        rx.box(
            rx.table.root(
                rx.table.header(_header_row(state)),
                rx.table.body(
                    rx.cond(
                        state.placeholder != "",
                        _placeholder_row(state),
                        rx.foreach(state.page_rows, lambda row: _row(state, row)),
                    ),
                ),
                width="100%",
            ),
            class_name="rounded-md border border-gray-200",
        ),
        _footer(state),
        delete_dialog(state),
        class_name="w-full",
    )


# =========================================================================
# TOOLBAR
# =========================================================================


def _toolbar(state, add_control: rx.Component) -> rx.Component:
    return rx.flex(
        rx.flex(
            rx.el.input(
                type="text",
                placeholder=state.schema.search_placeholder,
                value=state.search_text,
                on_change=state.set_search,  # type: ignore[arg-type]
                class_name=(
                    "text-sm bg-white border border-gray-200 rounded-lg "
                    "px-3 py-1.5 outline-none focus:border-accent w-[360px]"
                ),
            ),
            _columns_menu(state),
            align="center",
            gap="4",
        ),
        add_control,
        justify="between",
        align="center",
        class_name="py-4",
    )


def _columns_menu(state) -> rx.Component:
    return rx.popover.root(
        rx.popover.trigger(
            rx.button(
                "Columns",
                rx.icon("chevron-down", size=14),
                variant="outline",
                size="2",
            ),
        ),
        rx.popover.content(
            rx.flex(
                rx.foreach(
                    state.hideable_columns,
                    lambda col: rx.checkbox(
                        col["label"],
                        checked=col["visible"].to(bool),
                        on_change=lambda checked: state.set_column_visible(col["key"].to(str), checked),
                        class_name="capitalize",
                    ),
                ),
                direction="column",
                gap="2",
            ),
            align="end",
        ),
    )


# =========================================================================
# HEADER / ROWS
# =========================================================================


def _header_row(state) -> rx.Component:
    return rx.table.row(
        rx.table.column_header_cell(
            rx.checkbox(
                checked=rx.cond(
                    state.all_page_rows_selected,
                    True,
                    rx.cond(state.some_page_rows_selected, "indeterminate", False),
                ),
                on_change=state.toggle_page_rows,
                aria_label="Select all",
            ),
            width="40px",
        ),
        rx.foreach(state.visible_columns, lambda col: _header_cell(state, col)),
        rx.table.column_header_cell("", width="48px"),
    )


def _header_cell(state, col: rx.Var) -> rx.Component:
    """Sortable columns get a button that cycles asc / desc."""
    return rx.table.column_header_cell(
        rx.cond(
            col["sortable"] == "true",
            rx.button(
                col["label"],
                rx.icon("arrow-up-down", size=14),
                variant="ghost",
                on_click=state.toggle_sort(col["key"].to(str)),
            ),
            rx.text(col["label"]),
        ),
    )


def _row(state, row: rx.Var) -> rx.Component:
    row_id = row["id"].to(str)
    return rx.table.row(
        rx.table.cell(
            rx.checkbox(
                checked=row["selected"].to(bool),
                on_change=lambda checked: state.toggle_row(row_id, checked),
                aria_label="Select row",
            ),
        ),
        rx.foreach(row["cells"].to(list[str]), lambda value: rx.table.cell(value)),
        rx.table.cell(row_menu(state, row_id)),
        class_name=rx.cond(row["selected"].to(bool), "bg-gray-50", ""),
    )


def _placeholder_row(state) -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            state.placeholder,
            col_span=state.column_count,
            class_name="h-24 text-center",
        ),
    )


# =========================================================================
# FOOTER
# =========================================================================


def _footer(state) -> rx.Component:
    return rx.flex(
        rx.text(state.selection_summary, class_name="flex-1 text-sm text-gray-500"),
        rx.button(
            "Previous",
            on_click=state.previous_page,
            disabled=~state.can_previous,
            variant="outline",
            size="1",
        ),
        rx.button(
            "Next",
            on_click=state.next_page,
            disabled=~state.can_next,
            variant="outline",
            size="1",
        ),
        align="center",
        gap="2",
        class_name="py-4",
    )
