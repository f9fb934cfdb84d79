"""Per-row Edit / Delete menu.

Items stop click propagation so opening the menu never toggles the row's
selection or reaches a row-level handler.
"""

import reflex as rx

from ..row_actions import ROW_ACTIONS, RowAction


def _item(state, action: RowAction, row_id: rx.Var) -> rx.Component:
    return rx.menu.item(
        action.value.capitalize(),
        color="red" if action is RowAction.DELETE else None,
        on_click=state.run_row_action(action.value, row_id).stop_propagation,
    )


def row_menu(state, row_id: rx.Var) -> rx.Component:
    return rx.menu.root(
        rx.menu.trigger(
            rx.icon_button(
                rx.icon("ellipsis", size=16),
                variant="ghost",
                size="1",
                aria_label="Open menu",
            ),
        ),
        rx.menu.content(
            *[_item(state, action, row_id) for action in ROW_ACTIONS],
            align="end",
        ),
    )
