"""Delete confirmation plus the fields add / edit dialogs."""

import reflex as rx

from ..entities import FIELD_CATEGORIES, FIELD_TYPES
from ..state import FieldsState

_INPUT_CLASS = (
    "w-full border border-gray-300 rounded-lg px-3 py-2 text-sm "
    "focus:outline-none focus:border-accent"
)


# =========================================================================
# DELETE CONFIRMATION
# =========================================================================


def delete_dialog(state) -> rx.Component:
    """Cancel + destructive Delete; both disabled while the request runs."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(f"Delete {state.schema.title}"),
            rx.dialog.description(
                state.delete_prompt,
                class_name="text-sm text-gray-500 mb-4",
            ),
            rx.flex(
                rx.button(
                    "Cancel",
                    variant="outline",
                    on_click=state.cancel_delete,
                    disabled=state.deleting,
                ),
                rx.button(
                    rx.cond(state.deleting, "Deleting...", "Delete"),
                    color_scheme="red",
                    on_click=state.confirm_delete,
                    disabled=state.deleting,
                ),
                gap="2",
                justify="end",
            ),
            max_width="425px",
        ),
        open=state.delete_open,
        on_open_change=state.on_delete_open_change,
    )


# =========================================================================
# FIELDS: ADD / EDIT
# =========================================================================


def _labeled(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="text-sm font-medium text-gray-700 mb-1"),
        control,
        class_name="mb-3",
    )


def _type_choices(current: rx.Var, on_choose) -> rx.Component:
    """One checkbox per type; checking one replaces the previous choice."""
    return rx.flex(
        *[
            rx.checkbox(
                t.capitalize(),
                checked=current == t,
                on_change=on_choose(t),
            )
            for t in FIELD_TYPES
        ],
        direction="column",
        gap="2",
    )


def _field_inputs(title, description, category, type_, setters) -> rx.Component:
    set_title, set_description, set_category, choose_type = setters
    return rx.flex(
        _labeled(
            "Title",
            rx.el.input(
                value=title,
                on_change=set_title,
                placeholder="Field title",
                class_name=_INPUT_CLASS,
            ),
        ),
        _labeled(
            "Description",
            rx.el.textarea(
                value=description,
                on_change=set_description,
                placeholder="Field description",
                rows=3,
                class_name=_INPUT_CLASS + " resize-y",
            ),
        ),
        _labeled(
            "Category",
            rx.select(
                FIELD_CATEGORIES,
                value=category,
                on_change=set_category,
                placeholder="Select a category",
                size="2",
            ),
        ),
        _labeled("Type", _type_choices(type_, choose_type)),
        direction="column",
    )


def add_field_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.trigger(
            rx.button(rx.icon("plus", size=16), "Add field"),
        ),
        rx.dialog.content(
            rx.dialog.title("New Field"),
            rx.dialog.description(
                "Add a new field to your library.",
                class_name="text-sm text-gray-500 mb-4",
            ),
            _field_inputs(
                FieldsState.add_title,
                FieldsState.add_description,
                FieldsState.add_category,
                FieldsState.add_type,
                (
                    FieldsState.set_add_title,
                    FieldsState.set_add_description,
                    FieldsState.set_add_category,
                    FieldsState.choose_add_type,
                ),
            ),
            rx.flex(
                rx.button(
                    "Add",
                    on_click=FieldsState.submit_add,
                    loading=FieldsState.adding,
                    disabled=FieldsState.adding,
                ),
                justify="end",
                class_name="mt-4",
            ),
            max_width="425px",
        ),
        open=FieldsState.add_open,
        on_open_change=FieldsState.set_add_open,
    )


def edit_field_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Edit Field"),
            rx.dialog.description(
                "Edit the field details.",
                class_name="text-sm text-gray-500 mb-4",
            ),
            _field_inputs(
                FieldsState.edit_title,
                FieldsState.edit_description,
                FieldsState.edit_category,
                FieldsState.edit_type,
                (
                    FieldsState.set_edit_title,
                    FieldsState.set_edit_description,
                    FieldsState.set_edit_category,
                    FieldsState.choose_edit_type,
                ),
            ),
            rx.flex(
                rx.button(
                    "Save",
                    on_click=FieldsState.submit_edit,
                    disabled=FieldsState.saving,
                ),
                justify="end",
                class_name="mt-4",
            ),
            max_width="425px",
        ),
        open=FieldsState.edit_open,
        on_open_change=FieldsState.on_edit_open_change,
    )
