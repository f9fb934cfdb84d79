"""Add / edit page for a buyer or seller."""

import reflex as rx

from ..entities import STATUS_OPTIONS

_INPUT_CLASS = (
    "w-full border border-gray-300 rounded-lg px-3 py-2 text-sm "
    "focus:outline-none focus:border-accent"
)


def _error_text(message: rx.Var) -> rx.Component:
    return rx.cond(
        message != "",
        rx.text(message, class_name="text-xs text-red-500 mt-1"),
    )


def _text_field(label: str, value, on_change, error=None, placeholder: str = "") -> rx.Component:
    children = [
        rx.text(label, class_name="text-sm font-medium text-gray-700 mb-1"),
        rx.el.input(
            value=value,
            on_change=on_change,
            placeholder=placeholder,
            class_name=_INPUT_CLASS,
        ),
    ]
    if error is not None:
        children.append(_error_text(error))
    return rx.box(*children, class_name="mb-4")


def contact_form(state) -> rx.Component:
    schema = state.schema
    title = schema.title
    return rx.box(
        rx.link(
            rx.flex(
                rx.icon("arrow-left", size=14),
                rx.text(f"Back to {schema.plural.capitalize()}", class_name="text-sm"),
                align="center",
                gap="1",
            ),
            href=schema.route,
            underline="none",
            class_name="text-gray-500 hover:text-gray-800",
        ),
        rx.cond(
            state.form_loading,
            rx.text("Loading...", class_name="text-sm text-gray-500 py-8"),
            rx.box(
                _text_field(
                    f"{title} Name",
                    state.form_name,
                    state.set_form_name,
                    state.name_error,
                    placeholder=f"Enter {schema.singular} name",
                ),
                _text_field(
                    f"{title} Email",
                    state.form_email,
                    state.set_form_email,
                    state.email_error,
                    placeholder=f"Enter {schema.singular} email",
                ),
                _text_field(
                    f"{title} Phone",
                    state.form_phone,
                    state.set_form_phone,
                    state.phone_error,
                    placeholder=f"Enter {schema.singular} phone",
                ),
                rx.box(
                    rx.text("Status", class_name="text-sm font-medium text-gray-700 mb-1"),
                    rx.select(
                        STATUS_OPTIONS,
                        value=state.form_status,
                        on_change=state.set_form_status,
                        placeholder="Select a status",
                    ),
                    class_name="mb-4",
                ),
                rx.box(
                    rx.text(f"About {title}", class_name="text-sm font-medium text-gray-700 mb-1"),
                    rx.el.textarea(
                        value=state.form_about,
                        on_change=state.set_form_about,
                        rows=4,
                        class_name=_INPUT_CLASS + " resize-y",
                    ),
                    class_name="mb-6",
                ),
                rx.button(
                    rx.cond(state.submitting, "Saving...", "Save"),
                    on_click=state.submit,
                    disabled=state.submit_disabled,
                ),
                class_name="max-w-[560px] pt-6",
            ),
        ),
    )
