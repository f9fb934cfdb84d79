import reflex as rx


def site_header(title: str) -> rx.Component:
    return rx.flex(
        rx.heading(title, size="4", class_name="text-gray-800 font-medium"),
        rx.spacer(),
        rx.icon("bell", size=18, class_name="text-gray-400"),
        align="center",
        class_name="h-12 px-6 border-b border-gray-200 gap-2",
    )
