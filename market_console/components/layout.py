"""Main layout: dark sidebar + light content area with a page header."""

import reflex as rx

from ..routes import page_title
from .sidebar import sidebar
from .site_header import site_header


def layout(route: str, content: rx.Component) -> rx.Component:
    """Two-panel layout: fixed sidebar + header and scrollable content."""
    return rx.flex(
        sidebar(),
        rx.box(
            site_header(page_title(route)),
            rx.box(content, class_name="px-10 py-6"),
            class_name="flex-1 min-h-screen overflow-y-auto bg-white",
        ),
        class_name="h-screen w-screen overflow-hidden",
    )
