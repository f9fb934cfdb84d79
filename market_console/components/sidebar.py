"""Dark sidebar with links to the three collections."""

import reflex as rx

from ..config import config
from ..entities import BUYERS, FIELDS, SELLERS

NAV_ITEMS = [
    ("shopping-cart", "Buyers", BUYERS.route),
    ("store", "Sellers", SELLERS.route),
    ("list", "Fields", FIELDS.route),
]


def sidebar() -> rx.Component:
    return rx.box(
        rx.flex(
            rx.text(
                config.app_title,
                class_name="text-lg font-semibold text-white px-3 py-4",
            ),
            rx.separator(class_name="mb-2"),
            *[_nav_link(icon, label, href) for icon, label, href in NAV_ITEMS],
            direction="column",
            gap="1",
        ),
        class_name="w-[240px] h-screen bg-gray-900 px-2 shrink-0",
    )


def _nav_link(icon: str, label: str, href: str) -> rx.Component:
    return rx.link(
        rx.flex(
            rx.icon(icon, size=16, class_name="text-gray-400"),
            rx.text(label, class_name="text-sm text-gray-100 ml-2"),
            align="center",
            class_name=(
                "px-3 py-2 rounded-lg hover:bg-gray-800 "
                "transition-colors duration-150 cursor-pointer"
            ),
        ),
        href=href,
        underline="none",
    )
