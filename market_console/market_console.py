"""Market Console: Reflex UI.

Admin console for buyers, sellers and form fields, backed by the
marketplace REST API at API_BASE_URL.

Usage:
    reflex run
"""

import reflex as rx

from .components.contact_form import contact_form
from .components.data_table import data_table
from .components.dialogs import add_field_dialog, edit_field_dialog
from .components.layout import layout
from .config import config
from .entities import BUYERS, FIELDS, SELLERS
from .routes import page_title
from .state import (
    BuyerFormState,
    BuyersState,
    FieldsState,
    SellerFormState,
    SellersState,
)
from .utils.logger import setup_logging

logger = setup_logging()


def _add_link(schema) -> rx.Component:
    return rx.link(
        rx.button(rx.icon("plus", size=16), f"Add {schema.singular}"),
        href=schema.add_route,
        underline="none",
    )


# =========================================================================
# PAGES
# =========================================================================

def index() -> rx.Component:
    return rx.box()


def buyers() -> rx.Component:
    return layout(BUYERS.route, data_table(BuyersState, _add_link(BUYERS)))


def sellers() -> rx.Component:
    return layout(SELLERS.route, data_table(SellersState, _add_link(SELLERS)))


def fields() -> rx.Component:
    """Fields grid; add and edit happen in dialogs."""
    return layout(
        FIELDS.route,
        rx.fragment(
            data_table(FieldsState, add_field_dialog()),
            edit_field_dialog(),
        ),
    )


def add_buyer() -> rx.Component:
    return layout(BUYERS.add_route, contact_form(BuyerFormState))


def edit_buyer() -> rx.Component:
    return layout(BUYERS.edit_route(), contact_form(BuyerFormState))


def add_seller() -> rx.Component:
    return layout(SELLERS.add_route, contact_form(SellerFormState))


def edit_seller() -> rx.Component:
    return layout(SELLERS.edit_route(), contact_form(SellerFormState))


# =========================================================================
# APP
# =========================================================================

def _title(route: str) -> str:
    return f"{page_title(route)} — {config.app_title}"


app = rx.App(
    theme=rx.theme(
        appearance="light",
        accent_color="green",
        radius="medium",
    ),
)

app.add_page(index, route="/", title=config.app_title, on_load=rx.redirect(BUYERS.route))

app.add_page(buyers, route=BUYERS.route, title=_title(BUYERS.route), on_load=BuyersState.load_records)
app.add_page(sellers, route=SELLERS.route, title=_title(SELLERS.route), on_load=SellersState.load_records)
app.add_page(fields, route=FIELDS.route, title=_title(FIELDS.route), on_load=FieldsState.load_records)

app.add_page(
    add_buyer,
    route=BUYERS.add_route,
    title=_title(BUYERS.add_route),
    on_load=BuyerFormState.on_add_load,
)
app.add_page(
    edit_buyer,
    route=BUYERS.edit_route(),
    title=_title(BUYERS.edit_route()),
    on_load=BuyerFormState.on_edit_load,
)
app.add_page(
    add_seller,
    route=SELLERS.add_route,
    title=_title(SELLERS.add_route),
    on_load=SellerFormState.on_add_load,
)
app.add_page(
    edit_seller,
    route=SELLERS.edit_route(),
    title=_title(SELLERS.edit_route()),
    on_load=SellerFormState.on_edit_load,
)

logger.info(f"Market Console pages registered against {config.api_base_url}")
