"""Route -> page title map used by the site header."""

from .entities import BUYERS, FIELDS, SELLERS

DEFAULT_TITLE = "Dashboard"

PAGE_TITLES: dict[str, str] = {
    "/dashboard": "Dashboard",
    FIELDS.route: "Fields",
    BUYERS.route: "Buyers",
    SELLERS.route: "Sellers",
    BUYERS.add_route: "Add Buyer",
    f"/{BUYERS.plural}/edit-{BUYERS.singular}": "Edit Buyer",
    SELLERS.add_route: "Add Seller",
    f"/{SELLERS.plural}/edit-{SELLERS.singular}": "Edit Seller",
}


def page_title(path: str) -> str:
    """Title for ``path``; dynamic segments fall back to their parent route."""
    path = path.rstrip("/") or "/"
    while path and path != "/":
        if path in PAGE_TITLES:
            return PAGE_TITLES[path]
        path = path.rsplit("/", 1)[0]
    return DEFAULT_TITLE
