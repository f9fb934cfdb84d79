import pytest

from market_console.routes import DEFAULT_TITLE, page_title


@pytest.mark.parametrize(
    "path,title",
    [
        ("/buyers", "Buyers"),
        ("/sellers/", "Sellers"),
        ("/fields", "Fields"),
        ("/buyers/add-buyer", "Add Buyer"),
        ("/buyers/edit-buyer/abc123", "Edit Buyer"),
        ("/sellers/edit-seller/[record_id]", "Edit Seller"),
        ("/dashboard", "Dashboard"),
    ],
)
def test_page_title(path, title):
    assert page_title(path) == title


def test_unknown_route_falls_back():
    assert page_title("/") == DEFAULT_TITLE
    assert page_title("/reports/monthly") == DEFAULT_TITLE
