import pytest

from market_console import api_client

API = "http://api.test"


@pytest.fixture(autouse=True)
def api_base(monkeypatch):
    """Point the shared client at a fake host and start each test with a fresh one."""
    monkeypatch.setattr(api_client, "API_URL", API)
    monkeypatch.setattr(api_client, "_client", None)
    yield API
    api_client._client = None


@pytest.fixture
def fields():
    return [
        {"_id": "f1", "title": "Company", "description": "Legal name", "category": "seller", "type": "input"},
        {"_id": "f2", "title": "Notes", "description": "Free text", "category": "buyer", "type": "textarea"},
        {"_id": "f3", "title": "Logo", "description": "Brand image", "category": "seller", "type": "upload"},
    ]


@pytest.fixture
def buyers():
    return [
        {
            "_id": f"b{i}",
            "buyer_name": name,
            "buyer_email": f"{name.lower()}@example.com",
            "buyer_phone": f"555-010-{i:04d}",
            "buyer_status": "active" if i % 2 else "pending",
            "buyer_about": "",
        }
        for i, name in enumerate(
            ["Carol", "alice", "Bob", "dave", "Eve", "Frank", "Grace", "Heidi", "Ivan", "Judy", "Mallory"]
        )
    ]
