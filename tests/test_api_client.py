import json

import httpx
import pytest
import respx

from market_console import api_client
from market_console.entities import BUYERS, FIELDS, SELLERS
from market_console.exceptions import FetchError, MutationError

from .conftest import API


@pytest.mark.asyncio
@respx.mock
async def test_fetch_records_returns_list():
    respx.get(f"{API}/fields/get-fields").respond(
        status_code=200,
        json=[{"_id": "f1", "title": "Logo"}, "junk"],
    )
    records = await api_client.fetch_records(FIELDS)
    assert records == [{"_id": "f1", "title": "Logo"}]


@pytest.mark.asyncio
@respx.mock
async def test_fetch_records_rejects_non_list():
    respx.get(f"{API}/buyers/get-buyers").respond(status_code=200, json={"data": []})
    with pytest.raises(FetchError) as exc:
        await api_client.fetch_records(BUYERS)
    assert exc.value.message == "Failed to fetch buyers"


@pytest.mark.asyncio
@respx.mock
async def test_server_message_is_surfaced():
    respx.delete(f"{API}/fields/delete-field/f1").respond(
        status_code=409,
        json={"message": "Field is in use"},
    )
    with pytest.raises(MutationError) as exc:
        await api_client.delete_record(FIELDS, "f1")
    assert exc.value.message == "Field is in use"
    assert exc.value.status_code == 409
    assert exc.value.operation == "delete"


@pytest.mark.asyncio
@respx.mock
async def test_generic_message_when_body_has_none():
    respx.get(f"{API}/sellers/get-seller-by-id/s1").respond(status_code=500, text="boom")
    with pytest.raises(FetchError) as exc:
        await api_client.fetch_record(SELLERS, "s1")
    assert exc.value.message == "Failed to fetch seller details"
    assert exc.value.response_body == "boom"


@pytest.mark.asyncio
@respx.mock
async def test_connection_error_resets_client():
    respx.post(f"{API}/buyers/add-buyer").mock(side_effect=httpx.ConnectError("refused"))
    with pytest.raises(MutationError) as exc:
        await api_client.add_record(BUYERS, {"buyer_name": "Ann"})
    assert exc.value.message == "Failed to add buyer"
    assert api_client._client is None


@pytest.mark.asyncio
@respx.mock
async def test_add_and_update_send_json():
    add = respx.post(f"{API}/fields/add-field").respond(status_code=201, json={"_id": "f9", "title": "New"})
    update = respx.put(f"{API}/fields/update-field/f9").respond(status_code=200, text="ok")

    created = await api_client.add_record(FIELDS, {"title": "New"})
    updated = await api_client.update_record(FIELDS, "f9", {"_id": "f9", "title": "Renamed"})

    assert created["_id"] == "f9"
    assert updated == {}
    assert json.loads(add.calls.last.request.content) == {"title": "New"}
    assert b"Renamed" in update.calls.last.request.content


def test_error_message_helper():
    resp = httpx.Response(400, json={"message": "  "})
    assert api_client.error_message(resp, "fallback") == "fallback"
    resp = httpx.Response(400, json=["message"])
    assert api_client.error_message(resp, "fallback") == "fallback"
