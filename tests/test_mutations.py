import pytest
import respx

from market_console import mutations
from market_console.entities import BUYERS, FIELDS
from market_console.exceptions import MutationError

from .conftest import API


def test_normalize_record_stringifies_values():
    assert mutations.normalize_record({"_id": 1, "title": None, "n": 2.5}) == {
        "_id": "1",
        "title": "",
        "n": "2.5",
    }


def test_replace_and_remove_only_touch_the_target(fields):
    updated = {**fields[1], "title": "Remarks"}
    replaced = mutations.replace_record(fields, updated, "_id")
    assert [r["title"] for r in replaced] == ["Company", "Remarks", "Logo"]
    assert replaced[0] is fields[0]

    assert [r["_id"] for r in mutations.remove_record(fields, "f1", "_id")] == ["f2", "f3"]
    assert mutations.find_record(fields, "f3", "_id") is fields[2]
    assert mutations.find_record(fields, "nope", "_id") is None


@pytest.mark.asyncio
@respx.mock
async def test_load_collection_normalizes(fields):
    respx.get(f"{API}/fields/get-fields").respond(status_code=200, json=[{**fields[0], "order": 3}])
    records = await mutations.load_collection(FIELDS)
    assert records[0]["order"] == "3"


@pytest.mark.asyncio
@respx.mock
async def test_delete_field_removes_only_that_record(fields):
    route = respx.delete(f"{API}/fields/delete-field/f1").respond(status_code=200, json={})
    remaining = await mutations.confirm_delete(FIELDS, fields, "f1")
    assert route.called
    assert [r["_id"] for r in remaining] == ["f2", "f3"]


@pytest.mark.asyncio
@respx.mock
async def test_failed_delete_leaves_records_unchanged(fields):
    respx.delete(f"{API}/fields/delete-field/f1").respond(status_code=500)
    snapshot = [dict(r) for r in fields]
    with pytest.raises(MutationError) as exc:
        await mutations.confirm_delete(FIELDS, fields, "f1")
    assert exc.value.message == "Failed to delete field"
    assert fields == snapshot


@pytest.mark.asyncio
@respx.mock
async def test_refetch_strategy_returns_list_untouched(buyers):
    respx.delete(f"{API}/buyers/delete-buyer/b0").respond(status_code=200)
    remaining = await mutations.confirm_delete(BUYERS, buyers, "b0")
    assert remaining == buyers


@pytest.mark.asyncio
@respx.mock
async def test_save_edit_patches_with_submitted_record(fields):
    respx.put(f"{API}/fields/update-field/f2").respond(status_code=200, json={"ok": True})
    edited = {**fields[1], "title": "Remarks", "type": "input"}
    records = await mutations.save_edit(FIELDS, fields, edited)
    assert records[1] == edited
    assert records[0] == fields[0]
