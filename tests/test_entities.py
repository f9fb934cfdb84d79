import pytest

from market_console.entities import BUYERS, FIELDS, SELLERS, MutationStrategy, Operation


def test_rest_paths():
    assert BUYERS.path(Operation.LIST) == "/buyers/get-buyers"
    assert BUYERS.path(Operation.ADD) == "/buyers/add-buyer"
    assert SELLERS.path(Operation.GET, "s1") == "/sellers/get-seller-by-id/s1"
    assert FIELDS.path(Operation.UPDATE, "f1") == "/fields/update-field/f1"
    assert FIELDS.path(Operation.DELETE, "a/b") == "/fields/delete-field/a%2Fb"


def test_record_paths_require_an_id():
    with pytest.raises(ValueError):
        FIELDS.path(Operation.DELETE)


def test_messages():
    assert BUYERS.failure_message(Operation.LIST) == "Failed to fetch buyers"
    assert SELLERS.failure_message(Operation.GET) == "Failed to fetch seller details"
    assert FIELDS.failure_message(Operation.DELETE) == "Failed to delete field"
    assert BUYERS.success_message(Operation.DELETE) == "Buyer deleted successfully"
    assert FIELDS.success_message(Operation.ADD) == "Field added successfully"


def test_delete_prompts_name_the_record():
    assert "Ann's information" in BUYERS.describe_delete({"buyer_name": "Ann"})
    assert '"Logo"' in FIELDS.describe_delete({"title": "Logo"})


def test_per_entity_mutation_behaviour():
    assert BUYERS.delete_strategy is MutationStrategy.REFETCH
    assert BUYERS.close_delete_on_failure
    assert FIELDS.delete_strategy is MutationStrategy.PATCH
    assert FIELDS.edit_strategy is MutationStrategy.PATCH
    assert not FIELDS.close_delete_on_failure


def test_status_column_is_capitalized():
    status = BUYERS.columns[-1]
    assert status.accessor({"buyer_status": "pending"}) == "Pending"
    assert status.accessor({}) == ""
