from market_console import table
from market_console.entities import BUYERS, FIELDS
from market_console.table import (
    ComputedColumn,
    LabelColumn,
    SortDirection,
    SortKey,
    ViewState,
)

NAME = BUYERS.columns[0]
EMAIL = BUYERS.columns[1]


def _derive(records, view, schema=BUYERS):
    return table.derive(records, schema.columns, view, schema.search_fields)


# --- filtering ---

def test_global_filter_is_case_insensitive_over_search_fields(buyers):
    view = table.set_global_filter(ViewState(), "ALI")
    rows = table.filter_records(buyers, view, BUYERS.search_fields)
    assert [r["buyer_name"] for r in rows] == ["alice"]


def test_global_filter_matches_phone(buyers):
    view = table.set_global_filter(ViewState(), "010-0003")
    rows = table.filter_records(buyers, view, BUYERS.search_fields)
    assert [r["_id"] for r in rows] == ["b3"]


def test_global_filter_ignores_fields_outside_search_set(buyers):
    # email is displayed but not searched
    view = table.set_global_filter(ViewState(), "example.com")
    assert table.filter_records(buyers, view, BUYERS.search_fields) == []


def test_fields_search_includes_category(fields):
    view = table.set_global_filter(ViewState(), "seller")
    rows = table.filter_records(fields, view, FIELDS.search_fields)
    assert [r["_id"] for r in rows] == ["f1", "f3"]


def test_column_filter_uses_accessor(fields):
    view = table.set_column_filter(ViewState(), "category", "BUY")
    rows = table.filter_records(fields, view, FIELDS.search_fields, FIELDS.columns)
    assert [r["_id"] for r in rows] == ["f2"]

    cleared = table.set_column_filter(view, "category", "")
    assert cleared.column_filters == ()


def test_filter_change_resets_page():
    view = ViewState(page_index=3)
    assert table.set_global_filter(view, "x").page_index == 0


# --- sorting ---

def test_toggle_sort_cycles_asc_desc_asc():
    view = table.toggle_sort(ViewState(), NAME)
    assert view.sorting == (SortKey(NAME.key, SortDirection.ASC),)
    view = table.toggle_sort(view, NAME)
    assert view.sorting[0].descending
    view = table.toggle_sort(view, NAME)
    assert not view.sorting[0].descending


def test_toggle_sort_on_non_sortable_column_is_noop():
    view = ViewState(page_index=2)
    assert table.toggle_sort(view, EMAIL) is view


def test_sort_is_case_insensitive_and_reversible(buyers):
    rows = table.sort_records(buyers[:4], (SortKey(NAME.key),), BUYERS.columns)
    assert [r["buyer_name"] for r in rows] == ["alice", "Bob", "Carol", "dave"]

    rows = table.sort_records(buyers[:4], (SortKey(NAME.key, SortDirection.DESC),), BUYERS.columns)
    assert [r["buyer_name"] for r in rows] == ["dave", "Carol", "Bob", "alice"]


def test_sort_is_stable_for_equal_keys():
    col = LabelColumn("k", "K", sortable=True)
    records = [{"_id": str(i), "k": "same"} for i in range(5)]
    rows = table.sort_records(records, (SortKey("k"),), (col,))
    assert [r["_id"] for r in rows] == ["0", "1", "2", "3", "4"]


def test_blank_values_sort_last():
    col = LabelColumn("k", "K", sortable=True)
    records = [{"_id": "1", "k": ""}, {"_id": "2", "k": "b"}, {"_id": "3", "k": "a"}]
    rows = table.sort_records(records, (SortKey("k"),), (col,))
    assert [r["_id"] for r in rows] == ["3", "2", "1"]


def test_computed_column_sorts_by_accessor():
    col = ComputedColumn("n", "N", accessor=lambda r: -int(r["n"]), sortable=True)
    records = [{"n": "1"}, {"n": "3"}, {"n": "2"}]
    rows = table.sort_records(records, (SortKey("n"),), (col,))
    assert [r["n"] for r in rows] == ["3", "2", "1"]


# --- pagination ---

def test_eleven_rows_make_two_pages(buyers):
    derived = _derive(buyers, ViewState())
    assert len(buyers) == 11
    assert derived.page_count == 2
    assert len(derived.rows) == 10
    assert not derived.can_previous
    assert derived.can_next

    view = table.next_page(ViewState(), len(buyers))
    derived = _derive(buyers, view)
    assert derived.page_index == 1
    assert [r["_id"] for r in derived.rows] == ["b10"]
    assert derived.can_previous
    assert not derived.can_next


def test_next_page_stops_at_last_page():
    view = ViewState(page_index=1)
    assert table.next_page(view, 11) is view
    assert table.previous_page(ViewState()) == ViewState()


def test_derive_clamps_page_when_collection_shrinks(buyers):
    derived = _derive(buyers[:5], ViewState(page_index=1))
    assert derived.page_index == 0
    assert len(derived.rows) == 5
    assert table.clamp_page(ViewState(page_index=4), 5).page_index == 0


# --- placeholder / summary ---

def test_placeholder_text():
    assert table.placeholder(True, 0) == "Loading..."
    assert table.placeholder(True, 5) == "Loading..."
    assert table.placeholder(False, 0) == "No results."
    assert table.placeholder(False, 3) == ""


def test_selection_summary_counts_filtered_rows(buyers):
    view = table.set_rows_selected(ViewState(), ["b0", "b1", "b2"], True)
    view = table.set_global_filter(view, "a")
    derived = _derive(buyers, view)
    # b2 (Bob) is filtered out and no longer counts
    assert derived.selected_count == 2
    assert table.selection_summary(derived.selected_count, derived.filtered_count) == (
        f"2 of {derived.filtered_count} row(s) selected."
    )


# --- selection / visibility ---

def test_select_all_applies_to_current_page_only(buyers):
    first_page = _derive(buyers, ViewState()).row_ids
    view = table.set_rows_selected(ViewState(), first_page, True)
    derived = _derive(buyers, view)
    assert derived.all_page_rows_selected
    assert derived.selected_count == 10

    derived = _derive(buyers, table.next_page(view, len(buyers)))
    assert not derived.all_page_rows_selected
    assert not derived.some_page_rows_selected


def test_toggle_single_row_and_clear():
    view = table.set_row_selected(ViewState(), "b1", True)
    assert view.selected == {"b1"}
    assert table.set_row_selected(view, "b1", False).selected == frozenset()
    assert table.clear_selection(view).selected == frozenset()


def test_hidden_columns_and_non_hideable():
    view = table.set_column_visible(ViewState(), EMAIL, False)
    keys = [c.key for c in table.visible_columns(BUYERS.columns, view)]
    assert EMAIL.key not in keys
    assert table.set_column_visible(view, EMAIL, True).hidden_columns == frozenset()

    pinned = LabelColumn("pin", "Pin", hideable=False)
    assert table.set_column_visible(ViewState(), pinned, False) == ViewState()
    assert table.hideable_columns((pinned, EMAIL)) == [EMAIL]


def test_view_state_dict_form():
    view = ViewState(
        sorting=(SortKey("title", SortDirection.DESC),),
        global_filter="q",
        hidden_columns=frozenset({"description"}),
        selected=frozenset({"f2", "f1"}),
        page_index=1,
    )
    data = view.as_dict()
    assert data["column_visibility"] == {"description": False}
    assert data["selected"] == ["f1", "f2"]
    assert data["sorting"] == [{"column": "title", "direction": "desc"}]
    assert ViewState.from_dict(data) == view
    assert ViewState.from_dict(None) == ViewState()


def test_partial_page_selection_is_reported(buyers):
    view = table.set_row_selected(ViewState(), "b3", True)
    derived = _derive(buyers, view)
    assert derived.some_page_rows_selected
    assert not derived.all_page_rows_selected
