"""Client-side table engine shared by the buyers, sellers and fields grids.

The grid is described by two values:

* a tuple of column descriptors (``LabelColumn`` / ``ComputedColumn``);
* an immutable ``ViewState`` holding sort, filters, visibility, selection
  and the current page.

Reducers take a ``ViewState`` and return a new one. ``derive`` projects a
record collection through the fixed pipeline filter -> sort -> paginate and
returns everything the UI needs to render one table.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

Record = Mapping[str, Any]

DEFAULT_PAGE_SIZE = 10

LOADING_TEXT = "Loading..."
NO_RESULTS_TEXT = "No results."


# =========================================================================
# COLUMNS
# =========================================================================

def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class LabelColumn:
    """A record field shown as-is under a literal header."""

    key: str
    label: str
    sortable: bool = False
    hideable: bool = True

    @property
    def accessor(self) -> Callable[[Record], str]:
        key = self.key
        return lambda record: _text(record.get(key))


@dataclass(frozen=True)
class ComputedColumn:
    """A column whose value is produced by an explicit accessor."""

    key: str
    label: str
    accessor: Callable[[Record], Any]
    sortable: bool = False
    hideable: bool = True


Column = Union[LabelColumn, ComputedColumn]


def find_column(columns: Iterable[Column], key: str) -> Column | None:
    for column in columns:
        if column.key == key:
            return column
    return None


# =========================================================================
# VIEW STATE
# =========================================================================

class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortKey:
    column: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class ViewState:
    sorting: tuple[SortKey, ...] = ()
    column_filters: tuple[tuple[str, str], ...] = ()
    global_filter: str = ""
    hidden_columns: frozenset[str] = field(default_factory=frozenset)
    selected: frozenset[str] = field(default_factory=frozenset)
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def as_dict(self) -> dict[str, Any]:
        """Plain JSON-friendly form, used to hold the view in UI state."""
        return {
            "sorting": [{"column": s.column, "direction": s.direction.value} for s in self.sorting],
            "column_filters": {k: v for k, v in self.column_filters},
            "global_filter": self.global_filter,
            "column_visibility": {key: False for key in sorted(self.hidden_columns)},
            "selected": sorted(self.selected),
            "page_index": self.page_index,
            "page_size": self.page_size,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ViewState":
        if not data:
            return cls()
        visibility = data.get("column_visibility") or {}
        return cls(
            sorting=tuple(
                SortKey(s["column"], SortDirection(s.get("direction", "asc")))
                for s in data.get("sorting") or ()
            ),
            column_filters=tuple((data.get("column_filters") or {}).items()),
            global_filter=data.get("global_filter") or "",
            hidden_columns=frozenset(k for k, visible in visibility.items() if not visible),
            selected=frozenset(data.get("selected") or ()),
            page_index=int(data.get("page_index") or 0),
            page_size=int(data.get("page_size") or DEFAULT_PAGE_SIZE),
        )


# =========================================================================
# REDUCERS
# =========================================================================

def set_global_filter(view: ViewState, text: str) -> ViewState:
    return replace(view, global_filter=text, page_index=0)


def set_column_filter(view: ViewState, column: str, text: str) -> ViewState:
    filters = {k: v for k, v in view.column_filters if k != column}
    if text:
        filters[column] = text
    return replace(view, column_filters=tuple(filters.items()), page_index=0)


def toggle_sort(view: ViewState, column: Column) -> ViewState:
    """Header click: asc -> desc -> asc on the same column, asc on a new one.

    Only one sort key is active at a time. Non-sortable columns are ignored.
    """
    if not column.sortable:
        return view
    current = view.sorting[0] if view.sorting else None
    if current is not None and current.column == column.key and not current.descending:
        direction = SortDirection.DESC
    else:
        direction = SortDirection.ASC
    return replace(view, sorting=(SortKey(column.key, direction),), page_index=0)


def set_column_visible(view: ViewState, column: Column, visible: bool) -> ViewState:
    if not column.hideable:
        return view
    hidden = set(view.hidden_columns)
    if visible:
        hidden.discard(column.key)
    else:
        hidden.add(column.key)
    return replace(view, hidden_columns=frozenset(hidden))


def set_row_selected(view: ViewState, row_id: str, selected: bool) -> ViewState:
    rows = set(view.selected)
    if selected:
        rows.add(row_id)
    else:
        rows.discard(row_id)
    return replace(view, selected=frozenset(rows))


def set_rows_selected(view: ViewState, row_ids: Iterable[str], selected: bool) -> ViewState:
    rows = set(view.selected)
    if selected:
        rows.update(row_ids)
    else:
        rows.difference_update(row_ids)
    return replace(view, selected=frozenset(rows))


def clear_selection(view: ViewState) -> ViewState:
    return replace(view, selected=frozenset())


def page_count(row_count: int, page_size: int) -> int:
    return math.ceil(row_count / page_size) if page_size > 0 else 0


def next_page(view: ViewState, row_count: int) -> ViewState:
    if view.page_index >= page_count(row_count, view.page_size) - 1:
        return view
    return replace(view, page_index=view.page_index + 1)


def previous_page(view: ViewState) -> ViewState:
    if view.page_index <= 0:
        return view
    return replace(view, page_index=view.page_index - 1)


def clamp_page(view: ViewState, row_count: int) -> ViewState:
    last = max(page_count(row_count, view.page_size) - 1, 0)
    if view.page_index <= last:
        return view
    return replace(view, page_index=last)


# =========================================================================
# PIPELINE
# =========================================================================

def matches(record: Record, text: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match against any of ``fields``."""
    if not text:
        return True
    needle = text.lower()
    return any(needle in _text(record.get(f)).lower() for f in fields)


def filter_records(
    records: Sequence[Record],
    view: ViewState,
    search_fields: Sequence[str],
    columns: Sequence[Column] = (),
) -> list[Record]:
    rows = [r for r in records if matches(r, view.global_filter, search_fields)]
    for key, text in view.column_filters:
        column = find_column(columns, key)
        if column is None or not text:
            continue
        needle = text.lower()
        rows = [r for r in rows if needle in _text(column.accessor(r)).lower()]
    return rows


def _sort_value(value: Any) -> tuple[int, Any]:
    if value is None or value == "":
        return (1, "")
    if isinstance(value, str):
        return (0, value.casefold())
    return (0, value)


def sort_records(
    records: Sequence[Record],
    sorting: Sequence[SortKey],
    columns: Sequence[Column],
) -> list[Record]:
    """Stable sort; with several keys the first one wins."""
    rows = list(records)
    for key in reversed(sorting):
        column = find_column(columns, key.column)
        if column is None or not column.sortable:
            continue
        accessor = column.accessor
        rows.sort(key=lambda r: _sort_value(accessor(r)), reverse=key.descending)
    return rows


def paginate(records: Sequence[Record], page_index: int, page_size: int) -> list[Record]:
    start = page_index * page_size
    return list(records[start:start + page_size])


def placeholder(loading: bool, filtered_count: int) -> str:
    """Text of the single placeholder row, or "" when rows should render."""
    if loading:
        return LOADING_TEXT
    if filtered_count == 0:
        return NO_RESULTS_TEXT
    return ""


def selection_summary(selected_count: int, filtered_count: int) -> str:
    return f"{selected_count} of {filtered_count} row(s) selected."


@dataclass(frozen=True)
class TableView:
    rows: list[Record]
    row_ids: list[str]
    visible_columns: list[Column]
    filtered_count: int
    selected_count: int
    page_index: int
    page_count: int
    can_previous: bool
    can_next: bool
    all_page_rows_selected: bool
    some_page_rows_selected: bool


def visible_columns(columns: Sequence[Column], view: ViewState) -> list[Column]:
    return [c for c in columns if not c.hideable or c.key not in view.hidden_columns]


def hideable_columns(columns: Sequence[Column]) -> list[Column]:
    return [c for c in columns if c.hideable]


def derive(
    records: Sequence[Record],
    columns: Sequence[Column],
    view: ViewState,
    search_fields: Sequence[str],
    id_field: str = "_id",
) -> TableView:
    filtered = filter_records(records, view, search_fields, columns)
    ordered = sort_records(filtered, view.sorting, columns)

    pages = page_count(len(ordered), view.page_size)
    page_index = min(view.page_index, max(pages - 1, 0))
    rows = paginate(ordered, page_index, view.page_size)
    row_ids = [_text(r.get(id_field)) for r in rows]

    selected_count = sum(1 for r in filtered if _text(r.get(id_field)) in view.selected)
    page_selected = [rid in view.selected for rid in row_ids]

    return TableView(
        rows=rows,
        row_ids=row_ids,
        visible_columns=visible_columns(columns, view),
        filtered_count=len(filtered),
        selected_count=selected_count,
        page_index=page_index,
        page_count=pages,
        can_previous=page_index > 0,
        can_next=page_index < pages - 1,
        all_page_rows_selected=bool(page_selected) and all(page_selected),
        some_page_rows_selected=any(page_selected),
    )
