"""Entity schemas: buyers, sellers and fields.

Each schema tells the generic machinery which fields a record carries, how
its grid is laid out, which REST paths it uses and how the UI reacts after a
write. Buyers and sellers only differ by their field prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote

from .table import Column, ComputedColumn, LabelColumn

ID_FIELD = "_id"

STATUS_OPTIONS = ["active", "inactive", "pending"]
FIELD_CATEGORIES = ["buyer", "seller"]
FIELD_TYPES = ["input", "textarea", "upload"]


class MutationStrategy(str, Enum):
    PATCH = "patch"      # update the owned list in place
    REFETCH = "refetch"  # reload the whole collection


class EditMode(str, Enum):
    PAGE = "page"
    DIALOG = "dialog"


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class EntitySchema:
    singular: str
    plural: str
    title: str
    columns: tuple[Column, ...]
    search_fields: tuple[str, ...]
    search_placeholder: str
    label_field: str
    delete_prompt: str
    edit_mode: EditMode
    edit_strategy: MutationStrategy
    delete_strategy: MutationStrategy
    close_delete_on_failure: bool
    id_field: str = ID_FIELD

    # --- REST paths ---

    def path(self, operation: Operation, record_id: Optional[str] = None) -> str:
        if operation is Operation.LIST:
            return f"/{self.plural}/get-{self.plural}"
        if operation is Operation.ADD:
            return f"/{self.plural}/add-{self.singular}"
        if not record_id:
            raise ValueError(f"{operation.value} {self.singular} requires a record id")
        rid = quote(str(record_id), safe="")
        if operation is Operation.GET:
            return f"/{self.plural}/get-{self.singular}-by-id/{rid}"
        return f"/{self.plural}/{operation.value}-{self.singular}/{rid}"

    # --- UI routes ---

    @property
    def route(self) -> str:
        return f"/{self.plural}"

    @property
    def add_route(self) -> str:
        return f"/{self.plural}/add-{self.singular}"

    def edit_route(self, record_id: str = "[record_id]") -> str:
        return f"/{self.plural}/edit-{self.singular}/{record_id}"

    # --- user-facing messages ---

    def failure_message(self, operation: Operation) -> str:
        if operation is Operation.LIST:
            return f"Failed to fetch {self.plural}"
        if operation is Operation.GET:
            return f"Failed to fetch {self.singular} details"
        return f"Failed to {operation.value} {self.singular}"

    def success_message(self, operation: Operation) -> str:
        past = {Operation.ADD: "added", Operation.UPDATE: "updated", Operation.DELETE: "deleted"}
        return f"{self.title} {past.get(operation, 'saved')} successfully"

    def describe_delete(self, record: dict) -> str:
        return self.delete_prompt.format(label=record.get(self.label_field, "") or "")


def _capitalized(key: str):
    return lambda record: str(record.get(key) or "").capitalize()


def contact_fields(prefix: str) -> dict[str, str]:
    """Form field -> record key, e.g. ``name -> buyer_name``."""
    return {f: f"{prefix}_{f}" for f in ("name", "email", "phone", "status", "about")}


def contact_schema(singular: str, plural: str) -> EntitySchema:
    keys = contact_fields(singular)
    title = singular.capitalize()
    return EntitySchema(
        singular=singular,
        plural=plural,
        title=title,
        columns=(
            LabelColumn(keys["name"], f"{title} Name", sortable=True),
            LabelColumn(keys["email"], f"{title} Email"),
            LabelColumn(keys["phone"], f"{title} Phone"),
            ComputedColumn(keys["status"], "Status", accessor=_capitalized(keys["status"])),
        ),
        search_fields=(keys["name"], keys["phone"]),
        search_placeholder="Search by name, phone...",
        label_field=keys["name"],
        delete_prompt="Are you sure you want to delete {label}'s information? This action cannot be undone.",
        edit_mode=EditMode.PAGE,
        edit_strategy=MutationStrategy.REFETCH,
        delete_strategy=MutationStrategy.REFETCH,
        close_delete_on_failure=True,
    )


BUYERS = contact_schema("buyer", "buyers")
SELLERS = contact_schema("seller", "sellers")

FIELDS = EntitySchema(
    singular="field",
    plural="fields",
    title="Field",
    columns=(
        LabelColumn("title", "Title", sortable=True),
        LabelColumn("description", "Description"),
        ComputedColumn("category", "Category", accessor=_capitalized("category")),
        ComputedColumn("type", "Type", accessor=_capitalized("type")),
    ),
    search_fields=("title", "description", "category"),
    search_placeholder="Search by title, category...",
    label_field="title",
    delete_prompt='Are you sure you want to delete "{label}"? This action cannot be undone.',
    edit_mode=EditMode.DIALOG,
    edit_strategy=MutationStrategy.PATCH,
    delete_strategy=MutationStrategy.PATCH,
    close_delete_on_failure=False,
)
