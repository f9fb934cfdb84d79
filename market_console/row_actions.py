"""Per-row menu actions and what each one resolves to.

A row menu only ever offers Edit and Delete. Neither calls the API: Edit
navigates (buyers, sellers) or opens the edit dialog (fields), Delete opens
the confirmation dialog.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .entities import EditMode, EntitySchema


class RowAction(str, Enum):
    EDIT = "edit"
    DELETE = "delete"


ROW_ACTIONS: tuple[RowAction, ...] = (RowAction.EDIT, RowAction.DELETE)


class IntentKind(str, Enum):
    NAVIGATE = "navigate"
    OPEN_EDIT_DIALOG = "open_edit_dialog"
    CONFIRM_DELETE = "confirm_delete"


@dataclass(frozen=True)
class ActionIntent:
    kind: IntentKind
    record_id: str
    target: str = ""


def resolve(schema: EntitySchema, action: RowAction | str, record: Mapping[str, Any]) -> ActionIntent:
    """Map a menu click on ``record`` to the UI intent it triggers."""
    action = RowAction(action)
    record_id = str(record.get(schema.id_field, "") or "")
    if not record_id:
        raise ValueError(f"{schema.singular} row has no {schema.id_field}")

    if action is RowAction.DELETE:
        return ActionIntent(IntentKind.CONFIRM_DELETE, record_id)
    if schema.edit_mode is EditMode.PAGE:
        return ActionIntent(IntentKind.NAVIGATE, record_id, schema.edit_route(record_id))
    return ActionIntent(IntentKind.OPEN_EDIT_DIALOG, record_id)
