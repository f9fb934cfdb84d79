"""Collection reads and writes plus the local bookkeeping that follows them.

Records held in UI state are flat ``dict[str, str]``; everything coming back
from the API goes through ``normalize_record`` first.
"""

import logging
from typing import Any, Mapping, Sequence

from . import api_client
from .entities import EntitySchema, MutationStrategy

logger = logging.getLogger(__name__)

Record = dict[str, str]


def normalize_record(raw: Mapping[str, Any]) -> Record:
    return {k: str(v) if v is not None else "" for k, v in raw.items()}


def replace_record(records: Sequence[Record], updated: Mapping[str, Any], id_field: str) -> list[Record]:
    """Swap the record with ``updated``'s id; every other record is kept as-is."""
    target = str(updated.get(id_field, ""))
    new = normalize_record(updated)
    return [new if r.get(id_field) == target else r for r in records]


def remove_record(records: Sequence[Record], record_id: str, id_field: str) -> list[Record]:
    return [r for r in records if r.get(id_field) != record_id]


def find_record(records: Sequence[Record], record_id: str, id_field: str) -> Record | None:
    for r in records:
        if r.get(id_field) == record_id:
            return r
    return None


# =========================================================================
# READS
# =========================================================================

async def load_collection(schema: EntitySchema) -> list[Record]:
    raw = await api_client.fetch_records(schema)
    logger.debug(f"Loaded {len(raw)} {schema.plural}")
    return [normalize_record(r) for r in raw]


async def load_record(schema: EntitySchema, record_id: str) -> Record:
    return normalize_record(await api_client.fetch_record(schema, record_id))


# =========================================================================
# WRITES
# =========================================================================

async def create_entity(schema: EntitySchema, payload: Mapping[str, str]) -> Record:
    return normalize_record(await api_client.add_record(schema, dict(payload)))


async def update_entity(schema: EntitySchema, record_id: str, payload: Mapping[str, str]) -> Record:
    return normalize_record(await api_client.update_record(schema, record_id, dict(payload)))


async def save_edit(
    schema: EntitySchema,
    records: Sequence[Record],
    record: Mapping[str, str],
) -> list[Record]:
    """PUT a full replacement record.

    With the PATCH strategy the submitted record replaces its match in
    ``records``; with REFETCH the list comes back untouched and the caller
    reloads. Raises MutationError, leaving ``records`` unchanged.
    """
    record_id = record.get(schema.id_field, "")
    await update_entity(schema, record_id, record)
    if schema.edit_strategy is MutationStrategy.PATCH:
        return replace_record(records, record, schema.id_field)
    return list(records)


async def confirm_delete(schema: EntitySchema, records: Sequence[Record], record_id: str) -> list[Record]:
    """DELETE one record; same strategy rules as ``save_edit``."""
    await api_client.delete_record(schema, record_id)
    if schema.delete_strategy is MutationStrategy.PATCH:
        return remove_record(records, record_id, schema.id_field)
    return list(records)
