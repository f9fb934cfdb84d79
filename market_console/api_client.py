"""Async client for the buyers / sellers / fields REST API.

All calls use httpx.AsyncClient so Reflex event handlers never block.
Every failure is raised as FetchError (reads) or MutationError (writes)
whose message is safe to show in a toast.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from .config import config
from .entities import EntitySchema, Operation
from .exceptions import ApiError, FetchError, MutationError

logger = logging.getLogger(__name__)

API_URL = config.api_base_url

_client: httpx.AsyncClient | None = None


def _get_client() -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            base_url=API_URL,
            # No request timeout: a hung request keeps the UI in its
            # in-flight state until the transport resolves or fails.
            timeout=None,
            limits=httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30,
            ),
        )
    return _client


def _reset_client() -> None:
    """Close and discard the current client so the next call creates a fresh one."""
    global _client
    if _client is not None and not _client.is_closed:
        try:
            asyncio.get_running_loop().create_task(_client.aclose())
        except RuntimeError:
            # No running loop; the connection pool is dropped with the client.
            pass
    _client = None


def _error_cls(operation: Operation) -> type[ApiError]:
    return FetchError if operation in (Operation.LIST, Operation.GET) else MutationError


def error_message(resp: httpx.Response, fallback: str) -> str:
    """``message`` from a JSON error body, or ``fallback``."""
    try:
        data = resp.json()
    except ValueError:
        return fallback
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return fallback


async def _request(
    schema: EntitySchema,
    operation: Operation,
    method: str,
    record_id: Optional[str] = None,
    payload: Optional[dict[str, Any]] = None,
) -> httpx.Response:
    error_cls = _error_cls(operation)
    fallback = schema.failure_message(operation)
    path = schema.path(operation, record_id)

    try:
        if payload is None:
            resp = await _get_client().request(method, path)
        else:
            resp = await _get_client().request(method, path, json=payload)
    except (httpx.ConnectError, httpx.RemoteProtocolError, httpx.ReadError) as e:
        logger.warning(f"Connection error on {method} {path}, resetting client: {e}")
        _reset_client()
        raise error_cls(operation.value, fallback) from e
    except httpx.HTTPError as e:
        logger.error(f"Error on {method} {path}: {e}")
        raise error_cls(operation.value, fallback) from e

    if not resp.is_success:
        message = error_message(resp, fallback)
        logger.warning(f"{method} {path} failed with HTTP {resp.status_code}: {message}")
        raise error_cls(
            operation.value,
            message,
            status_code=resp.status_code,
            response_body=resp.text,
        )
    return resp


def _json(resp: httpx.Response, schema: EntitySchema, operation: Operation) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise _error_cls(operation)(
            operation.value,
            schema.failure_message(operation),
            status_code=resp.status_code,
            response_body=resp.text,
        ) from e


# =========================================================================
# READS
# =========================================================================

async def fetch_records(schema: EntitySchema) -> list[dict[str, Any]]:
    resp = await _request(schema, Operation.LIST, "GET")
    data = _json(resp, schema, Operation.LIST)
    if not isinstance(data, list):
        logger.error(f"Expected a JSON array from {schema.path(Operation.LIST)}, got {type(data).__name__}")
        raise FetchError(Operation.LIST.value, schema.failure_message(Operation.LIST), resp.status_code)
    return [r for r in data if isinstance(r, dict)]


async def fetch_record(schema: EntitySchema, record_id: str) -> dict[str, Any]:
    resp = await _request(schema, Operation.GET, "GET", record_id)
    data = _json(resp, schema, Operation.GET)
    if not isinstance(data, dict):
        raise FetchError(Operation.GET.value, schema.failure_message(Operation.GET), resp.status_code)
    return data


# =========================================================================
# WRITES
# =========================================================================

async def add_record(schema: EntitySchema, payload: dict[str, Any]) -> dict[str, Any]:
    resp = await _request(schema, Operation.ADD, "POST", payload=payload)
    data = _json(resp, schema, Operation.ADD)
    logger.info(f"Added {schema.singular} {data.get(schema.id_field, '') if isinstance(data, dict) else ''}")
    return data if isinstance(data, dict) else {}


async def update_record(schema: EntitySchema, record_id: str, payload: dict[str, Any]) -> dict[str, Any]:
    resp = await _request(schema, Operation.UPDATE, "PUT", record_id, payload)
    logger.info(f"Updated {schema.singular} {record_id}")
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


async def delete_record(schema: EntitySchema, record_id: str) -> None:
    await _request(schema, Operation.DELETE, "DELETE", record_id)
    logger.info(f"Deleted {schema.singular} {record_id}")
