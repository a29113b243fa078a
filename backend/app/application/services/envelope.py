"""Normalization of the Honda Aid API's inconsistent response envelopes.

Endpoints answer either ``{statusCode, message, data}`` or a bare
array/object; callers go through these helpers instead of guessing.
"""

from typing import Any

from app.application.interfaces import AdminApi
from app.domain.exceptions import (
    EntityNotFoundError,
    UnexpectedResponseFormatError,
    UpstreamApiError,
)


def unwrap_list(payload: Any, resource: str) -> list[Any]:
    """Return the list inside ``{data: [...]}`` or a bare list.

    Raises:
        UnexpectedResponseFormatError: for any other shape.
    """
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    if isinstance(payload, list):
        return payload
    raise UnexpectedResponseFormatError(resource)


def unwrap_record(payload: Any) -> Any:
    """Return the record inside ``{data: {...}}`` / ``{user: {...}}`` or the payload itself."""
    if isinstance(payload, dict):
        if isinstance(payload.get("data"), dict):
            return payload["data"]
        if isinstance(payload.get("user"), dict):
            return payload["user"]
    return payload


def records(payload: Any, resource: str) -> list[dict[str, Any]]:
    """``unwrap_list`` restricted to JSON objects; stray scalars are dropped."""
    return [item for item in unwrap_list(payload, resource) if isinstance(item, dict)]


def unwrap_object(payload: Any, resource: str) -> dict[str, Any]:
    """``unwrap_record`` that insists on a JSON object."""
    record = unwrap_record(payload)
    if not isinstance(record, dict):
        raise UnexpectedResponseFormatError(resource)
    return record


async def fetch_object(
    api: AdminApi, path: str, entity_type: str, entity_id: int | str
) -> dict[str, Any]:
    """GET a single record; a 404 from the API becomes EntityNotFoundError."""
    try:
        payload = await api.request("GET", path)
    except UpstreamApiError as e:
        if e.status_code == 404:
            raise EntityNotFoundError(entity_type, entity_id) from e
        raise
    if payload is None:
        raise EntityNotFoundError(entity_type, entity_id)
    return unwrap_object(payload, entity_type.lower())


async def delete_object(
    api: AdminApi, path: str, entity_type: str, entity_id: int | str
) -> None:
    """DELETE a single record; a 404 from the API becomes EntityNotFoundError."""
    try:
        await api.request("DELETE", path)
    except UpstreamApiError as e:
        if e.status_code == 404:
            raise EntityNotFoundError(entity_type, entity_id) from e
        raise
