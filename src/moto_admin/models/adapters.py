"""
Payload adapters — one canonical shape per resource, resolved here and nowhere else.

Lists:    {"<plural>": [...], "pagination": {...}}   (pagination optional)
Entities: {"<singular>": {...}} or the bare object
"""

from __future__ import annotations

from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from moto_admin.errors import ResponseShapeError
from moto_admin.models.pagination import Page, Pagination

M = TypeVar("M", bound=BaseModel)


def page_of(model: Type[M], key: str) -> Callable[[Any], Page[M]]:
    def adapt(payload: Any) -> Page[M]:
        if not isinstance(payload, dict) or not isinstance(payload.get(key), list):
            raise ResponseShapeError(f"Unexpected response from server: missing '{key}' list")
        raw_pagination = payload.get("pagination")
        try:
            items = [model.model_validate(item) for item in payload[key]]
            pagination = Pagination.model_validate(raw_pagination) if isinstance(raw_pagination, dict) else None
        except ValidationError as e:
            raise ResponseShapeError(f"Unexpected response from server: invalid '{key}'",
                                     details={"errors": e.errors()}) from e
        return Page[model](items=items, pagination=pagination)  # type: ignore[valid-type]

    return adapt


def entity(model: Type[M], key: str) -> Callable[[Any], M]:
    def adapt(payload: Any) -> M:
        if not isinstance(payload, dict):
            raise ResponseShapeError(f"Unexpected response from server: expected a {key}")
        raw = payload[key] if isinstance(payload.get(key), dict) else payload
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise ResponseShapeError(f"Unexpected response from server: invalid {key}",
                                     details={"errors": e.errors()}) from e

    return adapt


def created(model: Type[M], key: str) -> Callable[[Any], M]:
    """Like entity(), but a record without an id is a failed creation."""
    inner = entity(model, key)

    def adapt(payload: Any) -> M:
        record = inner(payload)
        if getattr(record, "id", None) in (None, ""):
            raise ResponseShapeError(f"Server did not confirm the new {key} (no id returned)")
        return record

    return adapt


def detail(model: Type[M], key: str) -> Callable[[Any], M]:
    """Detail views carry the primary record under `key` plus related lists."""

    def adapt(payload: Any) -> M:
        if not isinstance(payload, dict) or not isinstance(payload.get(key), dict):
            raise ResponseShapeError(f"Unexpected response from server: missing '{key}'")
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise ResponseShapeError(f"Unexpected response from server: invalid {key} details",
                                     details={"errors": e.errors()}) from e

    return adapt


def acknowledged(payload: Any) -> dict[str, Any]:
    """Updates and deletes return a message or the updated object; either is fine."""
    return payload if isinstance(payload, dict) else {"result": payload}
