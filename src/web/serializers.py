"""Shared serialization helpers for BlueBloom API routers.

Converts the dataclass transfer objects from src.core.data_types (and the
pydantic catalog models nested in them) into JSON-safe dicts. Every router
should use these instead of writing inline dict comprehensions.

Usage:
    from src.web.serializers import serialize, serialize_list

    # Whole object, recursively
    return serialize(summary)

    # Whitelisted fields only
    return serialize_list(actors, fields=["id", "name", "type", "country", "tags"])

    # With extra computed fields
    return serialize(actor, extra={"is_startup": actor.is_startup})
"""

import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel


def to_jsonable(value: Any) -> Any:
    """Recursively convert dataclasses, pydantic models, enums and dates."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_jsonable(v) for v in value]
    return value


def serialize(
    obj: Any,
    fields: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Convert a transfer object to a JSON-safe dict.

    Args:
        obj: Dataclass instance.
        fields: Whitelist of field names to include. If None, uses every dataclass field.
        exclude: Blacklist of field names to skip (only used when fields is None).
        extra: Additional key-value pairs to merge into the result.
    """
    if fields is None:
        exclude_set = set(exclude or [])
        fields = [f.name for f in dataclasses.fields(obj) if f.name not in exclude_set]

    result = {name: to_jsonable(getattr(obj, name, None)) for name in fields}
    if extra:
        result.update(extra)
    return result


def serialize_list(
    objects: Sequence[Any],
    fields: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """Serialize a list of transfer objects."""
    return [serialize(obj, fields=fields, exclude=exclude) for obj in objects]
