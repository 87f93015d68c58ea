"""JSON dumping that tolerates cyclic structures."""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel as PydanticBaseModel

CIRCULAR_PLACEHOLDER = "[Circular]"


def _sanitize(value: Any, seen: set[int]) -> Any:
    """Copy ``value`` into plain JSON types, replacing repeated containers.

    A container already visited during this pass is replaced by
    ``CIRCULAR_PLACEHOLDER``, so cycles terminate.
    """
    if isinstance(value, PydanticBaseModel):
        value = value.model_dump(mode="json")

    if isinstance(value, (dict, list, tuple)):
        if id(value) in seen:
            return CIRCULAR_PLACEHOLDER
        seen.add(id(value))

        if isinstance(value, dict):
            return {str(k): _sanitize(v, seen) for k, v in value.items()}
        return [_sanitize(item, seen) for item in value]

    if isinstance(value, datetime):
        return value.isoformat()
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def safe_dumps(value: Any, indent: int | None = 2) -> str:
    """Serialize ``value`` to JSON without recursing forever on cycles.

    Args:
        value: Data to serialize.
        indent: JSON indentation (default 2).

    Returns:
        JSON string.
    """
    return json.dumps(_sanitize(value, set()), indent=indent, ensure_ascii=False)
