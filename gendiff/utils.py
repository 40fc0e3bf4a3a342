"""Utility functions for gendiff."""

from __future__ import annotations

import json
import math
from typing import Any


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def get_type_name(value: Any) -> str:
    """Get a friendly type name for a value."""
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, int):
        return "integer"
    elif isinstance(value, float):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    else:
        return type(value).__name__


def values_equal(old: Any, new: Any) -> bool:
    """
    Strict deep equality of two decoded values.

    Scalars must share the exact type (``True`` is not ``1`` and ``1`` is
    not ``1.0``), except that NaN equals NaN. Mappings need the same key
    set with equal values; lists need the same length with pairwise equal
    items.
    """
    if type(old) is not type(new):
        return False

    if isinstance(old, dict):
        if old.keys() != new.keys():
            return False
        return all(values_equal(old[key], new[key]) for key in old)

    if isinstance(old, list):
        if len(old) != len(new):
            return False
        return all(values_equal(a, b) for a, b in zip(old, new))

    if isinstance(old, float) and math.isnan(old) and math.isnan(new):
        return True

    return old == new


def build_path(parent_path: str, key: str) -> str:
    """Build a dotted property path from parent path and key."""
    if not parent_path:
        return key
    return f"{parent_path}.{key}"


def to_json(value: Any, indent: int | None = None) -> str:
    """
    Encode a decoded value as JSON text.

    Values JSON has no form for (YAML dates and timestamps) are written as
    their string representation.
    """
    if indent is None:
        return json.dumps(value, ensure_ascii=False, default=str)
    return json.dumps(value, ensure_ascii=False, default=str, indent=indent)


def get_size_mb(content: bytes) -> float:
    """Get the size of raw content in megabytes."""
    return len(content) / (1024 * 1024)
