"""Normalization of Python input into the JSON value model."""

import math
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from .types import JsonArray, JsonValue


def normalize_value(value: Any) -> JsonValue:
    """Normalize a Python value to a JSON-compatible type.

    Pydantic models are detected by duck typing (``model_dump`` for v2,
    ``dict`` for v1) so pydantic is never imported here. Values with no JSON
    counterpart fall back to their ``str()`` form, which keeps encoding total.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    if isinstance(value, (set, frozenset)):
        try:
            return [normalize_value(item) for item in sorted(value)]
        except TypeError:
            return [normalize_value(item) for item in sorted(value, key=repr)]
    if isinstance(value, Mapping):
        return {str(k): normalize_value(v) for k, v in value.items()}

    # v2 BaseModel detection
    if callable(getattr(value, "model_dump", None)):
        return normalize_value(value.model_dump())
    # v1 BaseModel detection
    if hasattr(value, "__fields__") and callable(getattr(value, "dict", None)):
        return normalize_value(value.dict())

    return str(value)


def is_json_primitive(value: Any) -> bool:
    """Check if value is a JSON primitive type."""
    return value is None or isinstance(value, (str, int, float, bool))


def is_json_array(value: Any) -> bool:
    """Check if value is a JSON array."""
    return isinstance(value, list)


def is_json_object(value: Any) -> bool:
    """Check if value is a JSON object."""
    return isinstance(value, dict)


def detect_tabular_header(arr: JsonArray) -> Optional[List[str]]:
    """Detect if an array can use the tabular form and return its columns.

    Every element must be an object with the same key set as the first
    element. Key order inside the other elements does not matter; the first
    element's order fixes the column order. Values are not inspected, so
    nested arrays and objects are allowed in cells.

    Args:
        arr: Array to check

    Returns:
        Column keys if tabular, None otherwise
    """
    if not arr or not is_json_object(arr[0]):
        return None

    first_keys = list(arr[0].keys())
    if not first_keys:
        return None

    for obj in arr:
        if not is_json_object(obj):
            return None
        if len(obj) != len(first_keys):
            return None
        if not all(key in obj for key in first_keys):
            return None

    return first_keys

