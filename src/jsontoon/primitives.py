"""Scalar formatting and parsing shared by the encoder and decoder."""

import math
import re
from typing import List, Optional

from .constants import (
    COMMA,
    EMPTY_ARRAY_LITERAL,
    EMPTY_OBJECT_LITERAL,
    FALSE_LITERAL,
    NULL_LITERAL,
    TRUE_LITERAL,
)
from .types import JsonPrimitive, JsonValue

_NUMBER_RE = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")
_INTEGER_RE = re.compile(r"^[-+]?\d+$")

# Integral floats below this magnitude print without a fractional part.
_MAX_INTEGRAL_FLOAT = 1e16


def format_number(value: float) -> str:
    """Return the locale-free text form of a number.

    ``3.0`` prints as ``3``; other floats use Python's shortest repr.
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < _MAX_INTEGRAL_FLOAT:
        return str(int(value))
    return repr(value)


def encode_primitive(value: JsonPrimitive) -> str:
    """Encode a primitive value. Strings are emitted verbatim."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return format_number(value)
    return value


def coerce_cell(value: JsonValue) -> str:
    """Flatten any value to a single cell of text.

    Used for tabular row cells and for non-tabular arrays written inline
    after a key. Nested structure is not expanded: arrays become their
    coerced items joined by commas and objects become ``{k:v,...}``, so the
    decoder cannot recover them.
    """
    if isinstance(value, list):
        return COMMA.join(coerce_cell(item) for item in value)
    if isinstance(value, dict):
        pairs = (f"{key}:{coerce_cell(item)}" for key, item in value.items())
        return "{" + COMMA.join(pairs) + "}"
    return encode_primitive(value)


def format_header(key: Optional[str], length: int, fields: List[str]) -> str:
    """Format a tabular array header such as ``users[2]{id,name}:``."""
    return f"{key or ''}[{length}]{{{COMMA.join(fields)}}}:"


def parse_primitive(token: str) -> JsonValue:
    """Parse a scalar token.

    Args:
        token: Text already trimmed of surrounding whitespace

    Returns:
        ``None``, a bool, an empty container for the empty literals, an int
        or float for finite numeric text, or the text itself
    """
    if token == NULL_LITERAL:
        return None
    if token == TRUE_LITERAL:
        return True
    if token == FALSE_LITERAL:
        return False
    if token == "":
        return ""
    if token == EMPTY_ARRAY_LITERAL:
        return []
    if token == EMPTY_OBJECT_LITERAL:
        return {}
    if _NUMBER_RE.match(token):
        if _INTEGER_RE.match(token):
            return int(token)
        number = float(token)
        if math.isfinite(number):
            return number
    return token
