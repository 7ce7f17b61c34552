"""Conversion between JSON text and TOON text."""

import json
from typing import Optional

from .decoder import decode
from .encoder import encode
from .errors import FormatError
from .types import DecodeOptions, EncodeOptions


def json_to_toon(text: str, options: Optional[EncodeOptions] = None) -> str:
    """Convert JSON text to TOON text.

    Blank input converts to an empty string.

    Raises:
        FormatError: If the input is not valid JSON
    """
    if not text.strip():
        return ""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return encode(value, options)


def toon_to_json(text: str, options: Optional[DecodeOptions] = None, json_indent: Optional[int] = 2) -> str:
    """Convert TOON text to JSON text."""
    return json.dumps(decode(text, options), indent=json_indent, ensure_ascii=False)
