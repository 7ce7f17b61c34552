"""Core TOON encoding functionality."""

from typing import Any, Optional

from .constants import DEFAULT_INDENT
from .encoders import encode_to_string
from .normalize import normalize_value
from .types import EncodeOptions, ResolvedEncodeOptions


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode a value into TOON format.

    Args:
        value: The value to encode (JSON-like; other values are normalized)
        options: Optional encoding options

    Returns:
        TOON-formatted string
    """
    normalized = normalize_value(value)
    resolved_options = resolve_options(options)
    return encode_to_string(normalized, resolved_options)


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Resolve encoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedEncodeOptions()

    indent = options.get("indent", DEFAULT_INDENT)
    if indent < 1:
        raise ValueError(f"indent must be a positive number of spaces, got {indent}")

    return ResolvedEncodeOptions(indent=indent)
