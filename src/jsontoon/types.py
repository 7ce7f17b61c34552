"""Type definitions for jsontoon."""

from typing import Any, Dict, List, TypedDict, Union

# JSON-compatible types
JsonPrimitive = Union[str, int, float, bool, None]
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[JsonPrimitive, JsonArray, JsonObject]


class EncodeOptions(TypedDict, total=False):
    """Options for TOON encoding.

    Attributes:
        indent: Number of spaces per nesting level (default: 2)
    """

    indent: int


class DecodeOptions(TypedDict, total=False):
    """Options for TOON decoding.

    Attributes:
        indent: Number of spaces per nesting level (default: 2)
        strict: Raise on short or over-wide tabular rows instead of
            degrading them (default: False)
    """

    indent: int
    strict: bool


class ResolvedEncodeOptions:
    """Resolved encoding options with defaults applied."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent


class ResolvedDecodeOptions:
    """Resolved decoding options with defaults applied."""

    def __init__(self, indent: int = 2, strict: bool = False) -> None:
        self.indent = indent
        self.strict = strict

    @property
    def indent_unit(self) -> str:
        return " " * self.indent


# Depth type for tracking indentation level
Depth = int
