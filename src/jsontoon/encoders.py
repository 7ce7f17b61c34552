"""Encoders for different value types."""

from typing import List, Optional

from .constants import COMMA, EMPTY_ARRAY_LITERAL, EMPTY_OBJECT_LITERAL
from .normalize import detect_tabular_header, is_json_array, is_json_object, is_json_primitive
from .patterns import needs_block
from .primitives import coerce_cell, encode_primitive, format_header
from .types import Depth, JsonArray, JsonObject, JsonValue, ResolvedEncodeOptions
from .writer import LineWriter


def encode_value(value: JsonValue, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth = 0) -> None:
    """Encode a value to TOON format.

    Args:
        value: Normalized JSON value
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    if is_json_primitive(value):
        writer.push(depth, encode_primitive(value))
    elif is_json_array(value):
        encode_array(value, options, writer, depth)
    elif is_json_object(value):
        encode_object(value, options, writer, depth)
    else:
        raise TypeError(f"Cannot encode {type(value).__name__}; normalize the value first")


def encode_to_string(value: JsonValue, options: ResolvedEncodeOptions) -> str:
    writer = LineWriter(options.indent)
    encode_value(value, options, writer, 0)
    return writer.to_string()


def encode_array(arr: JsonArray, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth) -> None:
    """Encode an array to TOON format.

    Arrays of same-shaped objects use the tabular form. Any other array is
    written as its elements' encodings one after another, with no marker
    between elements.

    Args:
        arr: List array
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    if not arr:
        writer.push(depth, EMPTY_ARRAY_LITERAL)
        return

    fields = detect_tabular_header(arr)
    if fields:
        encode_array_of_objects_as_tabular(arr, fields, writer, depth, None)
        return

    for item in arr:
        encode_value(item, options, writer, depth)


def encode_array_of_objects_as_tabular(
    arr: List[JsonObject],
    fields: List[str],
    writer: LineWriter,
    depth: Depth,
    key: Optional[str],
) -> None:
    """Encode array of uniform objects in tabular format.

    Rows are written at the header's own depth.

    Args:
        arr: Array of uniform objects
        fields: Field names for header
        writer: Line writer for output
        depth: Current indentation depth
        key: Optional key name
    """
    writer.push(depth, format_header(key, len(arr), fields))
    for obj in arr:
        writer.push(depth, COMMA.join(coerce_cell(obj[field]) for field in fields))


def encode_object(obj: JsonObject, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth) -> None:
    """Encode an object to TOON format.

    Args:
        obj: Dictionary object
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    if not obj:
        writer.push(depth, EMPTY_OBJECT_LITERAL)
        return

    for key, value in obj.items():
        encode_key_value_pair(key, value, options, writer, depth)


def encode_key_value_pair(
    key: str, value: JsonValue, options: ResolvedEncodeOptions, writer: LineWriter, depth: Depth
) -> None:
    """Encode a key-value pair.

    Args:
        key: Key name
        value: Value to encode
        options: Resolved encoding options
        writer: Line writer for output
        depth: Current indentation depth
    """
    if is_json_array(value):
        fields = detect_tabular_header(value)
        if fields:
            encode_array_of_objects_as_tabular(value, fields, writer, depth, key)
            return

    if is_json_object(value) and value:
        nested = encode_to_string(value, options)
        if needs_block(nested):
            writer.push(depth, f"{key}:")
            writer.push_block(depth + 1, nested)
        else:
            writer.push(depth, f"{key}: {nested}")
        return

    writer.push(depth, f"{key}: {format_inline_value(value)}")


def format_inline_value(value: JsonValue) -> str:
    """Format a value written on its key's line."""
    if is_json_array(value):
        return coerce_cell(value) if value else EMPTY_ARRAY_LITERAL
    if is_json_object(value):
        return EMPTY_OBJECT_LITERAL
    return encode_primitive(value)
