"""Core TOON decoding functionality."""

import logging
from typing import Dict, List, Optional

from .constants import COLON, COMMA, DEFAULT_INDENT, EMPTY_ARRAY_LITERAL, EMPTY_OBJECT_LITERAL
from .errors import FormatError, InvalidArrayHeaderError
from .patterns import (
    is_bare_key_line,
    is_row_line,
    looks_like_array_header,
    match_tabular_header,
    split_keyed_tabular_header,
)
from .primitives import parse_primitive
from .types import DecodeOptions, JsonArray, JsonObject, JsonValue, ResolvedDecodeOptions

logger = logging.getLogger(__name__)


def decode(text: str, options: Optional[DecodeOptions] = None) -> JsonValue:
    """Decode TOON text into a JSON value.

    Blank lines carry no meaning and are dropped before parsing. Decoding is
    lenient: lines of unknown shape become key/value pairs and short row
    blocks give shorter arrays.

    Args:
        text: TOON-formatted string
        options: Optional decoding options

    Returns:
        The decoded value

    Raises:
        InvalidArrayHeaderError: If an array header line is malformed
        FormatError: In strict mode, if a tabular block does not fit its header
    """
    resolved_options = resolve_options(options)
    lines = [line for line in text.splitlines() if line.strip()]
    return decode_lines(lines, resolved_options)


def resolve_options(options: Optional[DecodeOptions]) -> ResolvedDecodeOptions:
    """Resolve decoding options with defaults."""
    if options is None:
        return ResolvedDecodeOptions()

    indent = options.get("indent", DEFAULT_INDENT)
    if indent < 1:
        raise ValueError(f"indent must be a positive number of spaces, got {indent}")

    return ResolvedDecodeOptions(indent=indent, strict=options.get("strict", False))


def decode_lines(lines: List[str], options: ResolvedDecodeOptions) -> JsonValue:
    """Decode a document already split into non-blank lines."""
    if not lines:
        return parse_primitive("")

    first = lines[0]
    if first == EMPTY_ARRAY_LITERAL:
        return []
    if first == EMPTY_OBJECT_LITERAL:
        return {}
    if looks_like_array_header(first):
        return parse_tabular_array(lines, options)
    if len(lines) == 1 and COLON not in first:
        return parse_primitive(first.strip())
    return parse_object(lines, options)


def parse_tabular_array(lines: List[str], options: ResolvedDecodeOptions) -> JsonArray:
    """Parse a ``[N]{cols}:`` header line and the rows that follow it.

    At most ``N`` rows are read. Missing trailing cells become empty
    strings.
    """
    header = lines[0]
    parsed = match_tabular_header(header)
    if parsed is None:
        raise InvalidArrayHeaderError(header)
    count, fields = parsed

    rows = lines[1 : count + 1]
    if len(rows) < count:
        if options.strict:
            raise FormatError(f"Expected {count} rows after {header!r}, found {len(rows)}")
        logger.debug("Header %r declares %d rows, only %d present", header, count, len(rows))
    elif len(lines) > count + 1:
        logger.debug("Ignoring %d lines past the %d rows of %r", len(lines) - count - 1, count, header)

    return [parse_row(row, fields, options) for row in rows]


def parse_row(row: str, fields: List[str], options: ResolvedDecodeOptions) -> JsonObject:
    cells = [cell.strip() for cell in row.split(COMMA)]
    if len(cells) > len(fields):
        if options.strict:
            raise FormatError(f"Row {row!r} has {len(cells)} cells for {len(fields)} columns")
        logger.debug("Dropping %d extra cells in row %r", len(cells) - len(fields), row)

    obj: Dict[str, JsonValue] = {}
    for index, field in enumerate(fields):
        obj[field] = parse_primitive(cells[index]) if index < len(cells) else ""
    return obj


def parse_object(lines: List[str], options: ResolvedDecodeOptions) -> JsonObject:
    """Parse a block of ``key: value`` lines, nested blocks and tables."""
    result: Dict[str, JsonValue] = {}
    indent_unit = options.indent_unit
    i = 0

    while i < len(lines):
        line = lines[i]

        if not is_bare_key_line(line):
            key, _, raw_value = line.partition(COLON)
            result[key.strip()] = parse_primitive(raw_value.strip())
            i += 1
            continue

        keyed_header = split_keyed_tabular_header(line)
        if keyed_header is not None:
            key, header = keyed_header
            rows = collect_rows(lines, i + 1)
            result[key] = parse_tabular_array([header, *rows], options)
            i += 1 + len(rows)
            continue

        key = line[:-1].strip()
        if i + 1 >= len(lines):
            result[key] = None
            i += 1
            continue

        following = lines[i + 1]
        if looks_like_array_header(following):
            rows = collect_rows(lines, i + 2)
            result[key] = parse_tabular_array([following, *rows], options)
            i += 2 + len(rows)
        elif following.startswith(indent_unit):
            block: List[str] = []
            j = i + 1
            while j < len(lines) and lines[j].startswith(indent_unit):
                block.append(lines[j][len(indent_unit) :])
                j += 1
            result[key] = parse_object(block, options)
            i = j
        else:
            result[key] = parse_primitive(following.strip())
            i += 2

    return result


def collect_rows(lines: List[str], start: int) -> List[str]:
    """Collect the row lines of a table starting at ``start``."""
    end = start
    while end < len(lines) and is_row_line(lines[end]):
        end += 1
    return lines[start:end]

