"""Line-shape heuristics.

TOON has no quoting, so the decoder recognises structure by sniffing the
shape of each line. These checks are ambiguous for text that happens to
contain ``:``, ``[`` or ``{`` and are kept here, one function per shape, so
the ambiguity stays visible and testable.
"""

import re
from typing import List, Optional, Tuple

from .constants import COLON, COMMA

TABULAR_HEADER_RE = re.compile(r"^\[(\d+)\]\{(.+)\}:$")
KEYED_TABULAR_HEADER_RE = re.compile(r"^([^\[\]{}:]+)(\[.*\}:)$")
_KEY_LINE_RE = re.compile(r"^[^:]+:\s")


def match_tabular_header(line: str) -> Optional[Tuple[int, List[str]]]:
    """Match ``[N]{k1,k2}:`` and return the count and trimmed column keys."""
    match = TABULAR_HEADER_RE.match(line)
    if not match:
        return None
    fields = [field.strip() for field in match.group(2).split(COMMA)]
    return int(match.group(1)), fields


def looks_like_array_header(line: str) -> bool:
    """Whether a line has the ``[...]{...}:`` shape of an array header.

    Such a line is parsed as a header and must then match
    :data:`TABULAR_HEADER_RE` in full. Other lines opening with ``[``, such
    as ``[x]:`` or the ``[]:`` literal, are left to the object and literal
    rules.
    """
    return line.startswith("[") and "]{" in line and line.endswith("}:")


def split_keyed_tabular_header(line: str) -> Optional[Tuple[str, str]]:
    """Split ``key[N]{cols}:`` into ``key`` and ``[N]{cols}:``.

    Only the shape is checked here; the header half is validated when the
    rows are parsed.
    """
    match = KEYED_TABULAR_HEADER_RE.match(line)
    if not match:
        return None
    return match.group(1).strip(), match.group(2)


def is_bare_key_line(line: str) -> bool:
    """A ``key:`` line with nothing after its only colon.

    Its value lives on the following line(s). ``key: []:`` is not bare: the
    colon ending it is not the first one.
    """
    return line.endswith(COLON) and line.find(COLON) == len(line) - 1


def looks_like_key_line(line: str) -> bool:
    """Guess whether a line starts a new ``key: value`` entry.

    Used to stop collecting tabular rows. A row whose text contains ``: ``
    is misread as a key line.
    """
    return _KEY_LINE_RE.match(line) is not None


def is_row_line(line: str) -> bool:
    """Whether a line following a tabular header still belongs to it."""
    return not line.endswith(COLON) and not looks_like_key_line(line)


def needs_block(encoded: str) -> bool:
    """Whether a nested object encoding must go on its own indented lines.

    Multi-line text, or text carrying ``[``, ``{`` or a key separator, would
    be misread if written inline after its key.
    """
    return any(marker in encoded for marker in ("\n", "[", "{", COLON))
