"""
jsontoon - JSON to TOON converter

TOON is a compact, indentation-based text form of JSON data. Arrays of
same-shaped objects are written as a header plus one comma-separated row per
element, so repeated keys are stated once.
"""

from .convert import json_to_toon, toon_to_json
from .decoder import decode
from .encoder import encode
from .errors import FormatError, InvalidArrayHeaderError
from .types import DecodeOptions, EncodeOptions, JsonValue

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "json_to_toon",
    "toon_to_json",
    "FormatError",
    "InvalidArrayHeaderError",
    "EncodeOptions",
    "DecodeOptions",
    "JsonValue",
]
