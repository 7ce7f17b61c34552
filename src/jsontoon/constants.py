"""Literals of the TOON text format."""

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

EMPTY_ARRAY_LITERAL = "[]:"
EMPTY_OBJECT_LITERAL = "{}:"

COMMA = ","
COLON = ":"

DEFAULT_INDENT = 2
