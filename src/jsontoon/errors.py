"""Errors raised while decoding TOON text."""


class FormatError(ValueError):
    """TOON text could not be decoded."""


class InvalidArrayHeaderError(FormatError):
    """A tabular array header line is malformed."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Invalid array header: {line!r}")
