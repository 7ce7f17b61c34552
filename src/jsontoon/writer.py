"""Line writer for building indented TOON output."""

from typing import List

from .types import Depth


class LineWriter:
    """Collects output lines, indenting each by its depth."""

    def __init__(self, indent: int = 2) -> None:
        self._indentation = " " * indent
        self._lines: List[str] = []

    def push(self, depth: Depth, line: str) -> None:
        self._lines.append(self._indentation * depth + line)

    def push_block(self, depth: Depth, text: str) -> None:
        """Push every line of an already encoded block at ``depth``."""
        for line in text.split("\n"):
            self.push(depth, line)

    def to_string(self) -> str:
        return "\n".join(self._lines)
