"""Command line interface: ``jsontoon encode`` / ``jsontoon decode``."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_INDENT
from .convert import json_to_toon, toon_to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsontoon",
        description="Convert JSON to TOON and back.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Convert JSON to TOON")
    encode_parser.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    encode_parser.add_argument("-o", "--output", help="Output file; a bare name gets the .toon suffix")
    encode_parser.add_argument("--indent", type=int, default=DEFAULT_INDENT, help="Spaces per nesting level")

    decode_parser = subparsers.add_parser("decode", help="Convert TOON to JSON")
    decode_parser.add_argument("input", nargs="?", help="TOON file (default: stdin)")
    decode_parser.add_argument("-o", "--output", help="Output file")
    decode_parser.add_argument("--indent", type=int, default=DEFAULT_INDENT, help="Spaces per nesting level")
    decode_parser.add_argument("--strict", action="store_true", help="Reject tables that do not fit their header")
    decode_parser.add_argument("--json-indent", type=int, default=2, help="Indentation of the JSON output")

    return parser


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write_output(text: str, path: Optional[str], suffix: str = "") -> None:
    if path is None:
        sys.stdout.write(text + "\n")
        return
    target = Path(path)
    if suffix and not target.suffix:
        target = target.with_suffix(suffix)
    target.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", target)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _read_input(args.input)
        if args.command == "encode":
            _write_output(json_to_toon(text, {"indent": args.indent}), args.output, ".toon")
        else:
            result = toon_to_json(text, {"indent": args.indent, "strict": args.strict}, args.json_indent)
            _write_output(result, args.output)
    except (ValueError, OSError) as e:  # FormatError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
