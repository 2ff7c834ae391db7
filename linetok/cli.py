"""CLI interface for linetok.

Usage:
    # First number on the line
    echo 'call 555 or 42 today' | python -m linetok.cli -t number

    # Second match of any type, as JSON
    python -m linetok.cli -n 2 --json 'ping 10.0.0.1 then 10.0.0.2'

    # Token on the line containing offset 14 of a multi-line buffer
    python -m linetok.cli --point 14 < notes.txt

    # Token types of a preset, in trial order
    python -m linetok.cli --config developer --list-types

Exit status: 0 on a match, 1 when there is no Nth match, 2 on errors.
The config source defaults to $LINETOK_CONFIG (a .env file is honoured).
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from linetok.core.data_types import ANY, Line
from linetok.core.exceptions import LinetokBaseError
from linetok.finder import TokenFinder


def _print_message(message: str) -> None:
    sys.stderr.write(message + "\n")


def _build_finder(args: argparse.Namespace) -> TokenFinder:
    on_message = None
    if not args.quiet and not args.json:
        on_message = _print_message
    return TokenFinder(config=args.config, on_message=on_message)


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _current_line(text: str, point: Optional[int]) -> Line:
    if point is not None:
        return Line.at(text, point)
    lines = text.splitlines()
    return Line(lines[0] if lines else "")


def cmd_list_types(args: argparse.Namespace) -> int:
    """Print the configured token types, one per line."""
    finder = _build_finder(args)
    for token_type in finder.list_types():
        sys.stdout.write(token_type + "\n")
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    """Find and print the requested token."""
    finder = _build_finder(args)
    line = _current_line(_read_input(args), args.point)

    result = finder.capture(line, args.type, args.n)
    if result is None:
        return 1

    if args.json:
        output = {
            "type":  result.token_type,
            "start": result.buffer_span.start,
            "end":   result.buffer_span.end,
            "text":  result.text,
        }
        json.dump(output, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        sys.stdout.write(result.text + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linetok",
        description="Pick the Nth token of a type out of the current line",
    )
    parser.add_argument("text", nargs="?", default=None, help="Line text (default: stdin)")
    parser.add_argument("--config", default=None, help="Preset name or YAML path")
    parser.add_argument("-t", "--type", default=ANY, help="Token type, or 'any'")
    parser.add_argument("-n", type=int, default=1, help="Occurrence index (1 = first)")
    parser.add_argument("--point", type=int, default=None,
                        help="Treat input as a buffer and search the line containing this offset")
    parser.add_argument("--json", action="store_true", help="Print type, offsets and text as JSON")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress the confirmation message")
    parser.add_argument("--list-types", action="store_true", help="List token types and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    if args.config is None:
        args.config = os.environ.get("LINETOK_CONFIG") or None

    command = cmd_list_types if args.list_types else cmd_find
    try:
        return command(args)
    except (LinetokBaseError, ValueError) as exc:
        sys.stderr.write(f"linetok: {exc}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
