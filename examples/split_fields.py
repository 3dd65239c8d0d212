#!/usr/bin/env python3
"""Split each line of a text file into fields and export to JSON.

Usage:
    python examples/split_fields.py <input_file> [-d DELIM | -r REGEX | -w] [-n LIMIT]

Examples:
    python examples/split_fields.py data.csv -d ,
    python examples/split_fields.py access.log -w -n 4 --spans
    python examples/split_fields.py app.log -r "\\s*\\|\\s*" -n -1 --pretty
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from tokensplit import WHITESPACE, PatternMatcher, Splitter, Token, TokenizerError
from tokensplit.matchers import Delimiter


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-serializable dict."""
    return {"text": token.text, "start": token.start, "end": token.end}


def split_file(input_path: Path, splitter: Splitter, *, spans: bool = False) -> list[Any]:
    """Split every line of a file and return JSON-serializable rows."""
    rows: list[Any] = []
    for line in input_path.read_text().splitlines():
        if spans:
            rows.append([token_to_dict(t) for t in splitter.split_spans(line)])
        else:
            rows.append(splitter.split(line))
    return rows


def build_delimiter(args: argparse.Namespace) -> Delimiter:
    """Pick the delimiter from the command-line options."""
    if args.regex is not None:
        return PatternMatcher(args.regex)
    if args.whitespace:
        return WHITESPACE
    return args.delimiter


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Split lines of a file into fields and export to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Limits:
  (none)  split on every delimiter, drop trailing empty fields
  -1      split on every delimiter, keep every field
  N       at most N fields, the last one holds the rest of the line
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Input text file to split",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-d", "--delimiter",
        default=",",
        help="Literal delimiter (default: ',')",
    )
    group.add_argument(
        "-r", "--regex",
        default=None,
        help="Regular expression delimiter",
    )
    group.add_argument(
        "-w", "--whitespace",
        action="store_true",
        help="Split on runs of whitespace",
    )
    parser.add_argument(
        "-n", "--limit",
        type=int,
        default=None,
        help="Split limit (default: none)",
    )
    parser.add_argument(
        "--spans",
        action="store_true",
        help="Include start/end offsets for each field",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log tokenizer debug output to stderr",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        splitter = Splitter(build_delimiter(args), limit=args.limit)
        rows = split_file(args.input, splitter, spans=args.spans)
    except (TokenizerError, ValueError) as e:
        print(f"Error splitting file: {e}", file=sys.stderr)
        return 1

    indent = 2 if args.pretty else None
    print(json.dumps(rows, indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
