"""CLI for parsing a Kantara file and writing its tree as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kantara.exceptions import KantaraError
from kantara.navigation import KantaraNode
from kantara.parser import parse_file


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kantara",
        description="Parse a Kantara definition file and write the resulting tree as JSON.",
    )
    parser.add_argument("input", help="Path to the Kantara file to parse.")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Where to write the JSON tree (defaults to <input>.json).",
    )
    parser.add_argument(
        "--imports",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Expand @import directives while parsing (default: enabled).",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation width (default: 2).")
    parser.add_argument("--tree", action="store_true", help="Print the parsed tree to stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser progress to stderr.")
    return parser.parse_args(argv)


def write_tree(input_path: Path, output_path: Path, imports: bool, indent: int, verbose: bool) -> KantaraNode:
    root = parse_file(
        input_path,
        allow_imports=imports,
        config={"enable_logger": verbose, "log_level": logging.DEBUG},
    )
    output_path.write_text(root.model_dump_json(indent=indent) + "\n", encoding="utf-8")
    return KantaraNode(root)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else Path(f"{args.input}.json")
    try:
        tree = write_tree(input_path, output_path, args.imports, args.indent, args.verbose)
    except (KantaraError, OSError, UnicodeDecodeError) as exc:
        print(f"Failed to parse {input_path}: {exc}", file=sys.stderr)
        return 1
    if args.tree:
        tree.print_tree()
    print(f"Wrote output to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
