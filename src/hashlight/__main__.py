"""Command-line entry point.

Usage:
    python -m hashlight example.ts --lang ts -o example.html --document
    python -m hashlight --list-languages
"""

from __future__ import annotations

import argparse
import logging
import sys

from hashlight.config import HighlightConfig
from hashlight.engine import BabiEngine
from hashlight.errors import HashlightError
from hashlight.grammars import GrammarRegistry
from hashlight.highlighting import Highlighter
from hashlight.renderer import wrap_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashlight",
        description="Render source code as hash-colored HTML using TextMate grammars",
    )
    parser.add_argument("source", nargs="?", default="-", help="Source file, or - for stdin")
    parser.add_argument("-l", "--lang", help="Language name or alias (e.g. ts, hs, python)")
    parser.add_argument("-o", "--output", help="Write HTML here instead of stdout")
    parser.add_argument(
        "--document", action="store_true", help="Wrap the fragment in a full HTML page"
    )
    parser.add_argument(
        "--escape", action="store_true", help="Escape token text and scope titles"
    )
    parser.add_argument(
        "--grammar-dir",
        action="append",
        default=[],
        dest="grammar_dirs",
        help="Extra directory of TextMate grammar JSON files (repeatable)",
    )
    parser.add_argument(
        "--list-languages", action="store_true", help="List known languages and exit"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8", newline="") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config = HighlightConfig(escape_html=args.escape, grammar_dirs=tuple(args.grammar_dirs))
    registry = GrammarRegistry.default(config.grammar_dirs)

    if args.list_languages:
        for info in registry.languages():
            aliases = ", ".join(info.aliases)
            print(f"{info.name:<24} {info.scope_name:<32} {aliases}")
        return 0

    if not args.lang:
        parser.error("--lang is required")

    highlighter = Highlighter(registry, BabiEngine.default(config.grammar_dirs), config)
    try:
        html = highlighter.highlight(_read_source(args.source), args.lang)
    except HashlightError as e:
        print(f"hashlight: {e}", file=sys.stderr)
        return 2

    if args.document:
        html = wrap_document(html)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(html)
    else:
        sys.stdout.write(html)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
