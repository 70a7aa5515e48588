"""Command-line interface for md2html."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bs4 import BeautifulSoup

from md2html.converter import convert, parse_to_json
from md2html.exceptions import Md2htmlError
from md2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert markdown-like text to an HTML fragment.",
    )
    parser.add_argument("source", nargs="?", default="-", help="Input file path, or '-' for stdin (default)")
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    parser.add_argument("--ast", action="store_true", help="Print the parsed node tree as JSON instead of HTML")
    parser.add_argument("--pretty", action="store_true", help="Indent the generated HTML")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG" if args.verbose > 1 else "INFO")
    else:
        configure_logging()

    try:
        text = load_source(args.source)
        result = render(text, ast=args.ast, pretty=args.pretty)
    except (Md2htmlError, OSError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"md2html: {exc}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result + "\n")
    return 0


def load_source(source: str) -> str | bytes:
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Source file not found: {path}")
    # Decoded by the converter, which reports invalid UTF-8 as an InputError.
    return path.read_bytes()


def render(text: str | bytes, *, ast: bool = False, pretty: bool = False) -> str:
    if ast:
        return parse_to_json(text)
    html = convert(text)
    if pretty:
        # html.parser keeps the fragment as-is; lxml would add <html><body>.
        return BeautifulSoup(html, "html.parser").prettify().rstrip("\n")
    return html
