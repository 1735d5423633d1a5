"""
Convert HTML documents into word-wrapped plain text.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .conversion import parse_options, read_text, run_conversion
from .engine import Html2Txt
from .errors import HtmlError, HtmlErrorHandler, LoggingErrorHandler, RaisingErrorHandler
from .models import Html2TxtOptions
from .plugins import available_parsers, get_parser_factory

from . import parsing  # noqa: F401  # register the html parser plugin


def _split_option(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise argparse.ArgumentTypeError("Expected KEY=VALUE format.")
    key, value = token.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Option key cannot be empty.")
    return key, value


def write_output(path: Optional[Path], lines: List[str], *, dos: bool = False) -> None:
    newline = "\r\n" if dos else "\n"
    content = newline.join(lines) + newline if lines else ""
    if path is None:
        sys.stdout.write(content)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert HTML files to word-wrapped plain text.")
    parser.add_argument("input_path", type=Path, help="Path to the HTML input file.")
    parser.add_argument("-o", "--output", type=Path, help="Optional path to write the resulting text file.")
    parser.add_argument("--width", type=int, help="Page width in columns (default: $COLUMNS or 80).")
    parser.add_argument("--left-margin", type=int, help="Blank columns left of the text (default: 0).")
    parser.add_argument("--right-margin", type=int, help="Blank columns right of the text (default: 1).")
    parser.add_argument("--heading-font", help="FIGlet font for <h1>-<h3> headings.")
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        type=_split_option,
        metavar="KEY=VALUE",
        help="Additional conversion option in KEY=VALUE form (may repeat).",
    )
    parser.add_argument(
        "--parser",
        default="html",
        choices=available_parsers() or ["html"],
        help="Name of the parser plugin to use.",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Log markup problems as warnings and keep going instead of aborting.",
    )
    parser.add_argument("--dos", action="store_true", help="Terminate lines with CR LF.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions.")
    return parser


def build_options(args: argparse.Namespace) -> Html2TxtOptions:
    options = parse_options(dict(args.option or []))
    if args.width is not None:
        options.page_width = max(1, args.width)
    if args.left_margin is not None:
        options.left_margin = max(0, args.left_margin)
    if args.right_margin is not None:
        options.right_margin = max(0, args.right_margin)
    if args.heading_font:
        options.heading_font = args.heading_font
    return options


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    error_handler: HtmlErrorHandler = LoggingErrorHandler() if args.lenient else RaisingErrorHandler()
    try:
        markup = read_text(args.input_path)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    try:
        lines = run_conversion(
            markup,
            options=build_options(args),
            parser_factory=get_parser_factory(args.parser),
            converter_factory=Html2Txt,
            error_handler=error_handler,
        )
    except HtmlError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    except KeyError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    write_output(args.output, lines, dos=args.dos)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
