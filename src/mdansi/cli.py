#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the mdansi terminal renderer.

Reads markdown from a file or standard input and writes it to standard output
as ANSI-styled text wrapped to the terminal width.

Examples
--------
Render a file::

    $ mdansi README.md

Render standard input without colors, wrapped to 60 columns::

    $ cat notes.md | mdansi --no-color --width 60

Exit Codes
----------
0 on success, 1 on usage or input errors (unreadable file, invalid option
values, unknown language or theme), 2 when rendering fails.

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional

from mdansi.constants import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_CODE_THEME,
    DEFAULT_QUOTE_MARKER,
    EXIT_INPUT_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
)
from mdansi.exceptions import RenderingError, ValidationError
from mdansi.logging_utils import configure_logging
from mdansi.options.terminal import TerminalOptions
from mdansi.parsers.markdown import tokenize
from mdansi.renderers.terminal import TerminalRenderer
from mdansi.utils.terminal import detect_terminal_width, enable_ansi_support

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with the input error exit code."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_INPUT_ERROR, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the ``mdansi`` command."""
    parser = _ArgumentParser(
        prog="mdansi",
        description="Render markdown as ANSI-styled text for the terminal.",
    )
    parser.add_argument("input", nargs="?", metavar="FILE", help="Markdown file to render (default: stdin)")

    width_group = parser.add_mutually_exclusive_group()
    width_group.add_argument(
        "--width", type=_positive_int, metavar="N", help="Wrap output to N columns (default: terminal width)"
    )
    width_group.add_argument("--no-wrap", action="store_true", help="Never reflow text")

    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styles and syntax colors")
    parser.add_argument("--number-lists", action="store_true", help="Number the items of ordered lists")
    parser.add_argument("--heading-markers", action="store_true", help="Prefix headings with '#' markers")
    parser.add_argument(
        "--language", default=DEFAULT_CODE_LANGUAGE, help="Lexer used to highlight all code (default: %(default)s)"
    )
    parser.add_argument(
        "--theme", default=DEFAULT_CODE_THEME, help="Color theme for highlighted code (default: %(default)s)"
    )
    parser.add_argument(
        "--quote-marker", default=DEFAULT_QUOTE_MARKER, help="Prefix of block quote lines (default: %(default)r)"
    )
    parser.add_argument("--strict", action="store_true", help="Fail instead of skipping over-nested blocks")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def build_options(parsed_args: argparse.Namespace, styled: bool) -> TerminalOptions:
    """Build TerminalOptions from parsed arguments.

    Raises
    ------
    ValueError
        If an option value is invalid
    """
    if parsed_args.no_wrap:
        width = None
    elif parsed_args.width is not None:
        width = parsed_args.width
    else:
        width = detect_terminal_width(sys.stdout)

    return TerminalOptions(
        width=width,
        styled=styled,
        quote_marker=parsed_args.quote_marker,
        number_ordered_lists=parsed_args.number_lists,
        heading_markers=parsed_args.heading_markers,
        code_language=parsed_args.language,
        code_theme=parsed_args.theme,
        strict=parsed_args.strict,
    )


def main(args: list[str] | None = None) -> int:
    """Run the ``mdansi`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging(parsed_args)

    try:
        text = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    styled = not parsed_args.no_color and enable_ansi_support()

    try:
        options = build_options(parsed_args, styled)
        renderer = TerminalRenderer(options)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger.debug("Rendering with width=%s styled=%s", options.width, options.styled)

    try:
        renderer.render(tokenize(text), sys.stdout)
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
