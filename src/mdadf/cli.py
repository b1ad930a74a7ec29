#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/cli.py
"""Command-line interface for mdadf.

Two commands are provided:

- ``mdadf to-adf [FILE]`` reads markdown and writes ADF JSON
- ``mdadf to-text [FILE]`` reads ADF JSON and writes its plain text

Input is read from FILE, or from stdin when FILE is omitted or ``-``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Optional

from mdadf import __version__
from mdadf.api import document_from_json, to_json, to_plain_text
from mdadf.constants import DEFAULT_LOG_LEVEL, DEFAULT_TABLE_LAYOUT, ENV_LOG_LEVEL, TABLE_LAYOUTS
from mdadf.exceptions import MdAdfError
from mdadf.logging_utils import LOG_LEVEL_NAMES, configure_logging
from mdadf.options import AdfOptions, MarkdownParserOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1


def _option_help(options_class: type, field_name: str) -> str:
    """Return the help text recorded in an options dataclass field."""
    for f in fields(options_class):
        if f.name == field_name:
            return str(f.metadata.get("help", ""))
    raise KeyError(field_name)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdadf CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``to-adf`` and ``to-text`` subcommands

    """
    parser = argparse.ArgumentParser(
        prog="mdadf", description="Convert markdown to Atlassian Document Format and ADF back to plain text."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper(),
        help=f"Logging level (default: ${ENV_LOG_LEVEL} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_adf = subparsers.add_parser("to-adf", help="Convert markdown to ADF JSON")
    to_adf.add_argument("input", nargs="?", default="-", help="Markdown file (default: stdin)")
    to_adf.add_argument("--indent", type=int, default=None, help="Pretty-print with this indentation")
    to_adf.add_argument(
        "--no-tables",
        dest="parse_tables",
        action="store_false",
        help="Leave GFM pipe tables as plain paragraphs",
    )
    to_adf.add_argument(
        "--no-strikethrough",
        dest="parse_strikethrough",
        action="store_false",
        help="Leave ~~text~~ unformatted",
    )
    to_adf.add_argument("--hard-wrap", action="store_true", help=_option_help(MarkdownParserOptions, "hard_wrap"))
    to_adf.add_argument(
        "--preserve-inline-html", action="store_true", help=_option_help(AdfOptions, "preserve_inline_html")
    )
    to_adf.add_argument(
        "--table-layout",
        choices=list(TABLE_LAYOUTS),
        default=DEFAULT_TABLE_LAYOUT,
        help=_option_help(AdfOptions, "table_layout"),
    )

    to_text = subparsers.add_parser("to-text", help="Extract plain text from ADF JSON")
    to_text.add_argument("input", nargs="?", default="-", help="ADF JSON file (default: stdin)")

    return parser


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _run_to_adf(args: argparse.Namespace, data: bytes) -> str:
    parser_options = MarkdownParserOptions(
        parse_tables=args.parse_tables,
        parse_strikethrough=args.parse_strikethrough,
        hard_wrap=args.hard_wrap,
    )
    options = AdfOptions(table_layout=args.table_layout, preserve_inline_html=args.preserve_inline_html)
    return to_json(data, options=options, parser_options=parser_options, indent=args.indent)


def _run_to_text(args: argparse.Namespace, data: bytes) -> str:
    return to_plain_text(document_from_json(data))


def main(args: Optional[list[str]] = None) -> int:
    """Execute the mdadf CLI.

    Parameters
    ----------
    args : list of str or None, default = None
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    # argparse only checks choices for values given on the command line
    if parsed_args.log_level not in LOG_LEVEL_NAMES:
        parser.error(
            f"invalid ${ENV_LOG_LEVEL} value {os.environ.get(ENV_LOG_LEVEL)!r} "
            f"(choose from {', '.join(LOG_LEVEL_NAMES)})"
        )
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        data = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        if parsed_args.command == "to-adf":
            output = _run_to_adf(parsed_args, data)
        else:
            output = _run_to_text(parsed_args, data)
    except MdAdfError as e:
        logger.debug("Command %s failed", parsed_args.command, exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    sys.stdout.write(output)
    if parsed_args.command == "to-adf":
        sys.stdout.write("\n")
    return EXIT_SUCCESS
