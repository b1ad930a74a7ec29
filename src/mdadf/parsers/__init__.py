#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input parsers feeding the ADF converter."""

from mdadf.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["MarkdownParser", "parse_markdown"]
