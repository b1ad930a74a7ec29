#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the mistune settings used when reading markdown.
"""
# src/mdadf/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdadf.constants import DEFAULT_HARD_WRAP, DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from mdadf.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown parsing.

    The value is immutable and hashable, so one parser can be built per
    distinct configuration and shared between conversions.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    hard_wrap : bool, default False
        Treat every newline inside a paragraph as a hard line break.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~"},
    )
    hard_wrap: bool = field(
        default=DEFAULT_HARD_WRAP,
        metadata={"help": "Treat single newlines as hard line breaks"},
    )

    @property
    def plugins(self) -> tuple[str, ...]:
        """Names of the mistune plugins these options enable."""
        plugins = []
        if self.parse_strikethrough:
            plugins.append("strikethrough")
        if self.parse_tables:
            plugins.append("table")
        return tuple(plugins)
