#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/parsers/markdown.py
"""Markdown tokenizer.

This module wraps the mistune parser and exposes its token tree, the
block/inline structure that the ADF converter walks. mistune is configured
from an immutable ``MarkdownParserOptions`` value; one mistune instance is
built per distinct configuration and reused read-only.

Tokens are plain dictionaries with a ``type`` key and, depending on the kind,
``children``, ``attrs`` and ``raw``.

"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Union

from mdadf.constants import DEPS_MARKDOWN
from mdadf.options.base import validate_options_type
from mdadf.options.markdown import MarkdownParserOptions
from mdadf.utils.decorators import debug_timer, requires_dependencies

if TYPE_CHECKING:
    import mistune

logger = logging.getLogger(__name__)

Token = dict[str, Any]


@lru_cache(maxsize=None)
def _build_markdown(options: MarkdownParserOptions) -> "mistune.Markdown":
    import mistune

    logger.debug("Building mistune parser with plugins %s", ", ".join(options.plugins) or "(none)")
    return mistune.create_markdown(renderer=None, hard_wrap=options.hard_wrap, plugins=list(options.plugins))


class MarkdownParser:
    r"""Parse markdown into mistune's token tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration; tables and strikethrough enabled by default

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> tokens = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [token["type"] for token in tokens]
        ['heading', 'blank_line', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        validate_options_type(options, MarkdownParserOptions, "MarkdownParser")
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, markdown_content: Union[str, bytes]) -> list[Token]:
        """Parse markdown into a list of block tokens.

        Parameters
        ----------
        markdown_content : str or bytes
            Markdown text; bytes are decoded as UTF-8

        Returns
        -------
        list of dict
            Top-level block tokens in document order

        """
        if isinstance(markdown_content, bytes):
            markdown_content = markdown_content.decode("utf-8", errors="replace")

        markdown = _build_markdown(self.options)
        with debug_timer(logger, "Parsing markdown"):
            tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            logger.warning("Unexpected mistune output of type %s; treating as empty", type(tokens).__name__)
            return []
        return tokens


def parse_markdown(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> list[Token]:
    """Parse markdown into mistune tokens with a one-off parser.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    list of dict
        Top-level block tokens

    """
    return MarkdownParser(options).parse(markdown_content)
