#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/renderers/plaintext.py
"""Plain text rendering from ADF.

This module provides the PlainTextRenderer class which flattens an ADF tree
into text for terminal display and search. All marks are dropped; block
structure is kept with line breaks, ``- `` bullets indented by nesting depth,
``> `` quote prefixes and ``---`` rules.

Nodes are dispatched on their ADF ``type`` string, so nodes read from
foreign ADF (``GenericNode``) render through the same table. Kinds without a
handler contribute their own text followed by the text of their content,
which covers text nodes, table cells and ADF kinds this package does not
model.

"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from mdadf.adf.nodes import Document, Node
from mdadf.constants import (
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_RULE,
)
from mdadf.options.base import validate_options_type
from mdadf.options.plaintext import PlainTextOptions


class PlainTextRenderer:
    r"""Render ADF documents to plain, unformatted text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
        >>> from mdadf.adf import Document, Heading, Paragraph, Text, Mark
        >>> doc = Document(content=[
        ...     Heading(content=[Text("Title")], level=1),
        ...     Paragraph(content=[Text("bold", marks=[Mark.strong()])]),
        ... ])
        >>> PlainTextRenderer().render_to_string(doc)
        '\nTitle\nbold\n'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        validate_options_type(options, PlainTextOptions, "PlainTextRenderer")
        self.options: PlainTextOptions = options or PlainTextOptions()
        self._handlers: dict[str, Callable[[Node, int], str]] = {
            NODE_HEADING: self._render_spaced_block,
            NODE_CODE_BLOCK: self._render_spaced_block,
            NODE_PARAGRAPH: self._render_line_block,
            NODE_BULLET_LIST: self._render_line_block,
            NODE_ORDERED_LIST: self._render_line_block,
            NODE_LIST_ITEM: self._render_list_item,
            NODE_BLOCKQUOTE: self._render_blockquote,
            NODE_RULE: self._render_rule,
            NODE_HARD_BREAK: self._render_hard_break,
        }

    def render_to_string(self, document: Optional[Document]) -> str:
        """Render a document to plain text.

        Parameters
        ----------
        document : Document or None
            The document to render; None renders as an empty string

        Returns
        -------
        str
            Plain text output

        """
        if document is None:
            return ""
        return self._render_nodes(document.content, 0)

    def _render_nodes(self, nodes: Iterable[Node], depth: int) -> str:
        return "".join(self._render_node(node, depth) for node in nodes)

    def _render_node(self, node: Node, depth: int) -> str:
        handler = self._handlers.get(node.type)
        if handler is None:
            return self._render_other(node, depth)
        return handler(node, depth)

    def _render_spaced_block(self, node: Node, depth: int) -> str:
        """Headings and code blocks: set off by a leading and a trailing newline."""
        return "\n" + self._render_nodes(node.children, depth) + "\n"

    def _render_line_block(self, node: Node, depth: int) -> str:
        return self._render_nodes(node.children, depth) + "\n"

    def _render_list_item(self, node: Node, depth: int) -> str:
        prefix = self.options.list_indent * depth + self.options.bullet
        return prefix + self._render_nodes(node.children, depth + 1)

    def _render_blockquote(self, node: Node, depth: int) -> str:
        lines = self._render_nodes(node.children, depth).split("\n")
        while lines and lines[-1] == "":
            lines.pop()
        return "".join(f"{self.options.quote_prefix}{line}\n" for line in lines)

    def _render_rule(self, node: Node, depth: int) -> str:
        return self.options.rule + "\n"

    def _render_hard_break(self, node: Node, depth: int) -> str:
        return "\n"

    def _render_other(self, node: Node, depth: int) -> str:
        text = getattr(node, "text", None) or ""
        return text + self._render_nodes(node.children, depth)
