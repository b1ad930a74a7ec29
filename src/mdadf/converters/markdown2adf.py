#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/converters/markdown2adf.py
"""Markdown to ADF converter.

This module walks the mistune token tree produced by
``mdadf.parsers.markdown`` and builds the equivalent ADF node tree.

Block tokens map one-to-one onto ADF blocks. Inline tokens are flattened into
a sequence of ``text`` and ``hardBreak`` nodes: every formatting construct
(emphasis, strong, strikethrough, code span, link) becomes a mark that is
appended to the marks inherited from the enclosing constructs. Marks are
carried as tuples and extended by concatenation, so text nodes in sibling
subtrees never share a mark sequence.

Markdown with no ADF counterpart degrades instead of failing: raw HTML is
dropped, images become their alt text, unknown tokens are skipped (blocks)
or unwrapped (inlines).

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union
from urllib.parse import unquote

from mdadf.adf.nodes import (
    Blockquote,
    BulletList,
    CodeBlock,
    HardBreak,
    Heading,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from mdadf.constants import MAX_HEADING_LEVEL
from mdadf.options.adf import AdfOptions
from mdadf.options.base import validate_options_type
from mdadf.options.markdown import MarkdownParserOptions
from mdadf.parsers.markdown import MarkdownParser, Token
from mdadf.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

Marks = tuple[Mark, ...]

_NO_MARKS: Marks = ()


def _children(token: Token) -> list[Token]:
    children = token.get("children")
    return children if isinstance(children, list) else []


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def _collect_text(token: Token) -> str:
    """Concatenate the raw text of every text-run descendant of ``token``."""
    parts = []
    for child in _children(token):
        if child.get("type") == "text":
            parts.append(child.get("raw", ""))
        else:
            parts.append(_collect_text(child))
    return "".join(parts)


class MarkdownToAdfConverter:
    r"""Convert markdown to ADF nodes.

    Parameters
    ----------
    options : AdfOptions or None, default = None
        ADF output options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parser configuration (tables and strikethrough enabled by default)

    Examples
    --------
        >>> converter = MarkdownToAdfConverter()
        >>> nodes = converter.convert("# Title\n\nSome **bold** text")
        >>> [node.type for node in nodes]
        ['heading', 'paragraph']

    """

    def __init__(
        self,
        options: AdfOptions | None = None,
        parser_options: MarkdownParserOptions | None = None,
    ):
        """Initialize the converter with output and parser options."""
        validate_options_type(options, AdfOptions, "MarkdownToAdfConverter")
        self.options: AdfOptions = options or AdfOptions()
        self.parser = MarkdownParser(parser_options)

        self._block_handlers: dict[str, Callable[[Token], Node | None]] = {
            "paragraph": self._convert_paragraph,
            "block_text": self._convert_paragraph,
            "heading": self._convert_heading,
            "list": self._convert_list,
            "list_item": self._convert_list_item,
            "block_code": self._convert_code_block,
            "block_quote": self._convert_block_quote,
            "thematic_break": self._convert_thematic_break,
            "table": self._convert_table,
        }
        self._inline_handlers: dict[str, Callable[[Token, Marks], list[Node]]] = {
            "text": self._convert_text,
            "linebreak": self._convert_linebreak,
            "softbreak": self._convert_softbreak,
            "emphasis": self._convert_emphasis,
            "strong": self._convert_strong,
            "strikethrough": self._convert_strikethrough,
            "codespan": self._convert_codespan,
            "link": self._convert_link,
            "image": self._convert_image,
            "inline_html": self._convert_inline_html,
        }

    def convert(self, markdown_content: Union[str, bytes]) -> list[Node]:
        """Parse markdown and convert it to top-level ADF block nodes.

        Parameters
        ----------
        markdown_content : str or bytes
            Markdown text

        Returns
        -------
        list of Node
            Top-level blocks in document order (possibly empty)

        """
        tokens = self.parser.parse(markdown_content)
        with debug_timer(logger, "Converting markdown tokens to ADF"):
            return self.convert_tokens(tokens)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def convert_tokens(self, tokens: list[Token]) -> list[Node]:
        """Convert a sequence of block tokens, dropping those without an ADF form."""
        nodes: list[Node] = []
        for token in tokens:
            node = self.convert_block(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def convert_block(self, token: Token) -> Node | None:
        """Convert a single block token.

        Parameters
        ----------
        token : dict
            mistune block token

        Returns
        -------
        Node or None
            The ADF block, or None when the token has no ADF form

        """
        token_type = token.get("type", "")
        handler = self._block_handlers.get(token_type)
        if handler is None:
            if token_type != "blank_line":
                logger.debug("Dropping unsupported block token: %s", token_type)
            return None
        return handler(token)

    def _convert_paragraph(self, token: Token) -> Paragraph | None:
        content = self._convert_inline_children(token)
        if not content:
            return None
        return Paragraph(content=content)

    def _convert_heading(self, token: Token) -> Heading:
        level = _attrs(token).get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= MAX_HEADING_LEVEL:
            level = 1
        return Heading(content=self._convert_inline_children(token), level=level)

    def _convert_list(self, token: Token) -> BulletList | OrderedList:
        attrs = _attrs(token)
        items = self.convert_tokens(_children(token))
        if attrs.get("ordered", False):
            return OrderedList(content=items, order=attrs.get("start", 1))
        return BulletList(content=items)

    def _convert_list_item(self, token: Token) -> ListItem:
        """Convert a list item, normalizing tight and loose text to paragraphs."""
        content: list[Node] = []
        for child in _children(token):
            child_type = child.get("type")
            node: Node | None
            if child_type in ("block_text", "paragraph"):
                node = self._convert_paragraph(child)
            elif child_type == "list":
                node = self._convert_list(child)
            else:
                node = self.convert_block(child)
            if node is not None:
                content.append(node)
        return ListItem(content=content)

    def _convert_code_block(self, token: Token) -> CodeBlock:
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]

        # Language is the first word of the fence info string
        info = _attrs(token).get("info") or ""
        parts = info.split(maxsplit=1)
        language = parts[0] if parts else None

        return CodeBlock.from_code(code, language)

    def _convert_block_quote(self, token: Token) -> Blockquote:
        return Blockquote(content=self.convert_tokens(_children(token)))

    def _convert_thematic_break(self, token: Token) -> Rule:
        return Rule()

    def _convert_table(self, token: Token) -> Table:
        rows: list[TableRow] = []
        for child in _children(token):
            child_type = child.get("type")
            if child_type == "table_head":
                # Header cells are direct children of table_head
                rows.append(self._convert_table_row(child, is_header=True))
            elif child_type == "table_body":
                for row in _children(child):
                    if row.get("type") == "table_row":
                        rows.append(self._convert_table_row(row, is_header=False))
            elif child_type == "table_row":
                rows.append(self._convert_table_row(child, is_header=False))

        return Table(content=rows, layout=self.options.table_layout)

    def _convert_table_row(self, token: Token, is_header: bool) -> TableRow:
        cells = [
            self._convert_table_cell(cell, is_header) for cell in _children(token) if cell.get("type") == "table_cell"
        ]
        return TableRow(content=cells)

    def _convert_table_cell(self, token: Token, is_header: bool) -> TableHeader | TableCell:
        content = self._convert_inline_children(token)
        # ADF cells need block content; an empty cell still gets one text node
        paragraph = Paragraph(content=content or [Text("")])
        cell_class = TableHeader if is_header else TableCell
        return cell_class(content=(paragraph,), colspan=1, rowspan=1)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _convert_inline_children(self, token: Token) -> list[Node]:
        nodes: list[Node] = []
        for child in _children(token):
            nodes.extend(self.convert_inline(child, _NO_MARKS))
        return nodes

    def convert_inline(self, token: Token, marks: Marks) -> list[Node]:
        """Convert an inline token under the marks of its enclosing constructs.

        Parameters
        ----------
        token : dict
            mistune inline token
        marks : tuple of Mark
            Marks inherited from enclosing constructs, outermost first

        Returns
        -------
        list of Node
            Text and hardBreak nodes

        """
        handler = self._inline_handlers.get(token.get("type", ""))
        if handler is None:
            return self._convert_with_marks(token, marks)
        return handler(token, marks)

    def _convert_with_marks(self, token: Token, marks: Marks) -> list[Node]:
        nodes: list[Node] = []
        for child in _children(token):
            nodes.extend(self.convert_inline(child, marks))
        return nodes

    def _convert_text(self, token: Token, marks: Marks) -> list[Node]:
        text = token.get("raw", "")
        if not text:
            return []
        return [Text(text, marks)]

    def _convert_linebreak(self, token: Token, marks: Marks) -> list[Node]:
        return [HardBreak()]

    def _convert_softbreak(self, token: Token, marks: Marks) -> list[Node]:
        return [Text(" ", marks)]

    def _convert_emphasis(self, token: Token, marks: Marks) -> list[Node]:
        return self._convert_with_marks(token, marks + (Mark.em(),))

    def _convert_strong(self, token: Token, marks: Marks) -> list[Node]:
        return self._convert_with_marks(token, marks + (Mark.strong(),))

    def _convert_strikethrough(self, token: Token, marks: Marks) -> list[Node]:
        return self._convert_with_marks(token, marks + (Mark.strike(),))

    def _convert_codespan(self, token: Token, marks: Marks) -> list[Node]:
        code = token["raw"] if "raw" in token else _collect_text(token)
        return [Text(code, marks + (Mark.code(),))]

    def _convert_link(self, token: Token, marks: Marks) -> list[Node]:
        attrs = _attrs(token)
        url = attrs.get("url", "")
        link_mark = Mark.link(url)

        if self._is_autolink(token, url):
            return [Text(url, marks + (link_mark,))]
        return self._convert_with_marks(token, marks + (link_mark,))

    @staticmethod
    def _is_autolink(token: Token, url: str) -> bool:
        """Return True for ``<url>`` / ``<email>`` links, whose only child is the address itself.

        mistune percent-encodes the URL but keeps the child text as written.
        """
        children = _children(token)
        if len(children) != 1 or children[0].get("type") != "text":
            return False
        raw = children[0].get("raw", "")
        return bool(raw) and raw in (url, unquote(url), unquote(url).removeprefix("mailto:"))

    def _convert_image(self, token: Token, marks: Marks) -> list[Node]:
        alt_text = _collect_text(token) or _attrs(token).get("url", "")
        return [Text(alt_text, marks)]

    def _convert_inline_html(self, token: Token, marks: Marks) -> list[Node]:
        raw = token.get("raw", "")
        if self.options.preserve_inline_html and raw:
            return [Text(raw, marks)]
        logger.debug("Dropping inline HTML: %r", raw)
        return []
