#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/adf/serialization.py
"""JSON serialization and deserialization for ADF trees.

Writing follows the ADF wire shape exactly: node keys appear in the order
``type, attrs, content, text, marks`` and each of the last four is omitted
when empty. Mark ``attrs`` are omitted when empty. The document envelope
always carries ``content``, even when it is an empty list.

Reading maps every ADF kind with a dedicated class onto that class. A node
whose payload the class cannot hold (unexpected attributes, marks on a block,
out-of-range values) is kept as a ``GenericNode`` so nothing is lost.

Examples
--------
    >>> from mdadf.adf import Document, Paragraph, Text
    >>> from mdadf.adf.serialization import adf_to_json, json_to_adf
    >>> doc = Document(content=[Paragraph(content=[Text("Hi")])])
    >>> adf_to_json(doc)
    '{"type":"doc","version":1,"content":[{"type":"paragraph","content":[{"type":"text","text":"Hi"}]}]}'
    >>> json_to_adf(adf_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional, Union

from mdadf.adf.nodes import (
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    GenericNode,
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
from mdadf.constants import ADF_DOC_TYPE, ADF_VERSION
from mdadf.exceptions import ParsingError, ValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# Writing
# ============================================================================


def _mark_to_dict(mark: Mark) -> dict[str, Any]:
    result: dict[str, Any] = {"type": mark.type}
    if mark.attrs:
        result["attrs"] = dict(mark.attrs)
    return result


def _node_to_dict(node: Node) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type}
    if node.attrs:
        result["attrs"] = dict(node.attrs)
    if node.children:
        result["content"] = [_node_to_dict(child) for child in node.children]

    text = getattr(node, "text", None)
    if text:
        result["text"] = text

    marks = getattr(node, "marks", ())
    if marks:
        result["marks"] = [_mark_to_dict(mark) for mark in marks]

    return result


def adf_to_dict(value: Union[Document, Node, Mark]) -> dict[str, Any]:
    """Convert a document, node or mark to its JSON-ready dictionary.

    Parameters
    ----------
    value : Document, Node or Mark
        Value to convert

    Returns
    -------
    dict
        Dictionary in ADF wire shape

    """
    if isinstance(value, Document):
        return {
            "type": ADF_DOC_TYPE,
            "version": ADF_VERSION,
            "content": [_node_to_dict(child) for child in value.content],
        }
    if isinstance(value, Mark):
        return _mark_to_dict(value)
    return _node_to_dict(value)


def adf_to_json(value: Union[Document, Node, Mark], indent: Optional[int] = None) -> str:
    """Serialize a document, node or mark to an ADF JSON string.

    Parameters
    ----------
    value : Document, Node or Mark
        Value to serialize
    indent : int or None, default = None
        Pretty-print indentation; compact output when None

    Returns
    -------
    str
        JSON string (non-ASCII characters are written as-is)

    """
    separators = (",", ":") if indent is None else None
    return json.dumps(adf_to_dict(value), indent=indent, separators=separators, ensure_ascii=False)


# ============================================================================
# Reading
# ============================================================================

# Attribute names each dedicated class can represent
_KNOWN_ATTRS: dict[str, frozenset[str]] = {
    Paragraph.type: frozenset(),
    Heading.type: frozenset({"level"}),
    BulletList.type: frozenset(),
    OrderedList.type: frozenset({"order"}),
    ListItem.type: frozenset(),
    CodeBlock.type: frozenset({"language"}),
    Blockquote.type: frozenset(),
    Table.type: frozenset({"layout"}),
    TableRow.type: frozenset(),
    TableHeader.type: frozenset({"colspan", "rowspan"}),
    TableCell.type: frozenset({"colspan", "rowspan"}),
    Rule.type: frozenset(),
    HardBreak.type: frozenset(),
    Text.type: frozenset(),
}

_LEAF_TYPES = frozenset({Rule.type, HardBreak.type})


def _build_container(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return cls(content=content)


def _build_heading(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return Heading(content=content, level=attrs.get("level", 1))


def _build_ordered_list(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return OrderedList(content=content, order=attrs.get("order", 1))


def _build_code_block(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return CodeBlock(content=content, language=attrs.get("language"))


def _build_table(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return Table(content=content, layout=attrs.get("layout", "default"))


def _build_cell(cls: type, content: tuple[Node, ...], attrs: Mapping[str, Any]) -> Node:
    return cls(content=content, colspan=attrs.get("colspan", 1), rowspan=attrs.get("rowspan", 1))


_CONTAINER_BUILDERS: dict[str, tuple[type, Callable[..., Node]]] = {
    Paragraph.type: (Paragraph, _build_container),
    Heading.type: (Heading, _build_heading),
    BulletList.type: (BulletList, _build_container),
    OrderedList.type: (OrderedList, _build_ordered_list),
    ListItem.type: (ListItem, _build_container),
    CodeBlock.type: (CodeBlock, _build_code_block),
    Blockquote.type: (Blockquote, _build_container),
    Table.type: (Table, _build_table),
    TableRow.type: (TableRow, _build_container),
    TableHeader.type: (TableHeader, _build_cell),
    TableCell.type: (TableCell, _build_cell),
}


def _dict_to_mark(data: Any) -> Mark:
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise ParsingError(f"Invalid ADF mark: {data!r}", parsing_stage="structure")
    attrs = data.get("attrs") or {}
    if not isinstance(attrs, dict):
        raise ParsingError(f"Invalid attrs on ADF mark {data['type']!r}", parsing_stage="structure")
    return Mark(data["type"], attrs)


def _fits_dedicated_class(node_type: str, data: dict[str, Any], attrs: dict[str, Any], has_marks: bool) -> bool:
    if node_type not in _KNOWN_ATTRS:
        return False
    if not set(attrs) <= _KNOWN_ATTRS[node_type]:
        return False
    if node_type == Text.type:
        return "content" not in data
    if has_marks or "text" in data:
        return False
    if node_type in _LEAF_TYPES:
        return "content" not in data
    return True


def _dict_to_node(data: Any) -> Node:
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise ParsingError(f"Invalid ADF node: {data!r}", parsing_stage="structure")

    node_type: str = data["type"]
    attrs = data.get("attrs") or {}
    raw_content = data.get("content") or []
    raw_marks = data.get("marks") or []
    if not isinstance(attrs, dict) or not isinstance(raw_content, list) or not isinstance(raw_marks, list):
        raise ParsingError(f"Malformed fields on ADF node {node_type!r}", parsing_stage="structure")

    text = data.get("text")
    if text is not None and not isinstance(text, str):
        raise ParsingError(
            f"Text of ADF node {node_type!r} must be a string, got {text!r}", parsing_stage="structure"
        )

    content = tuple(_dict_to_node(child) for child in raw_content)
    marks = tuple(_dict_to_mark(mark) for mark in raw_marks)

    if _fits_dedicated_class(node_type, data, attrs, bool(marks)):
        try:
            if node_type == Text.type:
                return Text(text=text or "", marks=marks)
            if node_type == Rule.type:
                return Rule()
            if node_type == HardBreak.type:
                return HardBreak()
            cls, builder = _CONTAINER_BUILDERS[node_type]
            return builder(cls, content, attrs)
        except (ValidationError, TypeError) as e:
            logger.debug("Keeping %s node as generic node: %s", node_type, e)

    return GenericNode(
        type=node_type,
        node_attrs=attrs,
        content=content,
        text=text,
        marks=marks,
    )


def dict_to_adf(data: Mapping[str, Any]) -> Document:
    """Build a Document from an ADF dictionary.

    Parameters
    ----------
    data : mapping
        Decoded ADF JSON with ``type == "doc"``

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    ParsingError
        If the root is not an ADF document or a node is malformed

    """
    if not isinstance(data, Mapping) or data.get("type") != ADF_DOC_TYPE:
        raise ParsingError("ADF root must be an object with type 'doc'", parsing_stage="structure")

    version = data.get("version", ADF_VERSION)
    if version != ADF_VERSION:
        logger.warning("Reading ADF document with unsupported version %r", version)

    content = data.get("content") or []
    if not isinstance(content, list):
        raise ParsingError("ADF document content must be a list", parsing_stage="structure")

    return Document(content=[_dict_to_node(child) for child in content])


def json_to_adf(json_str: Union[str, bytes]) -> Document:
    """Parse an ADF JSON string into a Document.

    Parameters
    ----------
    json_str : str or bytes
        ADF JSON text

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    ParsingError
        If the text is not valid JSON or not an ADF document

    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParsingError(f"Invalid ADF JSON: {e}", parsing_stage="json", original_error=e) from e

    return dict_to_adf(data)
