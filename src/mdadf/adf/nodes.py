#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/adf/nodes.py
"""ADF node classes.

This module defines the Atlassian Document Format tree as a set of frozen
dataclasses, one per concrete node kind. The kind of a node decides which
fields it carries:

Container nodes hold ordered ``content``:
    - Paragraph, Heading, BulletList, OrderedList, ListItem
    - CodeBlock, Blockquote
    - Table, TableRow, TableHeader, TableCell

Text nodes hold ``text`` and ``marks``:
    - Text

Bare leaves hold nothing:
    - Rule, HardBreak

``GenericNode`` carries any ADF kind that is not modelled here (mention,
panel, emoji, ...) when reading ADF produced elsewhere.

Every node exposes a read-only ``attrs`` mapping computed from its fields
and a ``children`` tuple, so tree walkers can treat all kinds uniformly.
Sequences passed to constructors are frozen into tuples.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union

from mdadf.constants import (
    ADF_DOC_TYPE,
    ADF_VERSION,
    MARK_CODE,
    MARK_EM,
    MARK_LINK,
    MARK_STRIKE,
    MARK_STRONG,
    MAX_HEADING_LEVEL,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_RULE,
    NODE_TABLE,
    NODE_TABLE_CELL,
    NODE_TABLE_HEADER,
    NODE_TABLE_ROW,
    NODE_TEXT,
    TABLE_LAYOUTS,
)
from mdadf.exceptions import ValidationError

_EMPTY_ATTRS: Mapping[str, Any] = MappingProxyType({})


def _freeze_attrs(attrs: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if not attrs:
        return _EMPTY_ATTRS
    return MappingProxyType(dict(attrs))


@dataclass(frozen=True)
class Mark:
    """Formatting annotation on a text node.

    Parameters
    ----------
    type : str
        Mark type (``em``, ``strong``, ``strike``, ``code``, ``link``, ...)
    attrs : mapping, default = empty
        Mark attributes, e.g. ``{"href": ...}`` for links

    """

    type: str
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", _freeze_attrs(self.attrs))

    @classmethod
    def em(cls) -> Mark:
        return cls(MARK_EM)

    @classmethod
    def strong(cls) -> Mark:
        return cls(MARK_STRONG)

    @classmethod
    def strike(cls) -> Mark:
        return cls(MARK_STRIKE)

    @classmethod
    def code(cls) -> Mark:
        return cls(MARK_CODE)

    @classmethod
    def link(cls, href: str) -> Mark:
        """Create a link mark pointing at ``href``."""
        return cls(MARK_LINK, {"href": href})


class Node:
    """Base class for all ADF nodes.

    Subclasses set the ``type`` class attribute to their ADF type name.
    """

    type: ClassVar[str]

    @property
    def attrs(self) -> Mapping[str, Any]:
        """ADF attributes of this node (empty when the kind has none)."""
        return _EMPTY_ATTRS

    @property
    def children(self) -> tuple[Node, ...]:
        """Child nodes (empty for leaves)."""
        return ()


# ============================================================================
# Leaf nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Literal text run with its formatting marks, outermost first.

    Parameters
    ----------
    text : str
        The literal text
    marks : tuple of Mark, default = ()
        Marks applied to the run

    """

    type: ClassVar[str] = NODE_TEXT

    text: str = ""
    marks: tuple[Mark, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", tuple(self.marks))

    def has_mark(self, mark_type: str) -> bool:
        """Return True if a mark of ``mark_type`` is applied to this run."""
        return any(mark.type == mark_type for mark in self.marks)


@dataclass(frozen=True)
class HardBreak(Node):
    """Forced line break inside a paragraph."""

    type: ClassVar[str] = NODE_HARD_BREAK


@dataclass(frozen=True)
class Rule(Node):
    """Horizontal rule."""

    type: ClassVar[str] = NODE_RULE


# ============================================================================
# Container nodes
# ============================================================================


@dataclass(frozen=True)
class ContainerNode(Node):
    """Node whose payload is an ordered sequence of child nodes."""

    content: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content


@dataclass(frozen=True)
class Paragraph(ContainerNode):
    """Paragraph of inline nodes."""

    type: ClassVar[str] = NODE_PARAGRAPH


@dataclass(frozen=True)
class Heading(ContainerNode):
    """Heading of inline nodes.

    Parameters
    ----------
    content : sequence of Node
        Inline content
    level : int, default = 1
        Heading level, 1 through 6

    """

    type: ClassVar[str] = NODE_HEADING

    level: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValidationError(
                f"Heading level must be between 1 and {MAX_HEADING_LEVEL}, got {self.level}",
                parameter_name="level",
                parameter_value=self.level,
            )

    @property
    def attrs(self) -> Mapping[str, Any]:
        return MappingProxyType({"level": self.level})


@dataclass(frozen=True)
class BulletList(ContainerNode):
    """Unordered list of ListItem nodes."""

    type: ClassVar[str] = NODE_BULLET_LIST


@dataclass(frozen=True)
class OrderedList(ContainerNode):
    """Ordered list of ListItem nodes.

    Parameters
    ----------
    content : sequence of ListItem
        List items
    order : int, default = 1
        Number of the first item

    """

    type: ClassVar[str] = NODE_ORDERED_LIST

    order: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.order < 0:
            raise ValidationError(
                f"Ordered list start must not be negative, got {self.order}",
                parameter_name="order",
                parameter_value=self.order,
            )

    @property
    def attrs(self) -> Mapping[str, Any]:
        return MappingProxyType({"order": self.order})


@dataclass(frozen=True)
class ListItem(ContainerNode):
    """List item holding paragraphs, nested lists and other blocks."""

    type: ClassVar[str] = NODE_LIST_ITEM


@dataclass(frozen=True)
class CodeBlock(ContainerNode):
    """Code block whose single child is a Text node with the literal code.

    Parameters
    ----------
    content : sequence of Text
        Normally exactly one Text node
    language : str or None, default = None
        Language taken from the fence info string

    """

    type: ClassVar[str] = NODE_CODE_BLOCK

    language: Optional[str] = None

    @classmethod
    def from_code(cls, code: str, language: Optional[str] = None) -> CodeBlock:
        """Build a code block holding ``code`` verbatim."""
        return cls(content=(Text(code),), language=language or None)

    @property
    def code(self) -> str:
        """The literal code of this block."""
        return "".join(child.text for child in self.content if isinstance(child, Text))

    @property
    def attrs(self) -> Mapping[str, Any]:
        if self.language:
            return MappingProxyType({"language": self.language})
        return _EMPTY_ATTRS


@dataclass(frozen=True)
class Blockquote(ContainerNode):
    """Block quotation."""

    type: ClassVar[str] = NODE_BLOCKQUOTE


@dataclass(frozen=True)
class Table(ContainerNode):
    """Table of TableRow nodes.

    Parameters
    ----------
    content : sequence of TableRow
        Rows, header row first
    layout : str, default = "default"
        ADF table layout

    """

    type: ClassVar[str] = NODE_TABLE

    layout: str = "default"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.layout not in TABLE_LAYOUTS:
            raise ValidationError(
                f"Unknown table layout: {self.layout!r}", parameter_name="layout", parameter_value=self.layout
            )

    @property
    def attrs(self) -> Mapping[str, Any]:
        return MappingProxyType({"layout": self.layout})


@dataclass(frozen=True)
class TableRow(ContainerNode):
    """Row of TableHeader or TableCell nodes."""

    type: ClassVar[str] = NODE_TABLE_ROW


@dataclass(frozen=True)
class _SpanningCell(ContainerNode):
    colspan: int = 1
    rowspan: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("colspan", "rowspan"):
            value = getattr(self, name)
            if value < 1:
                raise ValidationError(
                    f"{name} must be at least 1, got {value}", parameter_name=name, parameter_value=value
                )

    @property
    def attrs(self) -> Mapping[str, Any]:
        return MappingProxyType({"colspan": self.colspan, "rowspan": self.rowspan})


@dataclass(frozen=True)
class TableHeader(_SpanningCell):
    """Header cell; wraps block content (a single paragraph when built from markdown)."""

    type: ClassVar[str] = NODE_TABLE_HEADER


@dataclass(frozen=True)
class TableCell(_SpanningCell):
    """Body cell; wraps block content (a single paragraph when built from markdown)."""

    type: ClassVar[str] = NODE_TABLE_CELL


# ============================================================================
# Nodes read from foreign ADF
# ============================================================================


@dataclass(frozen=True)
class GenericNode(Node):
    """ADF node of a kind without a dedicated class.

    Keeps every field of the source JSON so it can be written back unchanged.
    """

    type: str  # type: ignore[misc]
    node_attrs: Mapping[str, Any] = field(default_factory=dict)
    content: tuple[Node, ...] = ()
    text: Optional[str] = None
    marks: tuple[Mark, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "node_attrs", _freeze_attrs(self.node_attrs))
        object.__setattr__(self, "content", tuple(self.content))
        object.__setattr__(self, "marks", tuple(self.marks))

    @property
    def attrs(self) -> Mapping[str, Any]:
        return self.node_attrs

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content


InlineNode = Union[Text, HardBreak]
CellNode = Union[TableHeader, TableCell]
ListNode = Union[BulletList, OrderedList]


# ============================================================================
# Document
# ============================================================================


@dataclass(frozen=True)
class Document:
    """Root of an ADF tree: ``{"type": "doc", "version": 1, "content": [...]}``.

    Parameters
    ----------
    content : sequence of Node, default = ()
        Top-level blocks in document order

    """

    type: ClassVar[str] = ADF_DOC_TYPE
    version: ClassVar[int] = ADF_VERSION

    content: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    @property
    def children(self) -> tuple[Node, ...]:
        return self.content

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready dictionary form of this document."""
        from mdadf.adf.serialization import adf_to_dict

        return adf_to_dict(self)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize this document to an ADF JSON string."""
        from mdadf.adf.serialization import adf_to_json

        return adf_to_json(self, indent=indent)

    def to_plain_text(self) -> str:
        """Extract the document's text for terminal display."""
        from mdadf.renderers.plaintext import PlainTextRenderer

        return PlainTextRenderer().render_to_string(self)
