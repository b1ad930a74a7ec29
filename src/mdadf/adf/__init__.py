#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Atlassian Document Format data model.

Frozen node classes for ADF trees plus JSON (de)serialization helpers.
"""

from mdadf.adf.nodes import (
    Blockquote,
    BulletList,
    CellNode,
    CodeBlock,
    ContainerNode,
    Document,
    GenericNode,
    HardBreak,
    Heading,
    InlineNode,
    ListItem,
    ListNode,
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
from mdadf.adf.serialization import adf_to_dict, adf_to_json, dict_to_adf, json_to_adf

__all__ = [
    "Blockquote",
    "BulletList",
    "CellNode",
    "CodeBlock",
    "ContainerNode",
    "Document",
    "GenericNode",
    "HardBreak",
    "Heading",
    "InlineNode",
    "ListItem",
    "ListNode",
    "Mark",
    "Node",
    "OrderedList",
    "Paragraph",
    "Rule",
    "Table",
    "TableCell",
    "TableHeader",
    "TableRow",
    "Text",
    "adf_to_dict",
    "adf_to_json",
    "dict_to_adf",
    "json_to_adf",
]
