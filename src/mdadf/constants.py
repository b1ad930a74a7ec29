#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/constants.py
"""Constants shared across mdadf modules.

ADF node and mark type names, document envelope values and option defaults
live here so the converter, serializer and renderer agree on them.
"""

from __future__ import annotations

from typing import Literal

# ADF document envelope
ADF_DOC_TYPE = "doc"
ADF_VERSION = 1

# ADF node types
NODE_PARAGRAPH = "paragraph"
NODE_HEADING = "heading"
NODE_BULLET_LIST = "bulletList"
NODE_ORDERED_LIST = "orderedList"
NODE_LIST_ITEM = "listItem"
NODE_CODE_BLOCK = "codeBlock"
NODE_BLOCKQUOTE = "blockquote"
NODE_RULE = "rule"
NODE_TABLE = "table"
NODE_TABLE_ROW = "tableRow"
NODE_TABLE_HEADER = "tableHeader"
NODE_TABLE_CELL = "tableCell"
NODE_TEXT = "text"
NODE_HARD_BREAK = "hardBreak"

# ADF mark types
MARK_EM = "em"
MARK_STRONG = "strong"
MARK_STRIKE = "strike"
MARK_CODE = "code"
MARK_LINK = "link"

TableLayout = Literal["default", "wide", "full-width"]
TABLE_LAYOUTS: tuple[str, ...] = ("default", "wide", "full-width")

DEFAULT_TABLE_LAYOUT: TableLayout = "default"
DEFAULT_PRESERVE_INLINE_HTML = False

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_HARD_WRAP = False

DEFAULT_PLAINTEXT_LIST_INDENT = "  "
DEFAULT_PLAINTEXT_BULLET = "- "
DEFAULT_PLAINTEXT_QUOTE_PREFIX = "> "
DEFAULT_PLAINTEXT_RULE = "---"

MAX_HEADING_LEVEL = 6

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

ENV_LOG_LEVEL = "MDADF_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
