"""mdadf - convert markdown to the Atlassian Document Format.

mdadf turns informal markdown (CommonMark plus GitHub tables and
strikethrough) into ADF, the JSON document tree used by the Confluence and
Jira cloud editors, and extracts plain text back out of ADF trees for
terminal display.

Key Features
------------
- Headings, paragraphs, bullet and ordered lists (with start numbers),
  fenced and indented code blocks, blockquotes, rules and tables
- Bold, italic, strikethrough, inline code and link marks, stacked in
  source order
- Frozen, typed ADF node classes with lossless JSON round-tripping
- Plain text extraction with list indentation and quote prefixes

Requirements
------------
- Python 3.10+
- mistune 3 for markdown parsing

Examples
--------
Markdown to ADF JSON for a REST request body:

    >>> from mdadf import to_json
    >>> to_json("**Hello**")
    '{"type":"doc","version":1,"content":[{"type":"paragraph","content":[{"type":"text","text":"Hello","marks":[{"type":"strong"}]}]}]}'

Working with the document tree:

    >>> from mdadf import to_document, to_plain_text
    >>> doc = to_document("# Title\\n\\n- one\\n- two")
    >>> to_plain_text(doc)
    '\\nTitle\\n- one\\n- two\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdadf requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdadf.adf import Document, Mark, Node
from mdadf.api import document_from_json, to_document, to_json, to_plain_text
from mdadf.converters import MarkdownToAdfConverter
from mdadf.exceptions import DependencyError, InvalidOptionsError, MdAdfError, ParsingError, ValidationError
from mdadf.options import AdfOptions, MarkdownParserOptions, PlainTextOptions
from mdadf.renderers import PlainTextRenderer

__all__ = [
    "__version__",
    "to_document",
    "to_json",
    "to_plain_text",
    "document_from_json",
    "Document",
    "Mark",
    "Node",
    "MarkdownToAdfConverter",
    "PlainTextRenderer",
    "AdfOptions",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "MdAdfError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "DependencyError",
]
