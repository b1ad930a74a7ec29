#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdadf/api.py
"""Public conversion functions.

``to_document`` and ``to_json`` turn markdown into ADF; ``to_plain_text``
extracts display text from an ADF tree; ``document_from_json`` reads ADF
JSON fetched from Confluence or Jira back into the data model.

The two markdown entry points differ on purpose for input that converts to
no blocks at all (whitespace only, HTML blocks only): ``to_document`` wraps
the raw input in a single paragraph, ``to_json`` returns a document with an
empty content list.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from mdadf.adf.nodes import Document, Paragraph, Text
from mdadf.adf.serialization import adf_to_json, dict_to_adf, json_to_adf
from mdadf.converters.markdown2adf import MarkdownToAdfConverter
from mdadf.options.adf import AdfOptions
from mdadf.options.markdown import MarkdownParserOptions
from mdadf.options.plaintext import PlainTextOptions
from mdadf.renderers.plaintext import PlainTextRenderer

logger = logging.getLogger(__name__)


def to_document(
    markdown: Union[str, bytes],
    options: Optional[AdfOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> Optional[Document]:
    r"""Convert markdown to an ADF document.

    Parameters
    ----------
    markdown : str or bytes
        Markdown text
    options : AdfOptions or None, default = None
        ADF output options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parser configuration

    Returns
    -------
    Document or None
        None for empty input. Otherwise the converted document; if nothing
        converts, a document whose single paragraph holds the raw input.

    Examples
    --------
        >>> doc = to_document("# Title\n\nBody")
        >>> [node.type for node in doc.content]
        ['heading', 'paragraph']
        >>> to_document("") is None
        True

    """
    if not markdown:
        return None

    content = MarkdownToAdfConverter(options, parser_options).convert(markdown)
    if not content:
        logger.debug("Markdown produced no ADF blocks; wrapping raw input in a paragraph")
        raw = markdown.decode("utf-8", errors="replace") if isinstance(markdown, bytes) else markdown
        return Document(content=[Paragraph(content=[Text(raw)])])

    return Document(content=content)


def to_json(
    markdown: Union[str, bytes],
    options: Optional[AdfOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    indent: Optional[int] = None,
) -> str:
    """Convert markdown to an ADF JSON string.

    Parameters
    ----------
    markdown : str or bytes
        Markdown text
    options : AdfOptions or None, default = None
        ADF output options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parser configuration
    indent : int or None, default = None
        Pretty-print indentation; compact output when None

    Returns
    -------
    str
        ``{"type":"doc","version":1,"content":[...]}``. Empty input, and input
        that converts to no blocks, give an empty content list.

    """
    if not markdown:
        return adf_to_json(Document(), indent=indent)

    content = MarkdownToAdfConverter(options, parser_options).convert(markdown)
    return adf_to_json(Document(content=content), indent=indent)


def to_plain_text(document: Optional[Document], options: Optional[PlainTextOptions] = None) -> str:
    """Extract plain text from an ADF document for terminal display.

    Parameters
    ----------
    document : Document or None
        ADF document; None gives an empty string
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Returns
    -------
    str
        The document's text with formatting dropped

    """
    if document is None:
        return ""
    return PlainTextRenderer(options).render_to_string(document)


def document_from_json(data: Union[str, bytes, Mapping[str, Any]]) -> Document:
    """Read an ADF document from JSON text or an already decoded dictionary.

    Parameters
    ----------
    data : str, bytes or mapping
        ADF JSON, e.g. the ``atlas_doc_format`` body of a Confluence page

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    ParsingError
        If the JSON is invalid or its root is not an ADF document

    """
    if isinstance(data, Mapping):
        return dict_to_adf(data)
    return json_to_adf(data)
