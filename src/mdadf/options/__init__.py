#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mdadf components.

Each component has its own frozen Options dataclass; use
``create_updated`` to derive modified copies.
"""

from __future__ import annotations

from mdadf.options.adf import AdfOptions
from mdadf.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin, validate_options_type
from mdadf.options.markdown import MarkdownParserOptions
from mdadf.options.plaintext import PlainTextOptions

__all__ = [
    "AdfOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "validate_options_type",
]
