#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn ADF trees into other representations."""

from mdadf.renderers.plaintext import PlainTextRenderer

__all__ = ["PlainTextRenderer"]
