#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Converters from parsed input to ADF trees."""

from mdadf.converters.markdown2adf import MarkdownToAdfConverter

__all__ = ["MarkdownToAdfConverter"]
