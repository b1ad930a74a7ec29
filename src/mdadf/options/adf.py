#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown-to-ADF conversion."""
# src/mdadf/options/adf.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdadf.constants import DEFAULT_PRESERVE_INLINE_HTML, DEFAULT_TABLE_LAYOUT, TABLE_LAYOUTS, TableLayout
from mdadf.exceptions import ValidationError
from mdadf.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AdfOptions(BaseRendererOptions):
    """Configuration options for building ADF documents from markdown.

    Parameters
    ----------
    table_layout : {"default", "wide", "full-width"}, default "default"
        Value of the ``layout`` attribute written on every ``table`` node.
    preserve_inline_html : bool, default False
        Keep inline raw HTML as literal text. By default it is dropped.

    Examples
    --------
        >>> options = AdfOptions(table_layout="wide")
        >>> options.create_updated(preserve_inline_html=True).preserve_inline_html
        True

    """

    table_layout: TableLayout = field(
        default=DEFAULT_TABLE_LAYOUT,
        metadata={"help": "Layout attribute for tables", "choices": list(TABLE_LAYOUTS)},
    )
    preserve_inline_html: bool = field(
        default=DEFAULT_PRESERVE_INLINE_HTML,
        metadata={"help": "Keep inline HTML as literal text instead of dropping it"},
    )

    def __post_init__(self) -> None:
        """Validate the table layout.

        Raises
        ------
        ValidationError
            If ``table_layout`` is not a known ADF table layout.

        """
        super().__post_init__()
        if self.table_layout not in TABLE_LAYOUTS:
            raise ValidationError(
                f"table_layout must be one of {', '.join(TABLE_LAYOUTS)}, got {self.table_layout!r}",
                parameter_name="table_layout",
                parameter_value=self.table_layout,
            )
