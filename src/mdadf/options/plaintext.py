#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdadf/options/plaintext.py
"""Configuration options for plain text extraction from ADF."""

from dataclasses import dataclass, field

from mdadf.constants import (
    DEFAULT_PLAINTEXT_BULLET,
    DEFAULT_PLAINTEXT_LIST_INDENT,
    DEFAULT_PLAINTEXT_QUOTE_PREFIX,
    DEFAULT_PLAINTEXT_RULE,
)
from mdadf.exceptions import ValidationError
from mdadf.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    r"""Configuration options for plain text rendering of ADF documents.

    Parameters
    ----------
    list_indent : str, default "  "
        Indentation repeated once per list nesting level.
    bullet : str, default "- "
        Prefix written before every list item, ordered or not.
    quote_prefix : str, default "> "
        Prefix written before every line of a blockquote.
    rule : str, default "---"
        Text written for a horizontal rule (followed by a newline).

    """

    list_indent: str = field(
        default=DEFAULT_PLAINTEXT_LIST_INDENT,
        metadata={"help": "Indentation per list nesting level"},
    )
    bullet: str = field(
        default=DEFAULT_PLAINTEXT_BULLET,
        metadata={"help": "Prefix for list items"},
    )
    quote_prefix: str = field(
        default=DEFAULT_PLAINTEXT_QUOTE_PREFIX,
        metadata={"help": "Prefix for blockquote lines"},
    )
    rule: str = field(
        default=DEFAULT_PLAINTEXT_RULE,
        metadata={"help": "Text for horizontal rules"},
    )

    def __post_init__(self) -> None:
        """Reject line breaks inside the prefixes.

        Raises
        ------
        ValidationError
            If a prefix would split the line it is meant to decorate.

        """
        super().__post_init__()
        for name in ("list_indent", "bullet", "quote_prefix"):
            value = getattr(self, name)
            if "\n" in value:
                raise ValidationError(
                    f"{name} must not contain a newline", parameter_name=name, parameter_value=value
                )
