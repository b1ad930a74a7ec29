"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the markdown parser, the ADF converter and the plain-text renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdadf.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    Options are immutable; this produces modified copies instead.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate field values (no base fields to check)."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer and converter options.

    Notes
    -----
    Subclasses define output-specific options as frozen dataclass fields
    and validate them in ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate field values (no base fields to check)."""
        pass


def validate_options_type(options: Any, expected_type: type, component_name: str) -> None:
    """Validate that options are of the correct type for a component.

    Parameters
    ----------
    options : Any
        The options object to validate (None is accepted)
    expected_type : type
        The expected options class type
    component_name : str
        Name of the component (for error messages)

    Raises
    ------
    InvalidOptionsError
        If options are not None and not an instance of expected_type

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(
            component_name=component_name,
            expected_type=expected_type,
            received_type=type(options),
        )
