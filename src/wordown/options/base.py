#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses. Each field carries ``metadata["help"]`` text
that the CLI and the config loader use to describe the setting.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

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

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all option fields."""
        return {f.name for f in fields(cls)}  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not option fields.

        Parameters
        ----------
        values : dict
            Candidate field values, e.g. a loaded config section

        Returns
        -------
        Self
            New options instance

        """
        known = cls.field_names()
        return cls(**{key: value for key, value in values.items() if key in known})


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
        pass
