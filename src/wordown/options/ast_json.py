#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/options/ast_json.py
"""Options for rendering wordown documents as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field

from wordown.constants import DEFAULT_JSON_INDENT
from wordown.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Options for rendering documents to JSON.

    Parameters
    ----------
    indent : int or None, default = 2
        Number of spaces for JSON indentation. None for compact output.

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the indentation width."""
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
