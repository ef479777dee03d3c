#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/options/docx.py
"""Configuration options for rendering wordown documents to DOCX."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from wordown.constants import (
    DEFAULT_MISSING_STYLE_MODE,
    DEFAULT_PLACEHOLDER,
    STYLE_HYPERLINK,
    MissingStyleMode,
)
from wordown.options.base import BaseRendererOptions


@dataclass(frozen=True)
class DocxRendererOptions(BaseRendererOptions):
    """Configuration options for the DOCX renderer.

    Parameters
    ----------
    template_path : str or None, default None
        Path to a .docx template. Its styles resolve the node style names and
        its placeholder paragraph is replaced by the rendered nodes. When None,
        python-docx's built-in default document is used.
    placeholder : str or None, default "paragraphReplace"
        Name of the ``{{name}}`` placeholder paragraph to replace. When None,
        or when the template has no such paragraph, rendered paragraphs are
        appended to the end of the body.
    missing_style_mode : {"create", "error", "ignore"}, default "create"
        What to do when a paragraph or character style is not in the template:
        - "create": add a style of that name so the name stays visible
        - "error": raise MissingStyleError
        - "ignore": leave the paragraph or run with default formatting
    link_style : str or None, default "Hyperlink"
        Character style for link runs whose span has no style of its own
    creator : str or None, default "wordown"
        Value written to the document's last-modified-by property.
        None leaves the template's value untouched.

    Examples
    --------
    Patch a corporate template:
        >>> options = DocxRendererOptions(template_path="template.docx")

    """

    template_path: str | None = field(
        default=None,
        metadata={"help": "Path to .docx template file", "importance": "core"},
    )
    placeholder: str | None = field(
        default=DEFAULT_PLACEHOLDER,
        metadata={"help": "Name of the {{placeholder}} paragraph to replace", "importance": "core"},
    )
    missing_style_mode: MissingStyleMode = field(
        default=DEFAULT_MISSING_STYLE_MODE,
        metadata={
            "help": "Handling of styles missing from the template: create, error or ignore",
            "choices": ["create", "error", "ignore"],
            "importance": "core",
        },
    )
    link_style: str | None = field(
        default=STYLE_HYPERLINK,
        metadata={"help": "Fallback character style for link runs", "importance": "advanced"},
    )
    creator: str | None = field(
        default="wordown",
        metadata={"help": "Last-modified-by document property (None to keep the template's)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``missing_style_mode`` is unknown or the placeholder is blank

        """
        super().__post_init__()
        if self.missing_style_mode not in get_args(MissingStyleMode):
            raise ValueError(
                f"missing_style_mode must be one of {get_args(MissingStyleMode)}, got {self.missing_style_mode!r}"
            )
        if self.placeholder is not None and not self.placeholder.strip():
            raise ValueError("placeholder must be None or a non-blank name")
