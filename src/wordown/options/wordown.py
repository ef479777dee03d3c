#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/options/wordown.py
"""Configuration options for parsing wordown markup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from wordown.constants import (
    DEFAULT_BODY_STYLE,
    DEFAULT_CODE_STYLE,
    DEFAULT_HYPERLINK_STYLE,
    DEFAULT_STRIP_BOM,
    DEFAULT_UNTERMINATED_BLOCK_MODE,
    UnterminatedBlockMode,
)
from wordown.options.base import BaseParserOptions


@dataclass(frozen=True)
class WordownParserOptions(BaseParserOptions):
    """Configuration options for the wordown parser.

    Parameters
    ----------
    unterminated_block_mode : {"drop", "error"}, default "drop"
        What happens when a block-opening command arrives while another block
        is still open (no ``newLine`` in between):
        - "drop": discard the open block and log a warning
        - "error": raise UnterminatedBlockError
    body_style : str, default "body1"
        Style of default and plain text paragraphs
    code_style : str, default "code"
        Style of code blocks
    hyperlink_style : str or None, default "Hyperlink"
        Character style applied to link spans. None leaves link spans unstyled.
    strip_bom : bool, default True
        Strip a leading byte order mark from the input

    Examples
    --------
    Fail on unterminated blocks instead of dropping them:
        >>> options = WordownParserOptions(unterminated_block_mode="error")

    """

    unterminated_block_mode: UnterminatedBlockMode = field(
        default=DEFAULT_UNTERMINATED_BLOCK_MODE,
        metadata={
            "help": "Handling of a block opened before the previous one was terminated: drop or error",
            "choices": ["drop", "error"],
            "importance": "core",
        },
    )
    body_style: str = field(
        default=DEFAULT_BODY_STYLE,
        metadata={"help": "Paragraph style for plain text", "importance": "advanced"},
    )
    code_style: str = field(
        default=DEFAULT_CODE_STYLE,
        metadata={"help": "Paragraph style for code blocks", "importance": "advanced"},
    )
    hyperlink_style: str | None = field(
        default=DEFAULT_HYPERLINK_STYLE,
        metadata={"help": "Character style for link spans (None for unstyled)", "importance": "advanced"},
    )
    strip_bom: bool = field(
        default=DEFAULT_STRIP_BOM,
        metadata={"help": "Strip a leading byte order mark", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``unterminated_block_mode`` is unknown or a style name is empty

        """
        super().__post_init__()
        if self.unterminated_block_mode not in get_args(UnterminatedBlockMode):
            raise ValueError(
                f"unterminated_block_mode must be one of {get_args(UnterminatedBlockMode)}, "
                f"got {self.unterminated_block_mode!r}"
            )
        if not self.body_style:
            raise ValueError("body_style must not be empty")
        if not self.code_style:
            raise ValueError("code_style must not be empty")

    @property
    def strict(self) -> bool:
        """Return True when unterminated blocks raise instead of being dropped."""
        return self.unterminated_block_mode == "error"
