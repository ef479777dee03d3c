#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the wordown library.

This module centralizes the tag names, style identifiers and default option
values used by the parser, the renderers and the CLI.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Markup Grammar - Field separator and command tags
3. Style Identifiers - Body, code, heading and list styles
4. Parser Defaults
5. Renderer Defaults
"""

from __future__ import annotations

import re
from typing import Literal, get_args

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

NodeKind = Literal[
    "heading",
    "styled_text",
    "normal_list_item",
    "ordered_list_item",
    "code",
    "link",
    "default_text",
]
ListKind = Literal["unordered", "ordered"]
UnterminatedBlockMode = Literal["drop", "error"]
MissingStyleMode = Literal["create", "error", "ignore"]
OutputFormat = Literal["docx", "json"]

NODE_KINDS: tuple[str, ...] = (
    "heading",
    "styled_text",
    "normal_list_item",
    "ordered_list_item",
    "code",
    "link",
    "default_text",
)

# =============================================================================
# Markup Grammar
# =============================================================================

FIELD_SEPARATOR = "\t"
LINE_SEPARATOR_PATTERN = re.compile(r"\r?\n")
INTERNAL_LINK_PREFIX = "#"

# Block-opening tags
TAG_SECTION = "section"
TAG_CODE = "code"
TAG_NORMAL_LIST = "NormalList"
TAG_ORDERED_LIST = "OderList"
TAG_ORDERED_LIST_ALIAS = "OrderedList"

# Content-mutating tags
TAG_TEXT = "text"
TAG_LINK = "link"

# Terminator tag
TAG_NEW_LINE = "newLine"

# =============================================================================
# Style Identifiers
# =============================================================================

STYLE_BODY = "body1"
STYLE_CODE = "code"
STYLE_ERROR = "Error"
STYLE_HYPERLINK = "Hyperlink"

UNORDERED_LIST_STYLE_PREFIX = "nList"
ORDERED_LIST_STYLE_PREFIX = "numList"
RECOGNIZED_LIST_LEVELS = (1, 2, 3)

HEADING_STYLES = frozenset({"1", "Title", "Subtitle"} | {f"Heading{level}" for level in range(1, 10)})
BODY_STYLES = frozenset({STYLE_BODY})
LIST_STYLES = frozenset(
    f"{prefix}{level}"
    for prefix in (UNORDERED_LIST_STYLE_PREFIX, ORDERED_LIST_STYLE_PREFIX)
    for level in RECOGNIZED_LIST_LEVELS
)
RECOGNIZED_STYLES = HEADING_STYLES | BODY_STYLES | LIST_STYLES | {STYLE_CODE, STYLE_ERROR}


def is_recognized_style(name: str) -> bool:
    """Return True if ``name`` is one of the standard wordown style identifiers."""
    return name in RECOGNIZED_STYLES


# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_LIST_LEVEL = 1
DEFAULT_UNTERMINATED_BLOCK_MODE: UnterminatedBlockMode = "drop"
DEFAULT_BODY_STYLE = STYLE_BODY
DEFAULT_CODE_STYLE = STYLE_CODE
DEFAULT_HYPERLINK_STYLE = STYLE_HYPERLINK
DEFAULT_STRIP_BOM = True

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_PLACEHOLDER = "paragraphReplace"
PLACEHOLDER_TEMPLATE = "{{{{{name}}}}}"
DEFAULT_MISSING_STYLE_MODE: MissingStyleMode = "create"
DEFAULT_JSON_INDENT = 2
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)
