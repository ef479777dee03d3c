#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the wordown parser and renderers.

Each parser and renderer has its own frozen Options dataclass.
"""

from __future__ import annotations

from wordown.options.ast_json import JsonRendererOptions
from wordown.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from wordown.options.docx import DocxRendererOptions
from wordown.options.wordown import WordownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocxRendererOptions",
    "JsonRendererOptions",
    "WordownParserOptions",
]
