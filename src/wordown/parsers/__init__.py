#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning wordown markup into documents.

- tokenizer: line and field splitting
- commands: command variants and the tag dispatch table
- accumulator: the single-slot node state machine
- wordown: the document builder driving the accumulator
"""

from wordown.parsers.base import BaseParser
from wordown.parsers.wordown import WordownParser

__all__ = ["BaseParser", "WordownParser"]
