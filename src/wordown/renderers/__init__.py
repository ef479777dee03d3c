#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/wordown/renderers/__init__.py
"""Renderers turning wordown documents into output formats.

Available renderers:
- DocxRenderer: patch a Word template (python-docx)
- JsonRenderer: schema-versioned JSON for inspection

Examples
--------
    >>> from wordown.parsers import WordownParser
    >>> from wordown.renderers import DocxRenderer
    >>> doc = WordownParser().parse("text\\tHello\\nnewLine")
    >>> DocxRenderer().render(doc, "output.docx")

"""

from wordown.renderers.ast_json import JsonRenderer
from wordown.renderers.base import BaseRenderer
from wordown.renderers.docx import DocxRenderer

__all__ = ["BaseRenderer", "DocxRenderer", "JsonRenderer"]
