"""wordown - convert tab-delimited wordown markup into styled Word documents.

Wordown is a line-oriented markup: every line is a tab-separated command whose
first field is a tag. Block tags (``section``, ``code``, ``NormalList``,
``OderList``) open a node, ``text`` and ``link`` add spans to it and
``newLine`` flushes it. The parsed document is a flat sequence of styled nodes
that the DOCX renderer patches into a Word template.

Requirements
------------
- Python 3.10+
- python-docx for DOCX output

Examples
--------
Parse markup into nodes:

    >>> from wordown import to_ast
    >>> doc = to_ast("section\\tHeading1\\tIntroduction\\tintro\\nnewLine")
    >>> doc.children[0].style
    'Heading1'

Patch a template:

    >>> from pathlib import Path
    >>> from wordown import convert
    >>> convert(Path("report.wd"), "report.docx", template_path="template.docx")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "wordown requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from wordown.api import convert, from_ast, to_ast
from wordown.ast import Document, Node, RichTextSpan
from wordown.exceptions import (
    FormatError,
    ParsingError,
    RenderingError,
    UnterminatedBlockError,
    WordownError,
)
from wordown.options import DocxRendererOptions, JsonRendererOptions, WordownParserOptions

__all__ = [
    "__version__",
    "convert",
    "from_ast",
    "to_ast",
    "Document",
    "Node",
    "RichTextSpan",
    "DocxRendererOptions",
    "JsonRendererOptions",
    "WordownParserOptions",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "UnterminatedBlockError",
    "WordownError",
]
