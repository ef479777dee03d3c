#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/renderers/ast_json.py
"""JSON rendering of wordown documents.

Useful for inspecting what the parser produced before it reaches a template.
The renderer uses the ast.serialization module for conversion.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from wordown.ast import Document
from wordown.ast.serialization import ast_to_json
from wordown.options.ast_json import JsonRendererOptions
from wordown.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render documents as schema-versioned JSON.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
        >>> from wordown.parsers import WordownParser
        >>> doc = WordownParser().parse("text\\tHello\\nnewLine")
        >>> print(JsonRenderer().render_to_string(doc))

    """

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a JSON string."""
        return ast_to_json(doc, indent=self.options.indent)

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document to JSON and write it to ``output``."""
        self.write_text_output(self.render_to_string(doc), output)
