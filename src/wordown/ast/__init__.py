#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/ast/__init__.py
"""Document model for wordown.

The module consists of:

- nodes: Node, RichTextSpan, link targets and the Document container
- visitors: visitor base class dispatching on node kind
- serialization: JSON serialization and deserialization

Examples
--------
    >>> from wordown.ast import Document, Node, RichTextSpan
    >>> doc = Document(children=[
    ...     Node(kind="heading", style="Heading1", content=(RichTextSpan("Intro"),), anchor="intro")
    ... ])
    >>> doc.anchors
    {'intro'}

"""

from __future__ import annotations

from wordown.ast.nodes import (
    EMPTY_SPAN,
    Document,
    ExternalLink,
    InternalLink,
    LinkTarget,
    Node,
    RichTextSpan,
    SourceLocation,
)
from wordown.ast.serialization import ast_to_json, json_to_ast
from wordown.ast.visitors import NodeVisitor

__all__ = [
    "EMPTY_SPAN",
    "Document",
    "ExternalLink",
    "InternalLink",
    "LinkTarget",
    "Node",
    "NodeVisitor",
    "RichTextSpan",
    "SourceLocation",
    "ast_to_json",
    "json_to_ast",
]
