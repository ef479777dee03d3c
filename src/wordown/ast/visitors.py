#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/ast/visitors.py
"""Visitor pattern base class for wordown documents.

``Node.accept`` dispatches on the node kind, so a visitor implements one
``visit_<kind>`` method per entry of ``NODE_KINDS`` plus ``visit_document``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from wordown.ast.nodes import Document, Node


class NodeVisitor(ABC):
    """Abstract base class for document visitors.

    Examples
    --------
    Count headings:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...     def generic_visit(self, node):
        ...         pass

    Kinds without a dedicated override fall through to ``generic_visit``.

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the document root."""
        pass

    @abstractmethod
    def generic_visit(self, node: Node) -> Any:
        """Visit a node whose kind has no dedicated method."""
        pass

    def visit_heading(self, node: Node) -> Any:
        """Visit a heading node."""
        return self.generic_visit(node)

    def visit_styled_text(self, node: Node) -> Any:
        """Visit a styled text paragraph."""
        return self.generic_visit(node)

    def visit_normal_list_item(self, node: Node) -> Any:
        """Visit an unordered list item."""
        return self.generic_visit(node)

    def visit_ordered_list_item(self, node: Node) -> Any:
        """Visit an ordered list item."""
        return self.generic_visit(node)

    def visit_code(self, node: Node) -> Any:
        """Visit a code block."""
        return self.generic_visit(node)

    def visit_link(self, node: Node) -> Any:
        """Visit a paragraph opened by a link."""
        return self.generic_visit(node)

    def visit_default_text(self, node: Node) -> Any:
        """Visit a default text paragraph."""
        return self.generic_visit(node)
