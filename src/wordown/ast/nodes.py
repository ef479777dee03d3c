#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/ast/nodes.py
"""Node classes for the wordown document model.

A wordown document is a flat, ordered sequence of block-level nodes. Each
node carries a style identifier and an ordered tuple of rich-text spans;
heading nodes may additionally carry an anchor that internal links elsewhere
in the same document resolve to.

Node kinds
----------
- heading: opened by ``section``, bookmarked by its anchor
- styled_text: a default paragraph that received content
- normal_list_item / ordered_list_item: opened by ``NormalList`` / ``OderList``
- code: opened by ``code``
- link: a default paragraph whose first content was a link
- default_text: the untouched paragraph the parser idles on

Nodes and spans are frozen. Links hold identifiers (an anchor id or a URL),
never references to other nodes, so the model has no cycles.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from wordown.constants import NODE_KINDS, NodeKind


@dataclass(frozen=True)
class SourceLocation:
    """Source location information for nodes.

    Parameters
    ----------
    format : str
        Source format (always ``"wordown"`` for parsed nodes)
    line : int or None, default = None
        1-based line number of the command that opened the node

    """

    format: str
    line: Optional[int] = None


@dataclass(frozen=True)
class InternalLink:
    """Link to a heading anchor in the same document.

    Parameters
    ----------
    anchor_id : str
        Anchor of the target heading

    """

    anchor_id: str

    @property
    def kind(self) -> str:
        """Return the link form, ``"internal"``."""
        return "internal"


@dataclass(frozen=True)
class ExternalLink:
    """Link to an external URL.

    Parameters
    ----------
    url : str
        Target URL

    """

    url: str

    @property
    def kind(self) -> str:
        """Return the link form, ``"external"``."""
        return "external"


LinkTarget = Union[InternalLink, ExternalLink]


@dataclass(frozen=True)
class RichTextSpan:
    """A run of text inside a node.

    Parameters
    ----------
    text : str, default = ""
        Span text
    style_ref : str or None, default = None
        Inline (character) style name
    link_target : InternalLink, ExternalLink or None, default = None
        Link the span points to

    """

    text: str = ""
    style_ref: Optional[str] = None
    link_target: Optional[LinkTarget] = None

    @property
    def is_empty(self) -> bool:
        """Return True for the plain empty span used as a placeholder."""
        return not self.text and self.style_ref is None and self.link_target is None


EMPTY_SPAN = RichTextSpan()


@dataclass(frozen=True)
class Node:
    """A block-level unit of the output document.

    Parameters
    ----------
    kind : NodeKind
        Node kind, one of ``NODE_KINDS``
    style : str
        Paragraph style identifier, resolved by the renderer
    content : tuple of RichTextSpan, default = one empty span
        Spans in rendering order. Never empty: an empty tuple is replaced by a
        single empty span.
    anchor : str or None, default = None
        Bookmark id; only heading nodes may carry one
    source_location : SourceLocation or None, default = None
        Where the node was opened. Not part of node equality.

    Raises
    ------
    ValueError
        If ``kind`` is unknown or a non-heading node is given an anchor

    """

    kind: NodeKind
    style: str
    content: tuple[RichTextSpan, ...] = (EMPTY_SPAN,)
    anchor: Optional[str] = None
    source_location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate the kind and normalize content to a non-empty tuple."""
        if self.kind not in NODE_KINDS:
            raise ValueError(f"Unknown node kind: {self.kind!r}")
        if self.anchor is not None and self.kind != "heading":
            raise ValueError(f"Only heading nodes may carry an anchor, got kind {self.kind!r}")
        content = tuple(self.content)
        if not content:
            content = (EMPTY_SPAN,)
        object.__setattr__(self, "content", content)

    @property
    def text(self) -> str:
        """Return the concatenated text of all spans."""
        return "".join(span.text for span in self.content)

    @property
    def is_placeholder(self) -> bool:
        """Return True if the node holds only its construction placeholder span."""
        return len(self.content) == 1 and self.content[0].is_empty

    @property
    def links(self) -> list[LinkTarget]:
        """Return the link targets of all linked spans, in order."""
        return [span.link_target for span in self.content if span.link_target is not None]

    def with_span(self, span: RichTextSpan) -> Node:
        """Return a copy of this node with ``span`` appended.

        Existing spans are always kept, including empty ones.

        Parameters
        ----------
        span : RichTextSpan
            Span to append

        Returns
        -------
        Node
            New node with the span added

        """
        return replace(self, content=(*self.content, span))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_<kind>(self)``.

        Parameters
        ----------
        visitor : Any
            A visitor object with one visit method per node kind

        Returns
        -------
        Any
            Result of the visit method

        """
        return getattr(visitor, f"visit_{self.kind}")(self)


@dataclass
class Document:
    """Ordered sequence of nodes produced by the parser.

    Parameters
    ----------
    children : list of Node, default = empty list
        Nodes in flush order
    metadata : dict, default = empty dict
        Document-level metadata (source format, line count, ...)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    @property
    def anchors(self) -> set[str]:
        """Return the anchors declared by heading nodes."""
        return {node.anchor for node in self.children if node.anchor}

    def unresolved_links(self) -> list[InternalLink]:
        """Return internal links whose anchor no heading in this document declares.

        Returns
        -------
        list of InternalLink
            Unresolved links in document order

        """
        anchors = self.anchors
        return [
            link
            for node in self.children
            for link in node.links
            if isinstance(link, InternalLink) and link.anchor_id not in anchors
        ]
