#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the document node model."""

from dataclasses import FrozenInstanceError

import pytest

from wordown.ast import (
    EMPTY_SPAN,
    Document,
    ExternalLink,
    InternalLink,
    Node,
    NodeVisitor,
    RichTextSpan,
    SourceLocation,
)


@pytest.mark.unit
class TestNode:
    """Tests for Node construction and helpers."""

    def test_content_defaults_to_one_empty_span(self):
        node = Node(kind="code", style="code")
        assert node.content == (EMPTY_SPAN,)
        assert node.is_placeholder

    def test_empty_content_is_normalized(self):
        node = Node(kind="styled_text", style="body1", content=())
        assert node.content == (EMPTY_SPAN,)

    def test_list_content_becomes_tuple(self):
        node = Node(kind="styled_text", style="body1", content=[RichTextSpan(text="a")])
        assert node.content == (RichTextSpan(text="a"),)

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown node kind"):
            Node(kind="paragraph", style="body1")

    def test_anchor_only_on_headings(self):
        Node(kind="heading", style="Heading1", anchor="intro")
        with pytest.raises(ValueError, match="anchor"):
            Node(kind="code", style="code", anchor="intro")

    def test_nodes_are_frozen(self):
        node = Node(kind="code", style="code")
        with pytest.raises(FrozenInstanceError):
            node.style = "other"

    def test_text_joins_spans(self):
        node = Node(kind="styled_text", style="body1", content=(RichTextSpan(text="a "), RichTextSpan(text="b")))
        assert node.text == "a b"

    def test_with_span_keeps_empty_span(self):
        node = Node(kind="normal_list_item", style="nList1").with_span(RichTextSpan(text="x"))
        assert node.content == (RichTextSpan(text=""), RichTextSpan(text="x"))

    def test_with_span_appends(self):
        node = Node(kind="heading", style="Heading1", content=(RichTextSpan(text="a"),))
        updated = node.with_span(RichTextSpan(text="b"))
        assert [span.text for span in updated.content] == ["a", "b"]
        assert [span.text for span in node.content] == ["a"]

    def test_source_location_not_part_of_equality(self):
        a = Node(kind="code", style="code", source_location=SourceLocation(format="wordown", line=1))
        b = Node(kind="code", style="code", source_location=SourceLocation(format="wordown", line=9))
        assert a == b

    def test_links(self):
        node = Node(
            kind="styled_text",
            style="body1",
            content=(
                RichTextSpan(text="see "),
                RichTextSpan(text="intro", link_target=InternalLink(anchor_id="intro")),
                RichTextSpan(text="site", link_target=ExternalLink(url="https://example.com")),
            ),
        )
        assert node.links == [InternalLink(anchor_id="intro"), ExternalLink(url="https://example.com")]
        assert [link.kind for link in node.links] == ["internal", "external"]


@pytest.mark.unit
class TestRichTextSpan:
    """Tests for RichTextSpan."""

    def test_empty_span(self):
        assert RichTextSpan().is_empty
        assert not RichTextSpan(text="x").is_empty
        assert not RichTextSpan(style_ref="Hyperlink").is_empty


@pytest.mark.unit
class TestDocument:
    """Tests for Document helpers."""

    def _doc(self) -> Document:
        return Document(
            children=[
                Node(kind="heading", style="Heading1", content=(RichTextSpan(text="Intro"),), anchor="intro"),
                Node(kind="heading", style="Heading2", content=(RichTextSpan(text="No anchor"),)),
                Node(
                    kind="styled_text",
                    style="body1",
                    content=(
                        RichTextSpan(text="ok", link_target=InternalLink(anchor_id="intro")),
                        RichTextSpan(text="broken", link_target=InternalLink(anchor_id="missing")),
                        RichTextSpan(text="web", link_target=ExternalLink(url="https://example.com")),
                    ),
                ),
            ]
        )

    def test_anchors(self):
        assert self._doc().anchors == {"intro"}

    def test_unresolved_links(self):
        assert self._doc().unresolved_links() == [InternalLink(anchor_id="missing")]

    def test_empty_document(self):
        doc = Document()
        assert doc.children == []
        assert doc.metadata == {}
        assert doc.unresolved_links() == []


class _KindCollector(NodeVisitor):
    def __init__(self):
        self.seen = []

    def visit_document(self, node):
        for child in node.children:
            child.accept(self)
        return self.seen

    def visit_heading(self, node):
        self.seen.append(("heading", node.anchor))

    def generic_visit(self, node):
        self.seen.append((node.kind, None))


@pytest.mark.unit
class TestVisitor:
    """Tests for visitor dispatch."""

    def test_dispatch_by_kind(self):
        doc = Document(
            children=[
                Node(kind="heading", style="Heading1", anchor="a"),
                Node(kind="code", style="code"),
                Node(kind="ordered_list_item", style="numList1"),
            ]
        )
        assert doc.accept(_KindCollector()) == [("heading", "a"), ("code", None), ("ordered_list_item", None)]
