#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based tests for the wordown parser.

Markup is generated line by line from the command tags plus unknown tags,
with arbitrary argument fields.

Test Coverage:
- Arbitrary text never makes the parser raise
- Every node holds at least one span
- Input without newLine flushes at most one node
- Well-formed blocks flush exactly one node each, also in strict mode
- Nodes are flushed once, in source order
- JSON serialization round-trips
- Parsed documents render to DOCX with one paragraph per node
"""

from io import BytesIO

import pytest
from docx import Document as DocxDocument
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from wordown.ast import ast_to_json, json_to_ast
from wordown.options import WordownParserOptions
from wordown.parsers import WordownParser
from wordown.renderers import DocxRenderer

BLOCK_TAGS = ["section", "code", "NormalList", "OderList", "OrderedList"]
CONTENT_TAGS = ["text", "link"]
NOISE_TAGS = ["", "bogus", "Section", "newline"]
SECTION_STYLES = ["", "Heading1", "Heading2", "Title", "Subtitle", "body1"]

# Fields never contain the field or line separators
field_text = st.text(alphabet=st.characters(exclude_characters="\t\r\n"), max_size=12)

# Printable text only, so rendered runs stay XML compatible
printable_text = st.text(alphabet=st.characters(categories=("L", "N", "P", "S", "Zs")), max_size=12)


def markup_line(tags, fields=field_text):
    return st.builds(
        lambda tag, args: "\t".join([tag, *args]),
        st.sampled_from(tags),
        st.lists(fields, max_size=3),
    )


def section_line(fields=field_text):
    return st.builds(
        lambda style, args: "\t".join(["section", style, *args]),
        st.sampled_from(SECTION_STYLES),
        st.lists(fields, max_size=2),
    )


def opening_line(fields=field_text):
    return st.one_of(section_line(fields), markup_line(BLOCK_TAGS[1:], fields))


@st.composite
def well_formed_blocks(draw, fields=field_text):
    """Lists of blocks, each an optional opening line plus content lines, closed by newLine."""
    blocks = []
    for _ in range(draw(st.integers(min_value=0, max_value=6))):
        opening = draw(st.one_of(st.none(), opening_line(fields)))
        min_content = 1 if opening is None else 0
        content = draw(st.lists(markup_line(CONTENT_TAGS, fields), min_size=min_content, max_size=3))
        noise = draw(st.lists(markup_line(NOISE_TAGS, fields), max_size=1))
        blocks.append(([opening] if opening else []) + content + noise + ["newLine"])
    return blocks


any_line = st.one_of(
    markup_line(BLOCK_TAGS + CONTENT_TAGS + NOISE_TAGS + ["newLine"]),
    section_line(),
    st.just("newLine"),
)


def parse(text, **options):
    return WordownParser(WordownParserOptions(**options)).parse(text)


def join(blocks):
    return "\n".join(line for block in blocks for line in block)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestParserProperties:
    """Invariants that hold for all markup."""

    @given(st.text())
    def test_arbitrary_text_never_raises(self, text):
        doc = parse(text)
        assert doc.metadata["source_format"] == "wordown"

    @given(st.lists(any_line, max_size=30))
    def test_every_node_has_content(self, lines):
        doc = parse("\n".join(lines))
        assert all(len(node.content) >= 1 for node in doc.children)

    @given(st.lists(st.one_of(markup_line(BLOCK_TAGS + CONTENT_TAGS + NOISE_TAGS), section_line()), max_size=20))
    def test_no_new_line_flushes_at_most_one_node(self, lines):
        assert len(parse("\n".join(lines)).children) <= 1

    @given(well_formed_blocks())
    def test_one_node_per_well_formed_block(self, blocks):
        assert len(parse(join(blocks)).children) == len(blocks)

    @given(well_formed_blocks())
    def test_strict_mode_accepts_well_formed_blocks(self, blocks):
        assert len(parse(join(blocks), unterminated_block_mode="error").children) == len(blocks)

    @given(st.lists(any_line, max_size=30))
    def test_nodes_flush_once_in_source_order(self, lines):
        doc = parse("\n".join(lines))
        starts = [node.source_location.line for node in doc.children]
        assert starts == sorted(set(starts))

    @given(st.lists(any_line, max_size=30))
    def test_newline_count_bounds_node_count(self, lines):
        doc = parse("\n".join(lines))
        new_lines = sum(line.split("\t")[0] == "newLine" for line in lines)
        assert len(doc.children) <= new_lines + 1

    @given(st.lists(any_line, max_size=30))
    def test_json_round_trip(self, lines):
        doc = parse("\n".join(lines))
        assert json_to_ast(ast_to_json(doc)) == doc


@pytest.mark.unit
@pytest.mark.fuzzing
@pytest.mark.docx
class TestRenderingProperties:
    """Generated documents render to DOCX."""

    @given(well_formed_blocks(fields=printable_text))
    @settings(deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_one_paragraph_per_node(self, blocks):
        doc = parse(join(blocks))
        data = DocxRenderer().render_to_bytes(doc)
        paragraphs = DocxDocument(BytesIO(data)).paragraphs
        assert [p.text for p in paragraphs] == [node.text for node in doc.children]
