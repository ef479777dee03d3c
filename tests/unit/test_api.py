#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the top-level API functions."""

import json
from io import BytesIO

import pytest
from docx import Document as DocxDocument

from wordown import Document, convert, from_ast, to_ast
from wordown.exceptions import FormatError, UnterminatedBlockError, ValidationError
from wordown.options import DocxRendererOptions, WordownParserOptions


@pytest.mark.unit
class TestToAst:
    """Tests for to_ast()."""

    def test_parses_markup(self, sample_markup):
        doc = to_ast(sample_markup)
        assert isinstance(doc, Document)
        assert len(doc.children) == 6

    def test_keyword_options(self):
        with pytest.raises(UnterminatedBlockError):
            to_ast("code\ta\ncode\tb", unterminated_block_mode="error")

    def test_keyword_options_override_options_object(self):
        options = WordownParserOptions(body_style="Normal")
        doc = to_ast("text\tx\nnewLine", parser_options=options, body_style="Body Text")
        assert doc.children[0].style == "Body Text"


@pytest.mark.unit
class TestFromAst:
    """Tests for from_ast()."""

    def test_json_returns_string(self, sample_markup):
        result = from_ast(to_ast(sample_markup), "json")
        assert json.loads(result)["type"] == "document"

    def test_docx_returns_bytes(self, sample_markup):
        result = from_ast(to_ast(sample_markup), "docx")
        assert isinstance(result, bytes)
        assert DocxDocument(BytesIO(result)).paragraphs[0].text == "Introduction"

    def test_writes_to_output(self, tmp_path):
        output = tmp_path / "out.json"
        assert from_ast(to_ast("text\ta\nnewLine"), "json", output) is None
        assert json.loads(output.read_text(encoding="utf-8"))["children"][0]["kind"] == "styled_text"

    def test_unknown_format(self):
        with pytest.raises(FormatError) as exc_info:
            from_ast(Document(), "pdf")
        assert exc_info.value.supported_formats == ["docx", "json"]

    def test_keyword_renderer_options(self):
        result = from_ast(to_ast("text\ta\nnewLine"), "json", indent=None)
        assert "\n" not in result


@pytest.mark.unit
class TestConvert:
    """Tests for convert()."""

    def test_markup_to_docx_file(self, template_path, tmp_path):
        output = tmp_path / "report.docx"
        convert("text\tBody\nnewLine", output, template_path=str(template_path))
        assert [p.text for p in DocxDocument(str(output)).paragraphs] == ["Before", "Body", "After"]

    def test_routes_keywords(self, tmp_path):
        result = convert("code\ta\nnewLine", target_format="json", code_style="Source", indent=4)
        data = json.loads(result)
        assert data["children"][0]["style"] == "Source"
        assert '\n    "' in result

    def test_options_objects(self, tmp_path):
        output = tmp_path / "out.docx"
        convert(
            "section\tHeading1\tTitle\tt\nnewLine",
            output,
            parser_options=WordownParserOptions(),
            renderer_options=DocxRendererOptions(creator="tester"),
        )
        assert DocxDocument(str(output)).core_properties.last_modified_by == "tester"

    def test_unknown_keyword(self):
        with pytest.raises(ValidationError):
            convert("text\ta", target_format="json", colour="red")

    def test_renderer_keyword_for_other_format_is_rejected(self):
        with pytest.raises(ValidationError):
            convert("text\ta", target_format="json", template_path="t.docx")
