#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for line and field splitting."""

import pytest

from wordown.parsers.tokenizer import split_lines, tokenize


@pytest.mark.unit
class TestTokenize:
    """Tests for tokenize()."""

    def test_splits_on_tabs(self):
        assert tokenize("section\tHeading1\tIntro\tintro") == ["section", "Heading1", "Intro", "intro"]

    def test_line_without_tabs_is_single_field(self):
        assert tokenize("newLine") == ["newLine"]

    def test_empty_line_yields_one_empty_field(self):
        assert tokenize("") == [""]

    def test_empty_fields_are_preserved(self):
        """Consecutive tabs are not coalesced."""
        assert tokenize("a\t\tb") == ["a", "", "b"]
        assert tokenize("text\t") == ["text", ""]

    def test_fields_are_not_trimmed(self):
        assert tokenize("text\t  padded  ") == ["text", "  padded  "]

    def test_spaces_are_not_separators(self):
        assert tokenize("text\tHello world") == ["text", "Hello world"]


@pytest.mark.unit
class TestSplitLines:
    """Tests for split_lines()."""

    def test_splits_on_lf(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_splits_on_crlf(self):
        assert split_lines("a\r\nb\r\nc") == ["a", "b", "c"]

    def test_trailing_newline_yields_empty_last_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_lone_carriage_return_is_kept(self):
        assert split_lines("a\rb") == ["a\rb"]
