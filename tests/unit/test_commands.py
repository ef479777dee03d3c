#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for command parsing and list style derivation."""

import logging

import pytest

from wordown.ast import ExternalLink, InternalLink
from wordown.parsers.commands import (
    COMMAND_TABLE,
    CodeCommand,
    LinkCommand,
    ListCommand,
    NewLineCommand,
    SectionCommand,
    TextCommand,
    UnknownCommand,
    derive_list_style,
    parse_command,
    read_command,
)


@pytest.mark.unit
class TestDeriveListStyle:
    """Tests for list style naming."""

    def test_unordered(self):
        assert derive_list_style("unordered", 2) == "nList2"

    def test_ordered(self):
        assert derive_list_style("ordered", 3) == "numList3"

    def test_unknown_kind_gives_error_style(self):
        assert derive_list_style("bulleted", 1) == "Error"

    def test_missing_level_gives_error_style(self):
        assert derive_list_style("unordered", None) == "Error"

    def test_levels_beyond_three_are_still_derived(self):
        assert derive_list_style("unordered", 5) == "nList5"


@pytest.mark.unit
class TestSectionCommand:
    """Tests for the section tag."""

    def test_all_fields(self):
        command = read_command("section\tHeading1\tIntroduction\tintro")
        assert command == SectionCommand(style="Heading1", text="Introduction", anchor="intro")

    def test_missing_fields_use_defaults(self):
        command = read_command("section")
        assert command == SectionCommand(style="body1", text="", anchor=None)

    def test_missing_anchor(self):
        command = read_command("section\tTitle\tReport")
        assert command.anchor is None
        assert command.text == "Report"

    def test_empty_anchor_means_no_anchor(self):
        assert read_command("section\tHeading2\tBody\t").anchor is None

    def test_empty_style_falls_back_to_body(self):
        assert read_command("section\t\tText").style == "body1"

    def test_extra_fields_are_ignored(self):
        command = read_command("section\tHeading1\tA\tb\textra")
        assert command == SectionCommand(style="Heading1", text="A", anchor="b")


@pytest.mark.unit
class TestListCommands:
    """Tests for the NormalList and OderList tags."""

    def test_normal_list(self):
        command = read_command("NormalList\t2")
        assert command == ListCommand(list_kind="unordered", level=2, tag="NormalList")

    def test_ordered_list(self):
        command = read_command("OderList\t3")
        assert isinstance(command, ListCommand)
        assert command.list_kind == "ordered"
        assert command.level == 3

    def test_ordered_list_alias(self):
        command = read_command("OrderedList\t1")
        assert isinstance(command, ListCommand)
        assert command.list_kind == "ordered"

    def test_missing_level_defaults_to_one(self):
        assert read_command("NormalList").level == 1
        assert read_command("NormalList\t").level == 1

    def test_level_with_surrounding_spaces(self):
        assert read_command("NormalList\t 2 ").level == 2

    @pytest.mark.parametrize("raw", ["two", "1.5", "0", "-1"])
    def test_invalid_level_is_none(self, raw, caplog):
        with caplog.at_level(logging.WARNING, logger="wordown.parsers.commands"):
            command = read_command(f"NormalList\t{raw}")
        assert command.level is None
        assert caplog.records


@pytest.mark.unit
class TestContentCommands:
    """Tests for the text, link, code and newLine tags."""

    def test_text(self):
        assert read_command("text\tHello ") == TextCommand(text="Hello ")

    def test_text_without_content(self):
        assert read_command("text") == TextCommand(text="")

    def test_code(self):
        assert read_command("code\tx = 1") == CodeCommand(text="x = 1")

    def test_code_without_content(self):
        assert read_command("code") == CodeCommand(text="")

    def test_link_with_display_text(self):
        command = read_command("link\thttps://example.com\tExample")
        assert command == LinkCommand(target="https://example.com", text="Example")
        assert command.link_target == ExternalLink(url="https://example.com")

    def test_link_display_text_defaults_to_target(self):
        command = read_command("link\thttps://example.com")
        assert command.text == "https://example.com"

    def test_internal_link(self):
        command = read_command("link\t#intro\tIntroduction")
        assert command.link_target == InternalLink(anchor_id="intro")

    def test_link_without_target(self):
        command = read_command("link")
        assert command == LinkCommand(target="", text="")

    def test_new_line_ignores_arguments(self):
        assert read_command("newLine\tignored") == NewLineCommand()


@pytest.mark.unit
class TestUnknownCommands:
    """Tests for unrecognized tags."""

    def test_unknown_tag(self):
        assert read_command("heading\tx") == UnknownCommand(tag="heading")

    def test_tags_are_case_sensitive(self):
        assert isinstance(read_command("Text\tx"), UnknownCommand)
        assert isinstance(read_command("newline"), UnknownCommand)

    def test_empty_line(self):
        assert read_command("") == UnknownCommand(tag="")

    def test_empty_field_list(self):
        assert parse_command([]) == UnknownCommand(tag="")

    def test_table_covers_every_tag(self):
        expected = {"section", "code", "NormalList", "OderList", "OrderedList", "text", "link", "newLine"}
        assert set(COMMAND_TABLE) == expected
