#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/parsers/commands.py
"""Command variants and the tag dispatch table for wordown markup.

Every markup line parses into exactly one command. Missing argument fields
never raise: each command builder substitutes a documented default so one bad
line cannot abort a document.

========== ================ ============================== =========================
Tag        Command          Arguments                      Missing-field defaults
========== ================ ============================== =========================
section    SectionCommand   style, heading text, anchor    body1, "", no anchor
code       CodeCommand      code text                      ""
NormalList ListCommand      nesting level                  level 1
OderList   ListCommand      nesting level                  level 1
text       TextCommand      text                           ""
link       LinkCommand      url or #anchor, display text   "", the target
newLine    NewLineCommand   (none)
other      UnknownCommand   (ignored)
========== ================ ============================== =========================

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from wordown.ast.nodes import ExternalLink, InternalLink, LinkTarget
from wordown.constants import (
    DEFAULT_BODY_STYLE,
    DEFAULT_LIST_LEVEL,
    INTERNAL_LINK_PREFIX,
    ListKind,
    ORDERED_LIST_STYLE_PREFIX,
    STYLE_ERROR,
    TAG_CODE,
    TAG_LINK,
    TAG_NEW_LINE,
    TAG_NORMAL_LIST,
    TAG_ORDERED_LIST,
    TAG_ORDERED_LIST_ALIAS,
    TAG_SECTION,
    TAG_TEXT,
    UNORDERED_LIST_STYLE_PREFIX,
)
from wordown.parsers.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionCommand:
    """Open a heading node bookmarked by ``anchor``."""

    style: str
    text: str
    anchor: Optional[str]
    tag: str = TAG_SECTION


@dataclass(frozen=True)
class CodeCommand:
    """Open a code node holding ``text``."""

    text: str
    tag: str = TAG_CODE


@dataclass(frozen=True)
class ListCommand:
    """Open a list item node.

    ``level`` is None when the nesting level field was present but not an
    integer >= 1; the item then gets the error style.
    """

    list_kind: ListKind
    level: Optional[int]
    tag: str = TAG_NORMAL_LIST


@dataclass(frozen=True)
class TextCommand:
    """Append a plain span to the current node."""

    text: str
    tag: str = TAG_TEXT


@dataclass(frozen=True)
class LinkCommand:
    """Append a linked span to the current node."""

    target: str
    text: str
    tag: str = TAG_LINK

    @property
    def link_target(self) -> LinkTarget:
        """Return the link form: internal for ``#anchor`` targets, external otherwise."""
        if self.target.startswith(INTERNAL_LINK_PREFIX):
            return InternalLink(anchor_id=self.target[len(INTERNAL_LINK_PREFIX) :])
        return ExternalLink(url=self.target)


@dataclass(frozen=True)
class NewLineCommand:
    """Mark the current node ready to flush."""

    tag: str = TAG_NEW_LINE


@dataclass(frozen=True)
class UnknownCommand:
    """A line whose tag is not in the command table; a no-op."""

    tag: str


Command = Union[SectionCommand, CodeCommand, ListCommand, TextCommand, LinkCommand, NewLineCommand, UnknownCommand]
BlockCommand = Union[SectionCommand, CodeCommand, ListCommand]
ContentCommand = Union[TextCommand, LinkCommand]

BLOCK_COMMAND_TYPES = (SectionCommand, CodeCommand, ListCommand)
CONTENT_COMMAND_TYPES = (TextCommand, LinkCommand)


def derive_list_style(list_kind: ListKind, level: Optional[int]) -> str:
    """Derive the paragraph style of a list item.

    Parameters
    ----------
    list_kind : str
        ``"unordered"`` or ``"ordered"``
    level : int or None
        Nesting level, 1-based

    Returns
    -------
    str
        ``"nList<level>"`` or ``"numList<level>"``; the error style for an
        unknown kind or a missing level

    Examples
    --------
    >>> derive_list_style("unordered", 2)
    'nList2'
    >>> derive_list_style("ordered", 3)
    'numList3'
    >>> derive_list_style("bulleted", 1)
    'Error'

    """
    if level is None:
        return STYLE_ERROR
    if list_kind == "unordered":
        return f"{UNORDERED_LIST_STYLE_PREFIX}{level}"
    if list_kind == "ordered":
        return f"{ORDERED_LIST_STYLE_PREFIX}{level}"
    return STYLE_ERROR


def _arg(args: Sequence[str], index: int) -> Optional[str]:
    return args[index] if index < len(args) else None


def _parse_level(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return DEFAULT_LIST_LEVEL
    try:
        level = int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid list nesting level {raw!r}; using the error style")
        return None
    if level < 1:
        logger.warning(f"List nesting level must be >= 1, got {level}; using the error style")
        return None
    return level


def _build_section(args: Sequence[str]) -> SectionCommand:
    anchor = _arg(args, 2)
    return SectionCommand(
        style=_arg(args, 0) or DEFAULT_BODY_STYLE,
        text=_arg(args, 1) or "",
        anchor=anchor or None,
    )


def _build_code(args: Sequence[str]) -> CodeCommand:
    return CodeCommand(text=_arg(args, 0) or "")


def _build_normal_list(args: Sequence[str]) -> ListCommand:
    return ListCommand(list_kind="unordered", level=_parse_level(_arg(args, 0)), tag=TAG_NORMAL_LIST)


def _build_ordered_list(args: Sequence[str]) -> ListCommand:
    return ListCommand(list_kind="ordered", level=_parse_level(_arg(args, 0)), tag=TAG_ORDERED_LIST)


def _build_text(args: Sequence[str]) -> TextCommand:
    return TextCommand(text=_arg(args, 0) or "")


def _build_link(args: Sequence[str]) -> LinkCommand:
    target = _arg(args, 0) or ""
    return LinkCommand(target=target, text=_arg(args, 1) or target)


def _build_new_line(args: Sequence[str]) -> NewLineCommand:
    return NewLineCommand()


COMMAND_TABLE: dict[str, Callable[[Sequence[str]], Command]] = {
    TAG_SECTION: _build_section,
    TAG_CODE: _build_code,
    TAG_NORMAL_LIST: _build_normal_list,
    TAG_ORDERED_LIST: _build_ordered_list,
    TAG_ORDERED_LIST_ALIAS: _build_ordered_list,
    TAG_TEXT: _build_text,
    TAG_LINK: _build_link,
    TAG_NEW_LINE: _build_new_line,
}


def parse_command(fields: Sequence[str]) -> Command:
    """Turn tokenized fields into a command.

    Parameters
    ----------
    fields : sequence of str
        Tag followed by its arguments, as returned by ``tokenize``

    Returns
    -------
    Command
        The command for the tag, or ``UnknownCommand`` for an unrecognized
        or empty tag

    """
    if not fields:
        return UnknownCommand(tag="")
    tag, args = fields[0], fields[1:]
    builder = COMMAND_TABLE.get(tag)
    if builder is None:
        return UnknownCommand(tag=tag)
    return builder(args)


def read_command(line: str) -> Command:
    """Tokenize and parse one markup line."""
    return parse_command(tokenize(line))
