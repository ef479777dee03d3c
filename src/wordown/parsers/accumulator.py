#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/parsers/accumulator.py
"""Single-slot node accumulator for wordown markup.

The accumulator holds exactly one node in progress. It is either ``Idle``,
holding an untouched default paragraph, or ``Open``, holding a node that was
opened by a block command or that received content.

``transition`` is a pure function of the current state and one command:

============== ============================== =================================
Command        From Idle                      From Open
============== ============================== =================================
block-opening  Open(new node)                 Open(new node); old node dropped
text / link    Open(upgraded node + span)     Open(node + span)
newLine        Idle(fresh); idle node ready   Idle(fresh); open node ready
unknown        unchanged                      unchanged
============== ============================== =================================

A node dropped by a block-opening command is never emitted; the caller
decides whether to log the drop or raise. At end of input ``finish`` returns
the node still open so trailing content is not lost.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from wordown.ast.nodes import EMPTY_SPAN, Node, RichTextSpan, SourceLocation
from wordown.options.wordown import WordownParserOptions
from wordown.parsers.commands import (
    BLOCK_COMMAND_TYPES,
    CONTENT_COMMAND_TYPES,
    BlockCommand,
    CodeCommand,
    Command,
    ContentCommand,
    LinkCommand,
    ListCommand,
    NewLineCommand,
    SectionCommand,
    UnknownCommand,
    derive_list_style,
)

_DEFAULT_OPTIONS = WordownParserOptions()


def new_default_node(options: WordownParserOptions = _DEFAULT_OPTIONS) -> Node:
    """Return the untouched default paragraph the accumulator idles on."""
    return Node(kind="default_text", style=options.body_style, content=(EMPTY_SPAN,))


@dataclass(frozen=True)
class Idle:
    """No block in progress; ``node`` is an untouched default paragraph."""

    node: Node = field(default_factory=new_default_node)


@dataclass(frozen=True)
class Open:
    """A block is in progress.

    ``awaiting_content`` is set while a list item opened without text still
    holds its construction placeholder; the first content span replaces it.
    Every other span is appended, empty or not.
    """

    node: Node
    awaiting_content: bool = False


State = Union[Idle, Open]


@dataclass(frozen=True)
class Transition:
    """Result of feeding one command to the accumulator.

    Parameters
    ----------
    state : Idle or Open
        State after the command
    ready : Node or None
        Node finalized by ``newLine``; the caller filters and flushes it
    dropped : Node or None
        Unterminated node discarded by a block-opening command

    """

    state: State
    ready: Optional[Node] = None
    dropped: Optional[Node] = None


def initial_state(options: WordownParserOptions = _DEFAULT_OPTIONS) -> Idle:
    """Return the state a fresh parse starts in."""
    return Idle(node=new_default_node(options))


def _location(line: Optional[int]) -> Optional[SourceLocation]:
    return SourceLocation(format="wordown", line=line) if line is not None else None


def open_block(
    command: BlockCommand,
    options: WordownParserOptions = _DEFAULT_OPTIONS,
    line: Optional[int] = None,
) -> Node:
    """Construct the node a block-opening command starts.

    Parameters
    ----------
    command : BlockCommand
        Block-opening command
    options : WordownParserOptions
        Parser options (code style)
    line : int or None
        Line the command came from

    Returns
    -------
    Node
        Heading, code or list item node

    """
    location = _location(line)
    if isinstance(command, SectionCommand):
        return Node(
            kind="heading",
            style=command.style,
            content=(RichTextSpan(text=command.text),),
            anchor=command.anchor,
            source_location=location,
        )
    if isinstance(command, CodeCommand):
        return Node(
            kind="code",
            style=options.code_style,
            content=(RichTextSpan(text=command.text),),
            source_location=location,
        )
    kind = "ordered_list_item" if command.list_kind == "ordered" else "normal_list_item"
    return Node(
        kind=kind,
        style=derive_list_style(command.list_kind, command.level),
        source_location=location,
    )


def content_span(
    command: ContentCommand, options: WordownParserOptions = _DEFAULT_OPTIONS
) -> RichTextSpan:
    """Build the span a content command appends."""
    if isinstance(command, LinkCommand):
        return RichTextSpan(text=command.text, style_ref=options.hyperlink_style, link_target=command.link_target)
    return RichTextSpan(text=command.text)


def transition(
    state: State,
    command: Command,
    options: WordownParserOptions = _DEFAULT_OPTIONS,
    line: Optional[int] = None,
) -> Transition:
    """Apply one command to the accumulator state.

    Parameters
    ----------
    state : Idle or Open
        Current state
    command : Command
        Parsed command
    options : WordownParserOptions
        Parser options (styles)
    line : int or None
        1-based line number, recorded on newly opened nodes

    Returns
    -------
    Transition
        New state plus any ready or dropped node

    Raises
    ------
    TypeError
        If ``command`` is not a known command variant

    """
    if isinstance(command, BLOCK_COMMAND_TYPES):
        dropped = state.node if isinstance(state, Open) else None
        opened = Open(node=open_block(command, options, line), awaiting_content=isinstance(command, ListCommand))
        return Transition(state=opened, dropped=dropped)

    if isinstance(command, CONTENT_COMMAND_TYPES):
        span = content_span(command, options)
        if isinstance(state, Idle):
            kind = "link" if isinstance(command, LinkCommand) else "styled_text"
            upgraded = replace(state.node, kind=kind, content=(span,), source_location=_location(line))
            return Transition(state=Open(node=upgraded))
        if state.awaiting_content:
            return Transition(state=Open(node=replace(state.node, content=(span,))))
        return Transition(state=Open(node=state.node.with_span(span)))

    if isinstance(command, NewLineCommand):
        return Transition(state=initial_state(options), ready=state.node)

    if isinstance(command, UnknownCommand):
        return Transition(state=state)

    raise TypeError(f"Unknown command type: {type(command).__name__}")


def finish(state: State) -> Optional[Node]:
    """Return the node to force-flush at end of input, if any.

    Parameters
    ----------
    state : Idle or Open
        State after the last line

    Returns
    -------
    Node or None
        The open node, or None when idle

    """
    if isinstance(state, Open):
        return state.node
    return None


def is_discardable(node: Node) -> bool:
    """Return True for a default paragraph that never received content."""
    return node.kind == "default_text" and node.is_placeholder
