#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/parsers/wordown.py
"""Wordown markup to document parser.

This module drives the command accumulator over every line of a wordown
markup text and collects the flushed nodes into a ``Document``.

Wordown is line oriented: each line is a tab-separated command whose first
field is the tag. Block-opening tags (``section``, ``code``, ``NormalList``,
``OderList``) start a node, content tags (``text``, ``link``) add spans to
it, and ``newLine`` flushes it.

Examples
--------
    >>> from wordown.parsers.wordown import WordownParser
    >>> doc = WordownParser().parse("section\\tHeading1\\tIntroduction\\tintro\\nnewLine")
    >>> doc.children[0].anchor
    'intro'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from wordown.ast import Document, Node
from wordown.constants import is_recognized_style
from wordown.exceptions import UnterminatedBlockError
from wordown.options.wordown import WordownParserOptions
from wordown.parsers.accumulator import finish, initial_state, is_discardable, transition
from wordown.parsers.base import BaseParser
from wordown.parsers.commands import UnknownCommand, read_command
from wordown.parsers.tokenizer import split_lines

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class WordownParser(BaseParser):
    """Convert wordown markup to a document.

    Parameters
    ----------
    options : WordownParserOptions or None
        Parser configuration

    """

    def __init__(self, options: WordownParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, WordownParserOptions, "wordown")
        options = options or WordownParserOptions()
        super().__init__(options)
        self.options: WordownParserOptions = options

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse wordown markup into a document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markup text, a Path to a markup file, a stream or raw bytes

        Returns
        -------
        Document
            Nodes in flush order

        Raises
        ------
        UnterminatedBlockError
            In strict mode, when a block opens before the previous one was terminated
        FileNotFoundError
            If a Path input does not exist

        """
        content = self._load_text_content(input_data)
        return self.convert_to_ast(content)

    def convert_to_ast(self, content: str) -> Document:
        """Convert markup text to a document.

        Parameters
        ----------
        content : str
            Complete markup text

        Returns
        -------
        Document
            Parsed document with ``source_format`` and ``line_count`` metadata

        """
        if self.options.strip_bom and content.startswith(_BOM):
            content = content[len(_BOM) :]
        lines = split_lines(content)
        children = list(self.iter_nodes(lines))
        logger.debug(f"Parsed {len(lines)} lines into {len(children)} nodes")
        return Document(children=children, metadata={"source_format": "wordown", "line_count": len(lines)})

    def iter_nodes(self, lines: Iterable[str]) -> Iterator[Node]:
        """Yield flushed nodes while consuming markup lines.

        Lines are consumed strictly in order; a node is yielded as soon as its
        ``newLine`` arrives, and the node still open after the last line is
        yielded at the end.

        Parameters
        ----------
        lines : iterable of str
            Markup lines without terminators

        Yields
        ------
        Node
            Flushed nodes in document order

        Raises
        ------
        UnterminatedBlockError
            In strict mode, when a block opens before the previous one was terminated

        """
        state = initial_state(self.options)
        for line_number, line in enumerate(lines, start=1):
            command = read_command(line)
            if isinstance(command, UnknownCommand):
                if command.tag:
                    logger.debug(f"Line {line_number}: ignoring unrecognized tag {command.tag!r}")
                continue

            step = transition(state, command, self.options, line=line_number)
            if step.dropped is not None:
                self._handle_dropped(step.dropped, line_number, command.tag)
            if step.ready is not None and not is_discardable(step.ready):
                yield self._flushed(step.ready)
            state = step.state

        trailing = finish(state)
        if trailing is not None and not is_discardable(trailing):
            logger.debug("Flushing unterminated block at end of input")
            yield self._flushed(trailing)

    def _handle_dropped(self, node: Node, line_number: int, opening_tag: str) -> None:
        if self.options.strict:
            raise UnterminatedBlockError(line_number=line_number, dropped_kind=node.kind, opening_tag=opening_tag)
        logger.warning(
            f"Line {line_number}: '{opening_tag}' opened before the previous {node.kind} block was terminated; "
            f"dropping {node.text!r}"
        )

    @staticmethod
    def _flushed(node: Node) -> Node:
        if not is_recognized_style(node.style):
            logger.debug(f"Node style {node.style!r} is not a standard wordown style")
        return node
