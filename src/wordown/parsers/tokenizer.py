#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/parsers/tokenizer.py
"""Line and field splitting for wordown markup.

There is no escaping: a tab inside intended text starts a new field and a
newline starts a new line.
"""

from __future__ import annotations

from wordown.constants import FIELD_SEPARATOR, LINE_SEPARATOR_PATTERN


def tokenize(line: str) -> list[str]:
    """Split one markup line into its fields.

    Fields are separated by single tabs and are neither trimmed nor
    coalesced, so ``"a\\t\\tb"`` yields ``["a", "", "b"]``. A line without
    tabs yields one field: a tag with no arguments.

    Parameters
    ----------
    line : str
        One line of markup, without its line terminator

    Returns
    -------
    list of str
        Tag followed by its arguments

    """
    return line.split(FIELD_SEPARATOR)


def split_lines(text: str) -> list[str]:
    r"""Split markup text into lines on ``\n`` or ``\r\n``.

    Parameters
    ----------
    text : str
        Complete markup text

    Returns
    -------
    list of str
        Lines without terminators. A trailing newline yields a final empty
        line, which parses as an unknown (no-op) command.

    """
    return LINE_SEPARATOR_PATTERN.split(text)
