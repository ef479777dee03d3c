#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wordown/parsers/base.py
"""Base class for document parsers.

The BaseParser provides the input-loading and option-validation helpers a
parser needs to turn markup into a wordown ``Document``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from wordown.ast import Document
from wordown.exceptions import FileNotFoundError, InvalidOptionsError, ValidationError
from wordown.options.base import BaseParserOptions
from wordown.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: markup text, never a file name
    - Path: file path to read
    - IO[bytes] / IO[str]: file-like object
    - bytes: raw markup bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into a document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            The input to parse

        Returns
        -------
        Document
            Parsed document

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from the supported input types with encoding detection.

        Raises
        ------
        FileNotFoundError
            If a Path does not exist
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            if not input_data.is_file():
                raise FileNotFoundError(str(input_data))
            return read_text_with_encoding_detection(input_data.read_bytes())
        if isinstance(input_data, str):
            return input_data
        if hasattr(input_data, "read"):
            return normalize_stream_to_text(input_data)
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
