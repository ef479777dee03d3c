#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the wordown library.

This module defines specialized exception classes for the error conditions
that can occur while reading wordown markup and rendering documents. Per-line
markup problems are never raised; they degrade to default values or to the
error style. Only structural failures reach the caller.

Exception Hierarchy
-------------------
- WordownError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - OutputWriteError (file write failures)

  - FormatError (unsupported output formats)

  - ParsingError (markup parsing failures)
    - UnterminatedBlockError (strict mode only)

  - RenderingError (output generation failures)
    - MissingStyleError (style absent from the template)

"""

from typing import Any


class WordownError(Exception):
    """Base exception class for all wordown-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(WordownError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class
    received_type : type
        The options class that was received
    message : str, optional
        Custom error message. If not provided, a helpful message is generated

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(WordownError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input or template file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when rendered output cannot be written."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(WordownError):
    """Exception raised for unknown or unsupported output formats.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The format that was requested
    supported_formats : list of str, optional
        Formats that are available

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            message = f"Unsupported format: {format_type}"
            if supported_formats:
                message += f". Supported formats: {', '.join(supported_formats)}"
        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats or []


class ParsingError(WordownError):
    """Exception raised when markup cannot be turned into a document.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class UnterminatedBlockError(ParsingError):
    """Exception raised when a block opens before the previous one was terminated.

    Only raised when ``unterminated_block_mode="error"``; the default mode
    drops the unterminated block instead.

    Parameters
    ----------
    line_number : int
        1-based line of the block-opening command
    dropped_kind : str
        Kind of the node that would have been dropped
    opening_tag : str, optional
        Tag of the command that opened the new block

    """

    def __init__(self, line_number: int, dropped_kind: str, opening_tag: str | None = None):
        """Initialize the unterminated block error."""
        message = f"Line {line_number}: '{opening_tag or 'block'}' opened before the previous {dropped_kind} block "
        message += "was terminated with newLine"
        super().__init__(message, parsing_stage="accumulate")
        self.line_number = line_number
        self.dropped_kind = dropped_kind
        self.opening_tag = opening_tag


class RenderingError(WordownError):
    """Exception raised when a document cannot be rendered.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class MissingStyleError(RenderingError):
    """Exception raised when a node style cannot be resolved in the template."""

    def __init__(self, style_name: str, style_type: str = "paragraph"):
        """Initialize the missing style error."""
        super().__init__(f"Template has no {style_type} style named '{style_name}'", rendering_stage="styles")
        self.style_name = style_name
        self.style_type = style_type
