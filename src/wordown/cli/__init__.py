#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for wordown.

This module provides a command-line tool for converting wordown markup into
Word documents, or into JSON for inspecting the parsed nodes.

Usage:
    wordown input.wd [-o output.docx] [-t template.docx] [--strict]
    wordown input.wd --to json
    cat input.wd | wordown - -o output.docx
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from wordown import __version__
from wordown.api import convert
from wordown.cli.config import CONFIG_ENV_VAR, load_config_with_priority
from wordown.constants import OUTPUT_FORMATS
from wordown.exceptions import (
    FileError,
    FormatError,
    ParsingError,
    RenderingError,
    ValidationError,
    WordownError,
)
from wordown.logging_utils import configure_logging
from wordown.options import DocxRendererOptions, JsonRendererOptions, WordownParserOptions
from wordown.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

STDIN_MARKER = "-"

__all__ = [
    "main",
    "create_parser",
    "build_options",
    "get_exit_code_for_exception",
]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the wordown CLI."""
    parser = argparse.ArgumentParser(
        prog="wordown",
        description="Convert wordown markup into a styled Word document.",
        epilog=f"Config files (.wordown.toml, .wordown.yaml, .wordown.json, [tool.wordown] in pyproject.toml "
        f"or ${CONFIG_ENV_VAR}) supply defaults; command-line flags override them.",
    )
    parser.add_argument("input", help="Wordown markup file, or '-' to read from stdin")
    parser.add_argument(
        "-o",
        "--out",
        help="Output file (default: input path with .docx suffix for docx, stdout for json)",
    )
    parser.add_argument("--to", choices=OUTPUT_FORMATS, default=None, help="Output format (default: docx)")
    parser.add_argument("-t", "--template", help="DOCX template containing the placeholder paragraph")
    parser.add_argument(
        "--placeholder",
        help="Name of the template placeholder, written as {{name}} in the template (default: paragraphReplace)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a block opens before the previous block was terminated with newLine",
    )
    parser.add_argument(
        "--missing-style",
        choices=["create", "error", "ignore"],
        default=None,
        help="What to do when the template lacks a style (default: create)",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Path to a configuration file")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"wordown {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from command-line arguments; ``--trace`` wins over ``--log-level``."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(
    parsed_args: argparse.Namespace, config: dict[str, Any]
) -> tuple[str, WordownParserOptions, BaseRendererOptions]:
    """Merge config-file values and command-line flags into option objects.

    Command-line flags override config values, which override defaults.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict
        Loaded configuration mapping

    Returns
    -------
    tuple
        ``(target_format, parser_options, renderer_options)``

    Raises
    ------
    ValueError
        If a merged value is invalid
    TypeError
        If a config value has the wrong shape for its option

    """
    values = dict(config)
    overrides = {
        "target_format": parsed_args.to,
        "template_path": parsed_args.template,
        "placeholder": parsed_args.placeholder,
        "missing_style_mode": parsed_args.missing_style,
        "unterminated_block_mode": "error" if parsed_args.strict else None,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    target_format = values.pop("target_format", "docx")
    if target_format not in OUTPUT_FORMATS:
        raise ValueError(f"target_format must be one of {', '.join(OUTPUT_FORMATS)}, got {target_format!r}")

    parser_options = WordownParserOptions.from_mapping(values)
    options_class = DocxRendererOptions if target_format == "docx" else JsonRendererOptions
    renderer_options = options_class.from_mapping(values)
    return target_format, parser_options, renderer_options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (ValidationError, FormatError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _resolve_output(parsed_args: argparse.Namespace, target_format: str) -> Optional[Path]:
    if parsed_args.out:
        return Path(parsed_args.out)
    if target_format == "json":
        return None
    if parsed_args.input == STDIN_MARKER:
        raise ValueError("An output file (-o) is required for docx output when reading from stdin")
    return Path(parsed_args.input).with_suffix(".docx")


def main(args: list[str] | None = None) -> int:
    """Run the wordown command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        target_format, parser_options, renderer_options = build_options(parsed_args, config)
        output = _resolve_output(parsed_args, target_format)
    except (argparse.ArgumentTypeError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    source: Any = sys.stdin.buffer.read() if parsed_args.input == STDIN_MARKER else Path(parsed_args.input)

    try:
        result = convert(
            source,
            output,
            target_format=target_format,
            parser_options=parser_options,
            renderer_options=renderer_options,
        )
    except WordownError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if output is None and isinstance(result, str):
        sys.stdout.write(result)
        sys.stdout.write("\n")
    else:
        logger.info(f"Wrote {output}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
