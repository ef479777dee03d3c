#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the wordown command line.

Handlers are attached to the ``wordown`` logger namespace only, so an
application that embeds the library keeps its own root configuration. Each
console line is tagged with the stage that emitted it, which keeps the
warnings about dropped blocks, missing styles and unresolved links readable
in a long run::

    WARNING [parse] Line 4: 'code' opened before the previous heading block was terminated; dropping 'A'
    WARNING [render] Template has no paragraph style 'nList3'; using default formatting

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "wordown"

# Subpackage of the emitting module -> stage tag
_STAGES = {
    "parsers": "parse",
    "utils": "input",
    "renderers": "render",
    "cli": "cli",
}

CONSOLE_FORMAT = "%(levelname)s [%(stage)s] %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def stage_for_logger(name: str) -> str:
    """Return the stage tag for a logger name.

    >>> stage_for_logger("wordown.parsers.wordown")
    'parse'
    >>> stage_for_logger("wordown.api")
    'api'
    """
    parts = name.split(".")
    if parts[0] != LOGGER_NAMESPACE or len(parts) < 2:
        return parts[0]
    return _STAGES.get(parts[1], parts[1])


class StageFormatter(logging.Formatter):
    """Formatter that exposes ``%(stage)s`` derived from the record's logger name."""

    def format(self, record: logging.LogRecord) -> str:
        record.stage = stage_for_logger(record.name)
        return super().format(record)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the ``wordown`` logger for a command-line run.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path to a log file that receives a copy of the console output.
    trace_mode : bool, default False
        When true, emit timestamps and full logger names instead of stage tags.

    Returns
    -------
    logging.Logger
        The configured ``wordown`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter: logging.Formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = StageFormatter(CONSOLE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning(f"Could not create log file {log_file}: {exc}")
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info(f"Logging to file: {log_file}")

    return package_logger
