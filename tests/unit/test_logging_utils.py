#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging configuration."""

import logging

import pytest

from wordown.logging_utils import StageFormatter, configure_logging, stage_for_logger


@pytest.fixture(autouse=True)
def restore_loggers():
    root = logging.getLogger()
    package_logger = logging.getLogger("wordown")
    root_handlers = list(root.handlers)
    handlers, level, propagate = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    root.handlers[:] = root_handlers


def make_record(name: str, message: str, level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, message, None, None)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configures_package_namespace(self):
        root_handlers = list(logging.getLogger().handlers)
        package_logger = configure_logging("debug")
        assert package_logger.name == "wordown"
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert not package_logger.propagate
        assert logging.getLogger().handlers == root_handlers

    def test_reconfiguring_replaces_handlers(self):
        configure_logging(logging.INFO)
        package_logger = configure_logging(logging.WARNING)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert configure_logging("verbose").level == logging.INFO

    def test_console_lines_carry_stage(self):
        handler = configure_logging(logging.INFO).handlers[0]
        assert isinstance(handler.formatter, StageFormatter)

    def test_trace_format(self):
        handler = configure_logging(logging.INFO, trace_mode=True).handlers[0]
        assert "%(name)s" in handler.formatter._fmt

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        package_logger = configure_logging(logging.INFO, log_file=str(log_file))
        assert len(package_logger.handlers) == 2
        logging.getLogger("wordown.parsers.wordown").warning("Line 3: dropping 'x'")
        assert "WARNING [parse] Line 3: dropping 'x'" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file_is_reported(self, tmp_path):
        package_logger = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "run.log"))
        assert len(package_logger.handlers) == 1


@pytest.mark.unit
class TestStageFormatter:
    """Tests for stage tagging of log records."""

    @pytest.mark.parametrize(
        "name,stage",
        [
            ("wordown.parsers.wordown", "parse"),
            ("wordown.parsers.commands", "parse"),
            ("wordown.utils.encoding", "input"),
            ("wordown.renderers.docx", "render"),
            ("wordown.cli.config", "cli"),
            ("wordown.api", "api"),
            ("wordown", "wordown"),
            ("docx.opc", "docx"),
        ],
    )
    def test_stage_for_logger(self, name, stage):
        assert stage_for_logger(name) == stage

    def test_format(self):
        formatter = StageFormatter("%(levelname)s [%(stage)s] %(message)s")
        record = make_record("wordown.renderers.docx", "Template has no paragraph style 'x'")
        assert formatter.format(record) == "WARNING [render] Template has no paragraph style 'x'"
