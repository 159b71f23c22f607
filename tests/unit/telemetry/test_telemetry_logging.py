"""Unit tests for the telemetry logging setup."""

import json
import logging
from pathlib import Path

import pytest

from perf_telemetry.telemetry_logging import (
    ROOT_LOGGER_NAME,
    JSONFormatter,
    LogCategory,
    debug_context,
    get_category_logger,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo setup_logging so later caplog-based tests still see records."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = True


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="perf_telemetry.timing",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record("[PERF] op: 1.00ms")))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "perf_telemetry.timing"
        assert entry["message"] == "[PERF] op: 1.00ms"
        assert "timestamp" in entry

    def test_timing_extras(self):
        record = _record(duration_ms=12.5, operation="form-generation", category="generation")

        entry = json.loads(JSONFormatter().format(record))

        assert entry["duration_ms"] == 12.5
        assert entry["operation"] == "form-generation"
        assert entry["category"] == "generation"
        assert "metric_count" not in entry


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "telemetry.log"
        logger = setup_logging(log_file=log_file, quiet=True)

        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_json_file_format(self, tmp_path: Path) -> None:
        log_file = tmp_path / "json.log"
        setup_logging(log_file=log_file, log_format="json", quiet=True)

        get_category_logger(LogCategory.REGRESSION).warning("regressed")

        lines = log_file.read_text().strip().split("\n")
        entry = json.loads(lines[-1])
        assert entry["message"] == "regressed"
        assert entry["logger"] == "perf_telemetry.regression"

    def test_quiet_has_no_console_handler(self) -> None:
        logger = setup_logging(quiet=True)

        assert logger.handlers == []
        assert logger.propagate is False

    def test_verbose_console_level(self) -> None:
        logger = setup_logging(verbose=True)

        [handler] = logger.handlers
        assert handler.level == logging.DEBUG


class TestLoggerHelpers:
    """Tests for logger lookup helpers."""

    def test_category_loggers_are_children(self):
        for category in LogCategory:
            logger = get_category_logger(category)
            assert logger.name == f"perf_telemetry.{category.value}"
            assert logger.parent is get_logger()

    def test_debug_context_restores_level(self):
        logger = get_logger()
        logger.setLevel(logging.WARNING)

        with debug_context() as target:
            assert target.level == logging.DEBUG

        assert logger.level == logging.WARNING
