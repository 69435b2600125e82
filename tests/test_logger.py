"""
Tests for logger functionality.
"""

import logging
from datetime import datetime
from pathlib import Path

import pytest

from infokeeper.logger import OperationStats, StructuredLogger, get_logger, log_file_for, reset_logger


@pytest.fixture
def quiet_logger(tmp_path):
    logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
    yield logger
    logger.close()


def read_log(tmp_path: Path) -> str:
    return next(tmp_path.glob("*.log")).read_text()


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, quiet_logger, tmp_path):
        """Logger should be created with default settings."""
        assert quiet_logger.logger.name == "test"
        assert quiet_logger.operations == {}
        assert quiet_logger.log_file == log_file_for(tmp_path)

    def test_log_methods(self, quiet_logger, tmp_path):
        """All log level methods should work."""
        quiet_logger.debug("Debug message")
        quiet_logger.info("Info message")
        quiet_logger.warning("Warning message")
        quiet_logger.error("Error message")
        quiet_logger.critical("Critical message")

        log_content = read_log(tmp_path)
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert level in log_content

    def test_file_keeps_debug_above_console_level(self, tmp_path):
        logger = StructuredLogger(name="test", level="WARNING", log_dir=tmp_path, enable_console=False)
        logger.debug("kept for later")
        logger.close()
        assert "kept for later" in read_log(tmp_path)

    def test_log_with_context(self, quiet_logger, tmp_path):
        """Context is appended as JSON, non-JSON values as text."""
        quiet_logger.info("Message with context", record_id=5, path=Path("data/x.db"))

        log_content = read_log(tmp_path)
        assert '"record_id": 5' in log_content
        assert '"path": "data/x.db"' in log_content

    def test_log_file_name(self, tmp_path):
        assert log_file_for(tmp_path, datetime(2026, 3, 9)) == tmp_path / "infokeeper_20260309.log"

    def test_log_file_creation(self, quiet_logger, tmp_path):
        """Log file should be created in specified directory."""
        quiet_logger.info("Test message")

        log_files = list(tmp_path.glob("infokeeper_*.log"))
        assert len(log_files) == 1
        assert "Test message" in log_files[0].read_text()

    def test_no_outputs(self, tmp_path):
        """A logger with every output disabled still accepts messages."""
        logger = StructuredLogger(name="silent", enable_file=False, enable_console=False)
        logger.error("nobody hears this")
        assert logger.log_file is None
        assert list(tmp_path.iterdir()) == []


class TestOperationMetrics:
    """Test counting of record service calls."""

    def test_metrics_tracking(self, quiet_logger):
        """Metrics should be tracked correctly."""
        quiet_logger.record_operation("insert")
        quiet_logger.record_operation("delete", error=RuntimeError("disk I/O error"))

        metrics = quiet_logger.get_metrics()

        assert metrics["operations_attempted"] == 2
        assert metrics["operations_successful"] == 1
        assert metrics["operations_failed"] == 1
        assert metrics["errors_by_type"] == {"RuntimeError": 1}

        assert metrics["operations"]["insert"]["attempts"] == 1
        assert metrics["operations"]["insert"]["successes"] == 1
        assert metrics["operations"]["insert"]["success_rate"] == 1.0
        assert metrics["operations"]["delete"]["success_rate"] == 0.0
        assert metrics["operations"]["delete"]["last_error"] == "disk I/O error"

    def test_success_rate_calculation(self, quiet_logger):
        """Success rate should be calculated correctly."""
        quiet_logger.record_operation("update")
        quiet_logger.record_operation("update")
        quiet_logger.record_operation("update", error=KeyError(3))

        success_rate = quiet_logger.get_metrics()["operations"]["update"]["success_rate"]

        assert success_rate == pytest.approx(0.667, rel=0.01)

    def test_empty_stats(self):
        stats = OperationStats()
        assert stats.successes == 0
        assert stats.success_rate == 0.0

    def test_summary_without_operations(self, quiet_logger, tmp_path):
        """Nothing is logged before the first service call."""
        assert quiet_logger.log_metrics_summary() is False
        assert read_log(tmp_path) == ""

    def test_metrics_summary(self, quiet_logger, tmp_path):
        quiet_logger.record_operation("insert")
        quiet_logger.record_operation("delete", error=ValueError("locked"))

        assert quiet_logger.log_metrics_summary() is True

        log_content = read_log(tmp_path)
        assert "Record operations: 1/2 succeeded" in log_content
        assert "insert: 1/1 (100.0%)" in log_content
        assert "delete: 0/1 (0.0%) last error: locked" in log_content
        assert '"ValueError": 1' in log_content

    def test_summary_level(self, tmp_path):
        logger = StructuredLogger(name="test", level="INFO", log_dir=tmp_path, enable_console=False)
        logger.record_operation("insert")
        logger.log_metrics_summary(level=logging.DEBUG)
        logger.close()
        assert "DEBUG" in read_log(tmp_path)


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self, tmp_path):
        """get_logger should return same instance."""
        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger2 = get_logger()

        assert logger1 is logger2

    def test_reset_logger(self, tmp_path):
        """reset_logger should create new instance."""
        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger1.record_operation("insert")

        reset_logger()

        logger2 = get_logger(log_dir=tmp_path, enable_console=False)

        assert logger2 is not logger1
        assert logger2.get_metrics()["operations_attempted"] == 0
