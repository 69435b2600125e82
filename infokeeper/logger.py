"""
Structured logging for InfoKeeper.

One logger per process writes to stdout and to a daily file. Keyword
context is appended to each message as JSON. The logger also counts the
outcome of every record service call so a command can finish with a short
summary of what it stored, changed or failed to change.
"""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from datetime import datetime
import json

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


@dataclass
class OperationStats:
    """Outcome counters for one service operation (insert, update, delete)."""

    attempts: int = 0
    failures: int = 0
    errors_by_type: Counter = field(default_factory=Counter)
    last_error: Optional[str] = None

    @property
    def successes(self) -> int:
        return self.attempts - self.failures

    @property
    def success_rate(self) -> float:
        if not self.attempts:
            return 0.0
        return round(self.successes / self.attempts, 3)

    def as_dict(self) -> dict:
        return {
            "attempts": self.attempts,
            "successes": self.successes,
            "failures": self.failures,
            "success_rate": self.success_rate,
            "errors_by_type": dict(self.errors_by_type),
            "last_error": self.last_error,
        }


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    return handler


def log_file_for(log_dir: Path, day: Optional[datetime] = None) -> Path:
    """Daily log file path, e.g. logs/infokeeper_20261019.log."""
    day = day or datetime.now()
    return log_dir / f"infokeeper_{day.strftime('%Y%m%d')}.log"


class StructuredLogger:
    """
    Process logger for the record service and CLI.

    Console output follows the configured level; the file always receives
    DEBUG and above so failed saves can be investigated afterwards.
    """

    def __init__(
        self,
        name: str = "infokeeper",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        numeric_level = getattr(logging, level.upper())
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        self.logger.propagate = False
        self.operations: Dict[str, OperationStats] = {}
        self.log_file: Optional[Path] = None

        if enable_console:
            self.logger.addHandler(_handler(logging.StreamHandler(sys.stdout), numeric_level, CONSOLE_FORMAT))

        if enable_file:
            log_dir = Path("logs") if log_dir is None else Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = log_file_for(log_dir)
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            self.logger.addHandler(_handler(file_handler, logging.DEBUG, FILE_FORMAT))

        # The file handler decides what it keeps, so the logger itself only
        # filters when there is no file.
        self.logger.setLevel(logging.DEBUG if enable_file else numeric_level)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def debug(self, message: str, **context):
        self.log(logging.DEBUG, message, **context)

    def info(self, message: str, **context):
        self.log(logging.INFO, message, **context)

    def warning(self, message: str, **context):
        self.log(logging.WARNING, message, **context)

    def error(self, message: str, **context):
        self.log(logging.ERROR, message, **context)

    def critical(self, message: str, **context):
        self.log(logging.CRITICAL, message, **context)

    def log(self, level: int, message: str, **context):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    def close(self):
        """Close and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Service operation tracking

    def record_operation(self, operation: str, error: Optional[BaseException] = None):
        """Count one finished service call; pass the exception when it failed."""
        stats = self.operations.setdefault(operation, OperationStats())
        stats.attempts += 1
        if error is not None:
            stats.failures += 1
            stats.errors_by_type[type(error).__name__] += 1
            stats.last_error = str(error)

    def get_metrics(self) -> dict:
        """Totals over all operations plus per-operation detail."""
        attempts = sum(s.attempts for s in self.operations.values())
        failures = sum(s.failures for s in self.operations.values())
        errors_by_type: Counter = Counter()
        for stats in self.operations.values():
            errors_by_type.update(stats.errors_by_type)
        return {
            "operations_attempted": attempts,
            "operations_successful": attempts - failures,
            "operations_failed": failures,
            "errors_by_type": dict(errors_by_type),
            "operations": {name: s.as_dict() for name, s in self.operations.items()},
        }

    def log_metrics_summary(self, level: int = logging.INFO) -> bool:
        """
        Log one line per operation used so far.

        Returns:
            False when no operation was recorded and nothing was logged
        """
        if not self.operations:
            return False
        metrics = self.get_metrics()
        self.log(
            level,
            f"Record operations: {metrics['operations_successful']}/{metrics['operations_attempted']} succeeded",
        )
        for name, stats in sorted(self.operations.items()):
            line = f"  {name}: {stats.successes}/{stats.attempts} ({stats.success_rate * 100:.1f}%)"
            if stats.failures:
                self.log(level, f"{line} last error: {stats.last_error}", errors=dict(stats.errors_by_type))
            else:
                self.log(level, line)
        return True


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "infokeeper",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the process-wide logger. Arguments only apply on first use.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Close and drop the process-wide logger."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
