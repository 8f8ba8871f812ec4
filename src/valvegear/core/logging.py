"""Structured logging utilities."""

from __future__ import annotations

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class StructuredLogger:
    """Simple structured logger with JSON-lines output.

    Records go to ``output`` if given, otherwise to the current ``sys.stderr``
    so that command output on stdout stays machine-readable.
    """

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "WARN",
    ) -> None:
        self.name = name
        self.output = output
        self._min_level = LEVELS.get(min_level.upper(), 2)

    def _log(self, level: str, message: str, **data: Any) -> None:
        if LEVELS.get(level, 0) < self._min_level:
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output or sys.stderr)

    def debug(self, message: str, **data: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", message, **data)

    def warn(self, message: str, **data: Any) -> None:
        """Log at WARN level."""
        self._log("WARN", message, **data)

    def error(self, message: str, **data: Any) -> None:
        """Log at ERROR level."""
        self._log("ERROR", message, **data)

    @contextmanager
    def timer(self, operation: str, timings: dict[str, float] | None = None):
        """Context manager for timing operations.

        Usage:
            with logger.timer("compute", timings):
                compute(model)

        If ``timings`` is given, the elapsed time is stored under
        ``f"{operation}_ms"``.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if timings is not None:
                timings[f"{operation}_ms"] = elapsed_ms
            self.debug(f"{operation} completed", elapsed_ms=elapsed_ms)


# Global logger cache
_loggers: dict[str, StructuredLogger] = {}
_default_level = "WARN"


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_default_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for all loggers, existing and future.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _default_level
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {sorted(LEVELS)}")
    _default_level = level
    for logger in _loggers.values():
        logger._min_level = LEVELS[level]
