"""A process-wide logger whose output can be redirected through a callback."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, Optional

__all__ = [
    "LogLevel",
    "Logger",
    "LogCallback",
    "get_logger",
    "set_logger_callback",
    "debug",
    "info",
    "warning",
    "error",
]


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


LogCallback = Callable[[LogLevel, str], None]


def _default_log(level: LogLevel, message: str) -> None:
    """Write ``message`` to standard error, prefixed by its level name."""
    print(f"{level.name}: {message}", file=sys.stderr)


class Logger:
    """Dispatches log messages to a configurable callback."""

    def __init__(self) -> None:
        self._callback: LogCallback = _default_log

    def set_callback(self, callback: LogCallback) -> None:
        """Replace the function that receives every log message."""
        self._callback = callback

    def log(self, level: LogLevel, message: str) -> None:
        """Send ``message`` with ``level`` to the current callback."""
        self._callback(LogLevel(level), message)


_instance: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance


def set_logger_callback(callback: LogCallback) -> None:
    """Capture the package's log messages with ``callback``."""
    get_logger().set_callback(callback)


def debug(message: str) -> None:
    """Log a debug message through the shared logger."""
    get_logger().log(LogLevel.DEBUG, message)


def info(message: str) -> None:
    """Log an informational message through the shared logger."""
    get_logger().log(LogLevel.INFO, message)


def warning(message: str) -> None:
    """Log a warning through the shared logger."""
    get_logger().log(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Log an error through the shared logger."""
    get_logger().log(LogLevel.ERROR, message)