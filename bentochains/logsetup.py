"""Logging configuration for the application: level selection and console output."""

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime

from bentochains.apputils import to_lower

LOGGER_NAME = "bentochains"
TRACE = 5

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "none": logging.CRITICAL,
}

_SEVERITY_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

_lock = threading.Lock()
_current_level = logging.CRITICAL
_console_handler: logging.Handler | None = None

_logger = logging.getLogger(LOGGER_NAME)
# Nothing is written until init_logging is called.
_logger.setLevel(logging.CRITICAL + 1)
_logger.propagate = False
_logger.addHandler(logging.NullHandler())


class _ConsoleFormatter(logging.Formatter):
    """Formats '[timestamp] [thread] <severity> message'."""

    def __init__(self, with_thread_id: bool) -> None:
        super().__init__()
        self._with_thread_id = with_thread_id

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")
        severity = _SEVERITY_NAMES.get(record.levelno, record.levelname.lower())
        parts = [f"[{stamp}] "]
        if self._with_thread_id:
            parts.append(f"[0x{record.thread or 0:x}] ")
        parts.append(f"<{severity}> ")
        parts.append(record.getMessage())
        return "".join(parts)


def get_log_levels() -> str:
    """Names of the accepted log levels, sorted and joined by '|'."""
    return "|".join(sorted(_LEVELS))


def init_logging(log_thread_id: bool, log_level: str) -> None:
    """Enable console logging to standard error at the given level.

    Raises ValueError for an unknown level name.
    """
    global _current_level, _console_handler
    level = _LEVELS.get(to_lower(log_level))
    if level is None:
        raise ValueError(
            f"Unknown logging level: {log_level}, options are {get_log_levels()}"
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ConsoleFormatter(log_thread_id))
    with _lock:
        _current_level = level
        if _console_handler is not None:
            _logger.removeHandler(_console_handler)
        _console_handler = handler
        _logger.addHandler(handler)
        _logger.setLevel(level)


def trace_logging_enabled() -> bool:
    """True when the configured level is trace."""
    return _current_level == TRACE