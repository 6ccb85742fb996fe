"""
Logging for the course library service.

One root logger is configured at import time:
- console output in a readable, level-dependent format
- errors additionally written as JSON lines to LOG_FILE_PATH

Every record carries the correlation id of the request that produced it
plus whatever `set_log_context` added (endpoint, method, status_code).
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

from course_library.settings import app_settings

log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# LogRecord attributes that are never treated as `extra` fields
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "correlation_id"}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_correlation_id() -> str:
    """Correlation id of the current request, empty outside a request."""
    from course_library.middlewares.correlation_id import (
        get_correlation_id as current_correlation_id,
    )

    return current_correlation_id()


def set_log_context(**kwargs: Any) -> None:
    """
    Add fields to every record logged in the current context.

    Example:
        >>> set_log_context(endpoint="/api/authors", method="GET")
        >>> logger.info("Listing authors")  # JSON record has both fields
    """
    log_context.set({**log_context.get(), **kwargs})


def get_log_context() -> dict[str, Any]:
    return log_context.get()


def clear_log_context() -> None:
    log_context.set({})


class StructuredJSONFormatter(logging.Formatter):
    """
    Render a record as one JSON object.

    Keys: timestamp, level, logger, message, module, function, line,
    environment, request_id (inside a request), the log context fields,
    exception (when there is one) and any `extra` passed to the call.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "environment": app_settings.ENVIRONMENT,
        }

        if request_id := get_correlation_id():
            entry["request_id"] = request_id

        entry.update(get_log_context())

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        )
        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Console formatter.

    INFO records stay short. Every other level also shows where the
    record was logged from.
    """

    SHORT_FMT = "%(asctime)s - [%(correlation_id)s] %(levelname)s: %(message)s"
    LONG_FMT = (
        "%(asctime)s - [%(correlation_id)s] %(levelname)s: "
        "%(module)s.%(funcName)s:%(lineno)d - %(message)s"
    )

    def __init__(self) -> None:
        super().__init__()
        self._short = logging.Formatter(self.SHORT_FMT, datefmt=DATE_FORMAT)
        self._long = logging.Formatter(self.LONG_FMT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = get_correlation_id() or "-"
        if record.levelno == logging.INFO:
            return self._short.format(record)
        return self._long.format(record)


def setup_logging() -> logging.Logger:
    """
    Configure the root logger.

    Handlers are replaced rather than added, so calling this twice does not
    duplicate output. A log file that cannot be opened only costs the JSON
    error log, the console handler still works.

    Returns:
        The root logger.
    """
    root = logging.getLogger()
    root.setLevel(app_settings.LOG_LEVEL.upper())
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(HumanReadableFormatter())
    root.addHandler(console_handler)

    try:
        log_dir = os.path.dirname(app_settings.LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(app_settings.LOG_FILE_PATH)
    except OSError as e:
        root.warning(f"Error log file disabled: {e}")
    else:
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(StructuredJSONFormatter())
        root.addHandler(file_handler)

    # Keep test output clean
    if os.path.basename(sys.argv[0]) in ("pytest", "py.test"):
        logging.disable(logging.ERROR)

    return root


logger = setup_logging()
