"""
Structured logging configuration.

This module provides:
- A human-readable console formatter carrying the request correlation ID
- A JSON formatter for the error log file
- Contextual fields (endpoint, method, status_code, ...) stored per request
"""

import json
import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from catalog.settings import app_settings

# Context variable for storing request-specific logging context
log_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "log_context", default=None
)

# LogRecord attributes that are not copied into the JSON payload
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
        "correlation_id",
    }
)


def get_correlation_id() -> str:
    """
    Get correlation ID from context, safe wrapper for logging.

    Returns:
        Correlation ID or empty string if not available.
    """
    from catalog.middlewares.request_context import (
        get_correlation_id as _get_cid,
    )

    return _get_cid()


def set_log_context(**kwargs: Any) -> None:
    """
    Set contextual fields for structured logging.

    Fields are attached to every JSON log record emitted within the
    current request context.

    Args:
        **kwargs: Key-value pairs to add to log context.

    Example:
        >>> set_log_context(endpoint="/catalog/authors", method="GET")
        >>> logger.info("Listing authors")
    """
    current = dict(log_context.get() or {})
    current.update(kwargs)
    log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """
    Get current log context.

    Returns:
        Dictionary of contextual log fields.
    """
    return log_context.get() or {}


def clear_log_context() -> None:
    """Clear the log context (end of request)."""
    log_context.set(None)


class StructuredJSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs standard fields (timestamp, level, logger, message), the
    correlation ID, contextual fields from log_context, the environment
    and exception text when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON string with structured log data.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_data["request_id"] = correlation_id

        context = get_log_context()
        if context:
            log_data.update(context)

        log_data["environment"] = app_settings.ENVIRONMENT

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    INFO lines are short; warnings, errors and debug lines also carry the
    module, function and line number.
    """

    INFO_FMT = "%(asctime)s - [%(correlation_id)s] %(levelname)s: %(message)s"
    ERROR_FMT = "%(asctime)s - [%(correlation_id)s] %(levelname)s: %(module)s.%(funcName)s:%(lineno)d - %(message)s"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        info = logging.Formatter(self.INFO_FMT, datefmt="%Y-%m-%d %H:%M:%S")
        detailed = logging.Formatter(
            self.ERROR_FMT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        self._formatters = {
            logging.DEBUG: detailed,
            logging.INFO: info,
            logging.WARNING: detailed,
            logging.ERROR: detailed,
            logging.CRITICAL: detailed,
        }

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = get_correlation_id() or "-"

        formatter = self._formatters.get(
            record.levelno, self._formatters[logging.INFO]
        )
        return formatter.format(record)


def setup_logging() -> logging.Logger:
    """
    Configure the root logger.

    Sets up:
    - Console handler with human-readable format
    - File handler for errors (JSON format)

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, app_settings.LOG_LEVEL))

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(HumanReadableFormatter())
    logger.addHandler(console_handler)

    try:
        log_file = Path(app_settings.LOG_FILE_PATH)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(StructuredJSONFormatter())
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not create file handler: {e}")

    # Disable logging during pytest runs
    if sys.argv[0].split("/")[-1] in ["pytest"]:
        logging.disable(logging.ERROR)

    return logger


# Create default logger instance
logger = setup_logging()
