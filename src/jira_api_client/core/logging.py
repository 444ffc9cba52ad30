from __future__ import annotations

import json
import logging
import os
from typing import Optional

from .observability import ContextFilter, get_structured_logger

PACKAGE_LOGGER_NAME = "jira_api_client"

_RESERVED_ATTRS = (
    "msg", "args", "exc_info", "exc_text", "stack_info", "stacklevel", "levelno", "levelname",
    "msecs", "relativeCreated", "created", "thread", "threadName", "processName", "process",
    "pathname", "filename", "module", "lineno", "funcName", "name", "taskName", "message",
)


class JsonFormatter(logging.Formatter):
    """Emit logs as single-line JSON with common fields and call context (request_id, operation)."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "operation": getattr(record, "operation", "-"),
        }
        for key, val in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in ("request_id", "operation"):
                continue
            try:
                json.dumps({key: val})
                base[key] = val
            except (TypeError, ValueError):
                base[key] = str(val)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, separators=(",", ":"))


# PUBLIC_INTERFACE
def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    level and fmt default to the LOG_LEVEL and LOG_FORMAT environment variables
    ('INFO' and 'json'). fmt is 'json' or 'plain'. Calling it again replaces the
    previously installed handler. The root logger is left alone.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    fmt = (fmt or os.getenv("LOG_FORMAT", "json")).lower()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_jira_api_client", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._jira_api_client = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        plain = "%(asctime)s | %(levelname)s | %(name)s | [%(request_id)s %(operation)s] %(message)s"
        handler.setFormatter(logging.Formatter(plain))
    # The plain format needs the context attributes on every record reaching the handler.
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


# PUBLIC_INTERFACE
def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a module logger carrying call context on each record."""
    return get_structured_logger(name or PACKAGE_LOGGER_NAME)
