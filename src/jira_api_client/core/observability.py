from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# Context variables carried across one outbound call
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")
operation_ctx: ContextVar[str] = ContextVar("operation", default="-")


def get_current_request_id() -> str:
    return request_id_ctx.get()


def get_current_operation() -> str:
    return operation_ctx.get()


# PUBLIC_INTERFACE
@contextmanager
def request_context(operation: str, request_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request id and operation name for the duration of one call."""
    rid = request_id or str(uuid.uuid4())
    rid_token = request_id_ctx.set(rid)
    op_token = operation_ctx.set(operation)
    try:
        yield rid
    finally:
        operation_ctx.reset(op_token)
        request_id_ctx.reset(rid_token)


# PUBLIC_INTERFACE
def get_structured_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger that adds correlation attributes through logging Filters."""
    logger = logging.getLogger(name or __name__)
    if not any(isinstance(f, ContextFilter) for f in logger.filters):
        logger.addFilter(ContextFilter())
    return logger


class ContextFilter(logging.Filter):
    """Inject call context (request_id, operation) into records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get()
        record.operation = operation_ctx.get()
        return True
