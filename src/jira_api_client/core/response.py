from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import httpx

from .errors import ErrorCode, JiraClientError, JiraError

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def _read_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _summary_message(messages: List[str], field_errors: Dict[str, str], default: str) -> str:
    if messages:
        return messages[0]
    if field_errors:
        field, text = next(iter(field_errors.items()))
        return f"{field}: {text}"
    return default


# PUBLIC_INTERFACE
def normalize_upstream_error(response: httpx.Response, default_message: Optional[str] = None) -> JiraError:
    """Normalize a non-2xx Jira response into a JiraError.

    Jira error bodies look like {"errorMessages": [...], "errors": {field: message}}.
    The first message wins; otherwise the first field error; otherwise a generic message.
    """
    status_code = response.status_code
    default = default_message or f"Request failed with status code {status_code}"
    body = _read_body(response)
    if not isinstance(body, dict):
        return JiraError(default, status_code=status_code)

    messages = body.get("errorMessages") or body.get("messages") or []
    if not isinstance(messages, list):
        messages = [str(messages)]
    field_errors = body.get("errors") or {}
    if not isinstance(field_errors, dict):
        field_errors = {}
    messages = [str(m) for m in messages]
    field_errors = {str(k): str(v) for k, v in field_errors.items()}

    return JiraError(
        _summary_message(messages, field_errors, default),
        status_code=status_code,
        field_errors=field_errors,
        messages=messages,
    )


# PUBLIC_INTERFACE
def normalize_error(error: object) -> JiraError:
    """Map any failure into a JiraError. Total: never raises, never returns None."""
    if isinstance(error, JiraError):
        return error
    if isinstance(error, httpx.HTTPStatusError):
        return normalize_upstream_error(error.response)
    if isinstance(error, httpx.TransportError):
        message = str(error) or type(error).__name__
        return JiraError(message, code=ErrorCode.NETWORK_ERROR)
    if isinstance(error, BaseException):
        message = str(error) or type(error).__name__
        return JiraError(message, code=ErrorCode.UNKNOWN_ERROR)
    return JiraError(UNKNOWN_ERROR_MESSAGE, code=ErrorCode.UNKNOWN_ERROR)


# PUBLIC_INTERFACE
@contextmanager
def normalized_errors() -> Iterator[None]:
    """Re-raise anything escaping the block as a JiraError.

    Errors that already belong to this package pass through untouched.
    """
    try:
        yield
    except JiraClientError:
        raise
    except Exception as exc:
        raise normalize_error(exc) from exc
