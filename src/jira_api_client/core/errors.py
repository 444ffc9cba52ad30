# PUBLIC_INTERFACE
"""
Error types raised by the Jira client.

Error kinds, all sharing JiraClientError as a base:
- ConfigurationError: the client is misconfigured (raised before any call).
- InvalidPaginationError: a pagination cursor is out of range (raised before any call).
- JiraError: the remote API call failed (normalized; see core.response).
- EntityNotFoundError: a named entity was not among the fetched candidates.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional


class ErrorCode:
    AUTH_FAILED = "AUTH_FAILED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class JiraClientError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(JiraClientError):
    """Raised when required configuration is missing or invalid."""


class InvalidPaginationError(JiraClientError, ValueError):
    """Raised when a pagination cursor is out of range (negative offset, page size below 1)."""


# PUBLIC_INTERFACE
class JiraError(JiraClientError):
    """Normalized failure of a remote call.

    Attributes:
    - status_code: HTTP status observed, 500 when none was available
    - message: summary message
    - field_errors: read-only map of field name to message
    - messages: tuple of all upstream error messages
    - code: stable machine-readable classification (see ErrorCode)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        field_errors: Optional[Mapping[str, str]] = None,
        messages: Optional[Iterable[str]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.field_errors: Mapping[str, str] = MappingProxyType(dict(field_errors or {}))
        self.messages: tuple[str, ...] = tuple(messages or ())
        self.code = code or code_for_status(status_code)

    def __repr__(self) -> str:
        return f"JiraError(status_code={self.status_code}, code={self.code!r}, message={self.message!r})"


class EntityNotFoundError(JiraClientError, LookupError):
    """Raised when an id-or-name matches none of the candidates."""

    def __init__(self, entity: str, value: str, parent: str):
        super().__init__(f'{entity} "{value}" not found for {parent}')
        self.entity = entity
        self.value = value
        self.parent = parent


def code_for_status(status_code: Optional[int]) -> str:
    """Classify an HTTP status into an ErrorCode value."""
    if status_code in (401, 403):
        return ErrorCode.AUTH_FAILED
    if status_code == 404:
        return ErrorCode.NOT_FOUND
    if status_code in (400, 422):
        return ErrorCode.VALIDATION_ERROR
    if status_code == 429:
        return ErrorCode.RATE_LIMITED
    if status_code is not None and status_code >= 400:
        return ErrorCode.UPSTREAM_ERROR
    return ErrorCode.UNKNOWN_ERROR


# PUBLIC_INTERFACE
def is_jira_error(error: object) -> bool:
    """Return True if error is a normalized remote-call error."""
    return isinstance(error, JiraError)
