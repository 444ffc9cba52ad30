# PUBLIC_INTERFACE
"""
Typed async client for the Jira Cloud REST API.

Provides:
- JiraClient: issues, projects and users resource clients over one connection pool
- fetch_all_pages / iterate_pages: aggregation over any paginated operation
- JiraError and friends: normalized errors for every failure path
"""
import logging

from .api import IssuesApiClient, ProjectsApiClient, UsersApiClient
from .client import JiraClient
from .core.errors import (
    ConfigurationError,
    EntityNotFoundError,
    ErrorCode,
    InvalidPaginationError,
    JiraClientError,
    JiraError,
    is_jira_error,
)
from .core.logging import configure_logging
from .core.lookup import find_by_id_or_name, resolve_by_id_or_name
from .core.models import (
    CreateIssueData,
    JiraComment,
    JiraIssue,
    JiraIssueType,
    JiraProject,
    JiraTransition,
    JiraUser,
    UpdateIssueData,
)
from .core.pagination import (
    PaginatedResponse,
    PaginationParams,
    create_paginated_response,
    create_pagination_params,
    fetch_all_pages,
    iterate_pages,
)
from .core.response import normalize_error
from .core.settings import BasicAuth, BearerAuth, JiraClientConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.3"

__all__ = [
    "BasicAuth",
    "BearerAuth",
    "ConfigurationError",
    "CreateIssueData",
    "EntityNotFoundError",
    "ErrorCode",
    "InvalidPaginationError",
    "IssuesApiClient",
    "JiraClient",
    "JiraClientConfig",
    "JiraClientError",
    "JiraComment",
    "JiraError",
    "JiraIssue",
    "JiraIssueType",
    "JiraProject",
    "JiraTransition",
    "JiraUser",
    "PaginatedResponse",
    "PaginationParams",
    "ProjectsApiClient",
    "UpdateIssueData",
    "UsersApiClient",
    "configure_logging",
    "create_paginated_response",
    "create_pagination_params",
    "fetch_all_pages",
    "find_by_id_or_name",
    "is_jira_error",
    "iterate_pages",
    "normalize_error",
    "resolve_by_id_or_name",
]
