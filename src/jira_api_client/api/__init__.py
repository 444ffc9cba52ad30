"""Resource clients for the Jira REST API."""
from .base import BaseApiClient, build_http_client
from .issues import IssuesApiClient
from .projects import ProjectsApiClient
from .users import UsersApiClient

__all__ = [
    "BaseApiClient",
    "IssuesApiClient",
    "ProjectsApiClient",
    "UsersApiClient",
    "build_http_client",
]
