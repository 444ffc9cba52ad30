from __future__ import annotations

from typing import Any, Optional

import httpx

from .api.base import build_http_client
from .api.issues import IssuesApiClient
from .api.projects import ProjectsApiClient
from .api.users import UsersApiClient
from .core.logging import get_logger
from .core.settings import JiraClientConfig

logger = get_logger(__name__)


# PUBLIC_INTERFACE
class JiraClient:
    """Main Jira API client.

    Groups the issues, projects and users clients over one shared connection pool.
    Use as an async context manager, or call aclose() when done.

    Example:
        >>> async with JiraClient.from_env() as jira:
        ...     me = await jira.users.get_current_user()
    """

    def __init__(self, config: JiraClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._http = build_http_client(config, transport)
        self.issues = IssuesApiClient(config, http_client=self._http)
        self.projects = ProjectsApiClient(config, http_client=self._http)
        self.users = UsersApiClient(config, http_client=self._http)
        logger.debug(
            "jira_client_configured",
            extra={"base_url": config.api_base_url, "auth": config.auth.kind, "timeout_ms": config.timeout},
        )

    # PUBLIC_INTERFACE
    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "JiraClient":
        """Create a client from JIRA_* environment variables (see JiraClientConfig.from_env)."""
        return cls(JiraClientConfig.from_env(), transport=transport)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
