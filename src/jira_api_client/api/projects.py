from __future__ import annotations

from typing import Any, Dict, List

from ..core.models import JiraIssueType, JiraProject
from ..core.pagination import PageParamsInput, PaginatedResponse, create_pagination_params
from ..core.response import normalized_errors
from .base import BaseApiClient
from .mapping import map_project_list, map_project_search, parse_list, parse_model, parse_raw_list


class ProjectsApiClient(BaseApiClient):
    """Projects and their issue types, components, versions and statuses."""

    # PUBLIC_INTERFACE
    async def get_all_projects(self, pagination: PageParamsInput = None) -> PaginatedResponse[JiraProject]:
        """List projects. GET /project returns no total, so the page is always the last one."""
        params = create_pagination_params(pagination)
        data = await self.get("/project", params=params.as_query())
        with normalized_errors():
            return map_project_list(data, params)

    # PUBLIC_INTERFACE
    async def get_project(self, project_id_or_key: str) -> JiraProject:
        data = await self.get(f"/project/{project_id_or_key}")
        with normalized_errors():
            return parse_model(JiraProject, data)

    # PUBLIC_INTERFACE
    async def get_project_issue_types(self, project_id_or_key: str) -> List[JiraIssueType]:
        data = await self.get(f"/project/{project_id_or_key}/issueTypes")
        with normalized_errors():
            return parse_list(JiraIssueType, data)

    # PUBLIC_INTERFACE
    async def get_project_components(self, project_id_or_key: str) -> List[Dict[str, Any]]:
        data = await self.get(f"/project/{project_id_or_key}/components")
        with normalized_errors():
            return parse_raw_list(data)

    # PUBLIC_INTERFACE
    async def get_project_versions(self, project_id_or_key: str) -> List[Dict[str, Any]]:
        data = await self.get(f"/project/{project_id_or_key}/versions")
        with normalized_errors():
            return parse_raw_list(data)

    # PUBLIC_INTERFACE
    async def get_project_statuses(self, project_id_or_key: str) -> List[Dict[str, Any]]:
        """Statuses grouped by issue type, as returned by Jira."""
        data = await self.get(f"/project/{project_id_or_key}/statuses")
        with normalized_errors():
            return parse_raw_list(data)

    # PUBLIC_INTERFACE
    async def search_projects(self, query: str, pagination: PageParamsInput = None) -> PaginatedResponse[JiraProject]:
        """Search projects by name or key."""
        params = create_pagination_params(pagination)
        data = await self.get("/project/search", params={"query": query, **params.as_query()})
        with normalized_errors():
            return map_project_search(data, params)
