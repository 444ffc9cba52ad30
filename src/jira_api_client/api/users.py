from __future__ import annotations

from ..core.models import JiraUser
from ..core.pagination import PageParamsInput, PaginatedResponse, create_pagination_params
from ..core.response import normalized_errors
from .base import BaseApiClient
from .mapping import map_user_list, parse_model


class UsersApiClient(BaseApiClient):
    """User lookup and search. The user search endpoints return bare lists without a total."""

    # PUBLIC_INTERFACE
    async def get_current_user(self) -> JiraUser:
        data = await self.get("/myself")
        with normalized_errors():
            return parse_model(JiraUser, data)

    # PUBLIC_INTERFACE
    async def get_user(self, account_id: str) -> JiraUser:
        data = await self.get("/user", params={"accountId": account_id})
        with normalized_errors():
            return parse_model(JiraUser, data)

    # PUBLIC_INTERFACE
    async def search_users(self, query: str, pagination: PageParamsInput = None) -> PaginatedResponse[JiraUser]:
        params = create_pagination_params(pagination)
        data = await self.get("/user/search", params={"query": query, **params.as_query()})
        with normalized_errors():
            return map_user_list(data, params)

    # PUBLIC_INTERFACE
    async def get_assignable_users(
        self,
        project_id_or_key: str,
        pagination: PageParamsInput = None,
    ) -> PaginatedResponse[JiraUser]:
        """Users that can be assigned issues in a project."""
        params = create_pagination_params(pagination)
        data = await self.get(
            "/user/assignable/search",
            params={"project": project_id_or_key, **params.as_query()},
        )
        with normalized_errors():
            return map_user_list(data, params)
