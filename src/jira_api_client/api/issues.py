from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from ..core.lookup import resolve_by_id_or_name
from ..core.models import CreateIssueData, JiraComment, JiraIssue, JiraTransition, UpdateIssueData
from ..core.pagination import PageParamsInput, PaginatedResponse, create_pagination_params
from ..core.response import normalized_errors
from .base import BaseApiClient
from .mapping import map_comments, map_search_issues, map_transitions, parse_model

DEFAULT_SEARCH_FIELDS = ["summary", "status", "assignee", "priority", "issuetype", "created", "updated"]

Payload = Union[BaseModel, Mapping[str, Any]]


def _payload(data: Payload) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True)
    return dict(data)


class IssuesApiClient(BaseApiClient):
    """Issues, comments, transitions and assignment."""

    # PUBLIC_INTERFACE
    async def get_issue(self, issue_id_or_key: str, fields: Optional[Sequence[str]] = None) -> JiraIssue:
        """Get an issue by id or key, optionally restricted to the given fields."""
        params = {"fields": ",".join(fields)} if fields else None
        data = await self.get(f"/issue/{issue_id_or_key}", params=params)
        with normalized_errors():
            return parse_model(JiraIssue, data)

    # PUBLIC_INTERFACE
    async def create_issue(self, data: Union[CreateIssueData, Mapping[str, Any]]) -> JiraIssue:
        """Create an issue. Jira answers with {id, key, self} only."""
        created = await self.post("/issue", json=_payload(data))
        with normalized_errors():
            return parse_model(JiraIssue, created)

    # PUBLIC_INTERFACE
    async def update_issue(self, issue_id_or_key: str, data: Union[UpdateIssueData, Mapping[str, Any]]) -> None:
        """Edit an issue's fields."""
        await self.put(f"/issue/{issue_id_or_key}", json=_payload(data))

    # PUBLIC_INTERFACE
    async def delete_issue(self, issue_id_or_key: str, delete_subtasks: bool = False) -> None:
        """Delete an issue; delete_subtasks must be True when it has subtasks."""
        await self.delete(f"/issue/{issue_id_or_key}", params={"deleteSubtasks": delete_subtasks})

    # PUBLIC_INTERFACE
    async def search_issues(
        self,
        jql: str,
        fields: Optional[Sequence[str]] = None,
        pagination: PageParamsInput = None,
    ) -> PaginatedResponse[JiraIssue]:
        """Search issues with JQL."""
        params = create_pagination_params(pagination)
        body = {
            "jql": jql,
            "startAt": params.start_at,
            "maxResults": params.max_results,
            "fields": list(fields) if fields else list(DEFAULT_SEARCH_FIELDS),
        }
        data = await self.post("/search", json=body)
        with normalized_errors():
            return map_search_issues(data, params)

    # PUBLIC_INTERFACE
    async def get_transitions(self, issue_id_or_key: str) -> List[JiraTransition]:
        """List the transitions currently available for an issue."""
        data = await self.get(f"/issue/{issue_id_or_key}/transitions")
        with normalized_errors():
            return map_transitions(data)

    # PUBLIC_INTERFACE
    async def transition_issue(self, issue_id_or_key: str, transition_id_or_name: str) -> JiraTransition:
        """Move an issue through a workflow transition given by id or by name.

        The available transitions are fetched on every call. Raises EntityNotFoundError
        (and sends nothing) when none matches.
        """
        transitions = await self.get_transitions(issue_id_or_key)
        transition = resolve_by_id_or_name(
            transitions,
            transition_id_or_name,
            entity="Transition",
            parent=f"issue {issue_id_or_key}",
        )
        await self.post(f"/issue/{issue_id_or_key}/transitions", json={"transition": {"id": transition.id}})
        return transition

    # PUBLIC_INTERFACE
    async def get_comments(self, issue_id_or_key: str, pagination: PageParamsInput = None) -> PaginatedResponse[JiraComment]:
        """Get one page of an issue's comments."""
        params = create_pagination_params(pagination)
        data = await self.get(f"/issue/{issue_id_or_key}/comment", params=params.as_query())
        with normalized_errors():
            return map_comments(data, params)

    # PUBLIC_INTERFACE
    async def add_comment(self, issue_id_or_key: str, body: Any) -> JiraComment:
        """Add a comment. body is plain text or an Atlassian Document Format dict."""
        data = await self.post(f"/issue/{issue_id_or_key}/comment", json={"body": body})
        with normalized_errors():
            return parse_model(JiraComment, data)

    # PUBLIC_INTERFACE
    async def update_comment(self, issue_id_or_key: str, comment_id: str, body: Any) -> JiraComment:
        data = await self.put(f"/issue/{issue_id_or_key}/comment/{comment_id}", json={"body": body})
        with normalized_errors():
            return parse_model(JiraComment, data)

    # PUBLIC_INTERFACE
    async def delete_comment(self, issue_id_or_key: str, comment_id: str) -> None:
        await self.delete(f"/issue/{issue_id_or_key}/comment/{comment_id}")

    # PUBLIC_INTERFACE
    async def assign_issue(self, issue_id_or_key: str, account_id: Optional[str]) -> None:
        """Assign an issue to an account; None unassigns."""
        await self.put(f"/issue/{issue_id_or_key}/assignee", json={"accountId": account_id or None})
