from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JiraModel(BaseModel):
    """Base for upstream entities: known fields are typed, everything else is kept as-is."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Dump back to the upstream (camelCase) shape, extras included."""
        return self.model_dump(by_alias=True, exclude_none=True)


class JiraRef(JiraModel):
    """Small nested reference (status, issue type, priority, category)."""

    id: Optional[str] = Field(default=None, description="Entity id")
    name: Optional[str] = Field(default=None, description="Display name")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")


class JiraUser(JiraModel):
    account_id: str = Field(..., alias="accountId", description="Atlassian account id")
    display_name: Optional[str] = Field(default=None, alias="displayName", description="Display name")
    email_address: Optional[str] = Field(default=None, alias="emailAddress", description="Email, when visible")
    active: Optional[bool] = Field(default=None, description="Whether the account is active")
    time_zone: Optional[str] = Field(default=None, alias="timeZone", description="User time zone")
    avatar_urls: Optional[Dict[str, str]] = Field(default=None, alias="avatarUrls", description="Avatar URLs by size")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")


class JiraIssue(JiraModel):
    id: str = Field(..., description="Issue id")
    key: str = Field(..., description="Issue key (e.g., PROJECT-123)")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")
    fields: Dict[str, Any] = Field(default_factory=dict, description="Issue fields as returned by Jira")

    @property
    def summary(self) -> Optional[str]:
        return self.fields.get("summary")

    @property
    def status_name(self) -> Optional[str]:
        return (self.fields.get("status") or {}).get("name")


class JiraProject(JiraModel):
    id: str = Field(..., description="Project id")
    key: str = Field(..., description="Project key")
    name: str = Field(..., description="Project name")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")
    description: Optional[str] = Field(default=None, description="Project description")
    lead: Optional[JiraUser] = Field(default=None, description="Project lead")
    url: Optional[str] = Field(default=None, description="Project URL")
    project_category: Optional[JiraRef] = Field(default=None, alias="projectCategory", description="Project category")
    project_type_key: Optional[str] = Field(default=None, alias="projectTypeKey", description="Project type")
    simplified: Optional[bool] = Field(default=None, description="Team-managed project")
    style: Optional[str] = Field(default=None, description="Project style")
    is_private: Optional[bool] = Field(default=None, alias="isPrivate", description="Whether the project is private")


class JiraIssueType(JiraModel):
    id: str = Field(..., description="Issue type id")
    name: str = Field(..., description="Issue type name")
    description: Optional[str] = Field(default=None, description="Issue type description")
    icon_url: Optional[str] = Field(default=None, alias="iconUrl", description="Icon URL")
    subtask: Optional[bool] = Field(default=None, description="Whether this is a subtask type")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")


class JiraComment(JiraModel):
    id: str = Field(..., description="Comment id")
    self_url: Optional[str] = Field(default=None, alias="self", description="REST URL")
    body: Any = Field(default=None, description="Comment body (plain text or Atlassian Document Format)")
    author: Optional[JiraUser] = Field(default=None, description="Comment author")
    created: Optional[str] = Field(default=None, description="Creation timestamp")
    updated: Optional[str] = Field(default=None, description="Last update timestamp")


class JiraTransition(JiraModel):
    id: str = Field(..., description="Transition id")
    name: str = Field(..., description="Transition name")
    description: Optional[str] = Field(default=None, description="Transition description")
    to: Optional[JiraRef] = Field(default=None, description="Target status")


class CreateIssueData(BaseModel):
    """Payload to create a Jira issue: {"fields": {...}}."""

    model_config = ConfigDict(extra="allow")

    fields: Dict[str, Any] = Field(..., description="Fields of the new issue (project, summary, issuetype, ...)")


class UpdateIssueData(BaseModel):
    """Payload to edit a Jira issue."""

    model_config = ConfigDict(extra="allow")

    fields: Optional[Dict[str, Any]] = Field(default=None, description="Fields to overwrite")
    update: Optional[Dict[str, List[Dict[str, Any]]]] = Field(default=None, description="Field update operations")
    transition: Optional[Dict[str, Any]] = Field(default=None, description="Transition to apply ({id} or {name})")
