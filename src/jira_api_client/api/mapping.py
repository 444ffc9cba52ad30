from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from ..core.models import JiraComment, JiraIssue, JiraProject, JiraTransition, JiraUser
from ..core.pagination import PaginatedResponse, PaginationParams, create_paginated_response

M = TypeVar("M", bound=BaseModel)

_RAW_OBJECT_LIST = TypeAdapter(List[Dict[str, Any]])


def parse_model(model: Type[M], raw: Any) -> M:
    return model.model_validate(raw)


def parse_list(model: Type[M], raw: Any) -> List[M]:
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON array of {model.__name__}, got {type(raw).__name__}")
    return [model.model_validate(x) for x in raw]


def parse_raw_list(raw: Any) -> List[Dict[str, Any]]:
    """Check that raw is a JSON array of objects; items are returned unmodelled."""
    return _RAW_OBJECT_LIST.validate_python(raw)


def _envelope(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a JSON object, got {type(raw).__name__}")
    return raw


def _optional_total(raw: Dict[str, Any]) -> Optional[int]:
    total = raw.get("total")
    return int(total) if total is not None else None


# PUBLIC_INTERFACE
def page_from_envelope(model: Type[M], raw: Any, items_key: str, params: PaginationParams) -> PaginatedResponse[M]:
    """Normalize {items_key: [...], total: n, ...} into a PaginatedResponse.

    Upstream startAt/maxResults/isLast are ignored; the request cursor is authoritative.
    """
    body = _envelope(raw)
    items = parse_list(model, body.get(items_key) or [])
    return create_paginated_response(items, _optional_total(body), params)


# PUBLIC_INTERFACE
def page_from_list(model: Type[M], raw: Any, params: PaginationParams) -> PaginatedResponse[M]:
    """Normalize a bare JSON array (no total) into a single, last page."""
    return create_paginated_response(parse_list(model, raw), None, params)


# PUBLIC_INTERFACE
def map_search_issues(raw: Any, params: PaginationParams) -> PaginatedResponse[JiraIssue]:
    """POST /search -> {issues, total, startAt, maxResults}"""
    return page_from_envelope(JiraIssue, raw, "issues", params)


# PUBLIC_INTERFACE
def map_comments(raw: Any, params: PaginationParams) -> PaginatedResponse[JiraComment]:
    """GET /issue/{key}/comment -> {comments, total, startAt, maxResults}"""
    return page_from_envelope(JiraComment, raw, "comments", params)


# PUBLIC_INTERFACE
def map_project_search(raw: Any, params: PaginationParams) -> PaginatedResponse[JiraProject]:
    """GET /project/search -> {values, total, isLast, ...}"""
    return page_from_envelope(JiraProject, raw, "values", params)


# PUBLIC_INTERFACE
def map_project_list(raw: Any, params: PaginationParams) -> PaginatedResponse[JiraProject]:
    """GET /project -> [...] with no total."""
    return page_from_list(JiraProject, raw, params)


# PUBLIC_INTERFACE
def map_user_list(raw: Any, params: PaginationParams) -> PaginatedResponse[JiraUser]:
    """GET /user/search and /user/assignable/search -> [...] with no total."""
    return page_from_list(JiraUser, raw, params)


# PUBLIC_INTERFACE
def map_transitions(raw: Any) -> List[JiraTransition]:
    """GET /issue/{key}/transitions -> {transitions: [...]}"""
    return parse_list(JiraTransition, _envelope(raw).get("transitions") or [])
