# PUBLIC_INTERFACE
"""
Offset pagination helpers.

Jira list endpoints page with startAt/maxResults. Every listing operation in this
package returns a PaginatedResponse whose is_last flag is derived from the cursor
and the total, never copied from upstream.
"""
from __future__ import annotations

from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Generic,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .errors import InvalidPaginationError

T = TypeVar("T")

DEFAULT_START_AT = 0
DEFAULT_MAX_RESULTS = 50


# PUBLIC_INTERFACE
class PaginationParams(BaseModel):
    """Offset cursor for a paginated request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_at: int = Field(default=DEFAULT_START_AT, ge=0, alias="startAt", description="Index of the first result")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, alias="maxResults", description="Page size")

    def as_query(self) -> dict:
        return {"startAt": self.start_at, "maxResults": self.max_results}


# PUBLIC_INTERFACE
class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results in the canonical shape."""

    model_config = ConfigDict(populate_by_name=True)

    values: List[T] = Field(default_factory=list, description="Results on this page")
    max_results: int = Field(..., alias="maxResults", description="Requested page size")
    start_at: int = Field(..., alias="startAt", description="Index of the first result")
    total: int = Field(..., description="Total number of results (approximate when upstream omits it)")

    @computed_field(alias="isLast")  # type: ignore[prop-decorator]
    @property
    def is_last(self) -> bool:
        return self.start_at + len(self.values) >= self.total


PageParamsInput = Union[PaginationParams, Mapping[str, Any], None]
PageFetcher = Callable[[PaginationParams], Awaitable[PaginatedResponse[T]]]


# PUBLIC_INTERFACE
def create_pagination_params(params: PageParamsInput = None) -> PaginationParams:
    """Return a cursor with defaults filled in (startAt=0, maxResults=50).

    Accepts a PaginationParams, a mapping keyed by wire names (startAt/maxResults)
    or field names (start_at/max_results), or None. Unset and None values take the default.
    Out-of-range values raise InvalidPaginationError.
    """
    if params is None:
        return PaginationParams()
    if isinstance(params, PaginationParams):
        return params
    try:
        return PaginationParams.model_validate({k: v for k, v in params.items() if v is not None})
    except ValidationError as exc:
        raise InvalidPaginationError(f"Invalid pagination parameters: {dict(params)}") from exc


# PUBLIC_INTERFACE
def create_paginated_response(
    values: Sequence[T],
    total: Optional[int],
    params: PaginationParams,
) -> PaginatedResponse[T]:
    """Build a page for the given cursor. A missing total is approximated by len(values)."""
    items = list(values)
    return PaginatedResponse(
        values=items,
        max_results=params.max_results,
        start_at=params.start_at,
        total=len(items) if total is None else total,
    )


def next_page_params(params: PaginationParams) -> PaginationParams:
    """Advance the cursor by its own page size (not by the returned item count)."""
    return params.model_copy(update={"start_at": params.start_at + params.max_results})


# PUBLIC_INTERFACE
async def iterate_pages(fetch_page: PageFetcher[T], params: PageParamsInput = None) -> AsyncIterator[PaginatedResponse[T]]:
    """Yield pages sequentially until one reports is_last.

    There is no page cap: a fetch_page that never reports a last page loops forever.
    """
    cursor = create_pagination_params(params)
    while True:
        page = await fetch_page(cursor)
        yield page
        if page.is_last:
            return
        cursor = next_page_params(cursor)


# PUBLIC_INTERFACE
async def fetch_all_pages(fetch_page: PageFetcher[T], params: PageParamsInput = None) -> List[T]:
    """Fetch every page and concatenate the values in page order.

    A failure on any page propagates and the partial result is discarded.
    """
    results: List[T] = []
    async for page in iterate_pages(fetch_page, params):
        results.extend(page.values)
    return results
