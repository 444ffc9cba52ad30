from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar

from .errors import EntityNotFoundError

T = TypeVar("T")


def _attr(candidate: Any, name: str) -> Any:
    if isinstance(candidate, dict):
        return candidate.get(name)
    return getattr(candidate, name, None)


# PUBLIC_INTERFACE
def find_by_id_or_name(candidates: Iterable[T], id_or_name: str) -> Optional[T]:
    """Return the first candidate whose id matches, else the first whose name matches.

    Matching is exact and case-sensitive. An id match anywhere in the list wins over
    an earlier name match.
    """
    items = list(candidates)
    for candidate in items:
        if _attr(candidate, "id") == id_or_name:
            return candidate
    for candidate in items:
        if _attr(candidate, "name") == id_or_name:
            return candidate
    return None


# PUBLIC_INTERFACE
def resolve_by_id_or_name(candidates: Iterable[T], id_or_name: str, entity: str, parent: str) -> T:
    """Like find_by_id_or_name but raises EntityNotFoundError when nothing matches."""
    found = find_by_id_or_name(candidates, id_or_name)
    if found is None:
        raise EntityNotFoundError(entity, id_or_name, parent)
    return found
