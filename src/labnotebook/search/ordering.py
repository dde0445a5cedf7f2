"""Deterministic ordering of search results."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, TypeVar


class SortKey(str, Enum):
    NEW = "new"
    OLD = "old"
    ATOZ = "atoz"
    ZTOA = "ztoa"
    ARCHIVED_NEW = "archived_new"
    ARCHIVED_OLD = "archived_old"


DEFAULT_SORT = SortKey.NEW
ACTIVE_SORT_KEYS = frozenset({SortKey.NEW, SortKey.OLD, SortKey.ATOZ, SortKey.ZTOA})


class Sortable(Protocol):
    id: Any
    name: str
    created_at: datetime
    archived_on: datetime | None


T = TypeVar("T", bound=Sortable)


def sort_items(items: Iterable[T], sort: SortKey | str = DEFAULT_SORT) -> list[T]:
    """Order items by `sort`, breaking ties on id so the order is total.

    Archived sorts put items without an `archived_on` last, newest first.
    Restoring an item clears its `archived_on`, so restored items sort with
    those never archived.
    """
    sort = SortKey(sort)
    ordered = sorted(items, key=lambda item: item.id)

    if sort in (SortKey.ARCHIVED_NEW, SortKey.ARCHIVED_OLD):
        archived = [item for item in ordered if item.archived_on is not None]
        never_archived = [item for item in ordered if item.archived_on is None]
        archived.sort(key=lambda item: item.archived_on, reverse=sort is SortKey.ARCHIVED_NEW)
        never_archived.sort(key=lambda item: item.created_at, reverse=True)
        return archived + never_archived

    if sort is SortKey.OLD:
        ordered.sort(key=lambda item: item.created_at)
    elif sort is SortKey.ATOZ:
        ordered.sort(key=lambda item: item.name.casefold())
    elif sort is SortKey.ZTOA:
        ordered.sort(key=lambda item: item.name.casefold(), reverse=True)
    else:
        ordered.sort(key=lambda item: item.created_at, reverse=True)
    return ordered
