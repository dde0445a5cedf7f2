"""Offset pagination with a "no limit" sentinel page."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.labnotebook.core.exceptions import InvalidArgumentError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of ordered results.

    `limit` is None when the caller asked for the unpaginated sentinel page.
    """

    items: list[T]
    page: int
    limit: int | None
    total: int

    @property
    def is_unlimited(self) -> bool:
        return self.limit is None

    @property
    def has_more(self) -> bool:
        return self.limit is not None and self.page * self.limit < self.total


def validate_page(page: object, no_limit: int) -> int:
    """Accept an int >= 1 or the sentinel; reject everything else."""
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidArgumentError(f"Page must be an integer, got {page!r}")
    if page == no_limit:
        return page
    if page < 1:
        raise InvalidArgumentError(f"Page must be >= 1 or {no_limit}, got {page}")
    return page


def paginate(items: Sequence[T], page: int, limit: int, no_limit: int) -> Page[T]:
    """Slice `items` at offset (page - 1) * limit, or return all for the sentinel."""
    validate_page(page, no_limit)
    if limit < 1:
        raise InvalidArgumentError(f"Page size must be positive, got {limit}")

    total = len(items)
    if page == no_limit:
        return Page(items=list(items), page=page, limit=None, total=total)

    offset = (page - 1) * limit
    return Page(items=list(items[offset : offset + limit]), page=page, limit=limit, total=total)
