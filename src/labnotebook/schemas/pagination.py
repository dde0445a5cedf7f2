"""Pagination schemas for offset-paginated search results."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """One page of search results.

    `per_page` is None when the whole result set was requested with the
    no-limit sentinel page.
    """

    items: list[T]
    page: int
    per_page: int | None = Field(
        default=None,
        description="Page size, or None for an unpaginated result.",
    )
    total: int = Field(description="Number of matching results across all pages.")
    has_more: bool = Field(
        default=False,
        description="Whether there are more items after this page.",
    )
