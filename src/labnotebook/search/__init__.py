"""Search pipeline: filters, text matching, ordering and pagination."""

from src.labnotebook.search.filters import (
    Filter,
    apply_filters,
    compose,
    distinct,
    when,
    where,
)
from src.labnotebook.search.matching import (
    DEFAULT_MATCH_OPTIONS,
    MatchOptions,
    attributes_match,
    normalize_query,
    text_matches,
)
from src.labnotebook.search.ordering import ACTIVE_SORT_KEYS, DEFAULT_SORT, SortKey, sort_items
from src.labnotebook.search.pagination import Page, paginate, validate_page

__all__ = [
    "ACTIVE_SORT_KEYS",
    "DEFAULT_MATCH_OPTIONS",
    "DEFAULT_SORT",
    "Filter",
    "MatchOptions",
    "Page",
    "SortKey",
    "apply_filters",
    "attributes_match",
    "compose",
    "distinct",
    "normalize_query",
    "paginate",
    "sort_items",
    "text_matches",
    "validate_page",
    "when",
    "where",
]
