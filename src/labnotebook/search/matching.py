"""Free-text matching of search queries against record attributes."""

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchOptions:
    """Tuning for how a query matches an attribute.

    Attributes:
        exact: The whole attribute must equal the query.
        case_sensitive: Compare without case folding.
        whole_word: The query must be delimited by word boundaries.
        whole_phrase: Match the query as one phrase. When False the query is
            split on whitespace and any single term matching is enough.
    """

    exact: bool = False
    case_sensitive: bool = False
    whole_word: bool = False
    whole_phrase: bool = True


DEFAULT_MATCH_OPTIONS = MatchOptions()


def normalize_query(query: str | None) -> str | None:
    """Strip the query; blank queries become None (match everything)."""
    if query is None:
        return None
    query = query.strip()
    return query or None


def query_terms(query: str | None, options: MatchOptions = DEFAULT_MATCH_OPTIONS) -> list[str]:
    query = normalize_query(query)
    if query is None:
        return []
    if options.exact or options.whole_phrase:
        return [query]
    return query.split()


def _term_matches(text: str, term: str, options: MatchOptions) -> bool:
    if not options.case_sensitive:
        text, term = text.casefold(), term.casefold()
    if options.exact:
        return text == term
    if options.whole_word:
        return re.search(rf"(?<!\w){re.escape(term)}(?!\w)", text) is not None
    return term in text


def text_matches(
    value: object, query: str | None, options: MatchOptions = DEFAULT_MATCH_OPTIONS
) -> bool:
    """Does `value` match `query`? A blank query matches every value."""
    terms = query_terms(query, options)
    if not terms:
        return True
    if value is None:
        return False
    text = str(value).strip()
    return any(_term_matches(text, term, options) for term in terms)


def attributes_match(
    values: Iterable[object], query: str | None, options: MatchOptions = DEFAULT_MATCH_OPTIONS
) -> bool:
    """True if any of the attribute values matches the query."""
    if normalize_query(query) is None:
        return True
    return any(text_matches(value, query, options) for value in values)
