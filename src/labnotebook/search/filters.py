"""Composable candidate filters.

A filter takes an iterable of candidates and yields the survivors. Filters are
applied left to right, so the order of a pipeline is part of its meaning.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from functools import reduce
from typing import TypeAlias, TypeVar

T = TypeVar("T")

Filter: TypeAlias = Callable[[Iterable[T]], Iterable[T]]


def where(predicate: Callable[[T], bool]) -> Filter[T]:
    """Keep candidates for which `predicate` holds."""

    def _where(candidates: Iterable[T]) -> Iterator[T]:
        return (candidate for candidate in candidates if predicate(candidate))

    return _where


def distinct(key: Callable[[T], Hashable]) -> Filter[T]:
    """Drop candidates whose key was already seen, keeping the first occurrence."""

    def _distinct(candidates: Iterable[T]) -> Iterator[T]:
        seen: set[Hashable] = set()
        for candidate in candidates:
            value = key(candidate)
            if value in seen:
                continue
            seen.add(value)
            yield candidate

    return _distinct


def identity(candidates: Iterable[T]) -> Iterable[T]:
    return candidates


def when(condition: bool, filter_: Filter[T]) -> Filter[T]:
    """Apply `filter_` only if `condition` is true."""
    return filter_ if condition else identity


def compose(*filters: Filter[T]) -> Filter[T]:
    """Chain filters left to right into a single filter."""

    def _pipeline(candidates: Iterable[T]) -> Iterable[T]:
        return reduce(lambda acc, filter_: filter_(acc), filters, candidates)

    return _pipeline


def apply_filters(candidates: Iterable[T], filters: Sequence[Filter[T]]) -> list[T]:
    """Run candidates through the pipeline and materialize the result."""
    return list(compose(*filters)(candidates))
