"""Unit tests for the search building blocks: filters, matching, ordering, pagination."""

from datetime import timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.labnotebook.core.exceptions import InvalidArgumentError
from src.labnotebook.search import (
    MatchOptions,
    SortKey,
    apply_filters,
    attributes_match,
    compose,
    distinct,
    normalize_query,
    paginate,
    sort_items,
    text_matches,
    validate_page,
    when,
    where,
)
from tests.factories import ProjectFactory, utc_now

pytestmark = pytest.mark.unit

NO_LIMIT = -1


class TestFilters:
    def test_where_keeps_matching_candidates(self):
        assert apply_filters(range(6), [where(lambda n: n % 2 == 0)]) == [0, 2, 4]

    def test_distinct_keeps_first_occurrence(self):
        items = [("a", 1), ("b", 2), ("a", 3)]
        assert apply_filters(items, [distinct(lambda item: item[0])]) == [("a", 1), ("b", 2)]

    def test_when_false_is_a_no_op(self):
        assert apply_filters([1, 2, 3], [when(False, where(lambda n: n > 2))]) == [1, 2, 3]
        assert apply_filters([1, 2, 3], [when(True, where(lambda n: n > 2))]) == [3]

    def test_filters_apply_left_to_right(self):
        pipeline = compose(
            distinct(lambda n: n % 3),
            where(lambda n: n > 2),
        )
        # distinct first keeps 0, 1, 2; none of them survive the second filter
        assert list(pipeline([0, 1, 2, 3, 4, 5])) == []

    def test_empty_pipeline_returns_all_candidates(self):
        assert apply_filters([3, 1, 2], []) == [3, 1, 2]


class TestTextMatching:
    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query_matches_everything(self, query):
        assert normalize_query(query) is None
        assert text_matches("anything", query)
        assert text_matches(None, query)
        assert attributes_match([], query)

    def test_default_is_case_insensitive_substring(self):
        assert text_matches("Plasmid pUC19", "puc")
        assert not text_matches("Plasmid pUC19", "pBR")

    def test_query_is_trimmed(self):
        assert text_matches("Buffer A", "  buffer ")

    def test_case_sensitive(self):
        options = MatchOptions(case_sensitive=True)
        assert text_matches("Buffer", "Buf", options)
        assert not text_matches("Buffer", "buf", options)

    def test_exact(self):
        options = MatchOptions(exact=True)
        assert text_matches("Buffer A", "buffer a", options)
        assert not text_matches("Buffer AB", "buffer a", options)

    def test_whole_word(self):
        options = MatchOptions(whole_word=True)
        assert text_matches("tris buffer", "tris", options)
        assert not text_matches("tris-buffered saline", "buffer", options)

    def test_whole_phrase_off_matches_any_term(self):
        options = MatchOptions(whole_phrase=False)
        assert text_matches("ethanol 70%", "water ethanol", options)
        assert not text_matches("ethanol 70%", "ethanol water")

    def test_missing_value_does_not_match_real_query(self):
        assert not text_matches(None, "x")

    def test_numbers_match_by_their_text(self):
        assert attributes_match(["Sample", 1042], "104")
        assert not attributes_match(["Sample", 1042], "999")


class TestOrdering:
    @pytest.fixture
    def projects(self):
        now = utc_now()
        return [
            ProjectFactory.build(name="beta", created_at=now - timedelta(days=1)),
            ProjectFactory.build(name="Alpha", created_at=now - timedelta(days=3)),
            ProjectFactory.build(name="gamma", created_at=now - timedelta(days=2)),
        ]

    def test_new_is_newest_first(self, projects):
        assert [p.name for p in sort_items(projects, SortKey.NEW)] == ["beta", "gamma", "Alpha"]

    def test_old_is_oldest_first(self, projects):
        assert [p.name for p in sort_items(projects, SortKey.OLD)] == ["Alpha", "gamma", "beta"]

    def test_name_sorts_ignore_case(self, projects):
        assert [p.name for p in sort_items(projects, "atoz")] == ["Alpha", "beta", "gamma"]
        assert [p.name for p in sort_items(projects, "ztoa")] == ["gamma", "beta", "Alpha"]

    def test_archived_sorts_put_never_archived_last(self, projects):
        now = utc_now()
        projects[0].archived_on = now - timedelta(hours=2)
        projects[2].archived_on = now - timedelta(hours=1)

        newest = sort_items(projects, SortKey.ARCHIVED_NEW)
        oldest = sort_items(projects, SortKey.ARCHIVED_OLD)

        assert [p.name for p in newest] == ["gamma", "beta", "Alpha"]
        assert [p.name for p in oldest] == ["beta", "gamma", "Alpha"]

    def test_ties_are_broken_by_id(self):
        created_at = utc_now()
        projects = [ProjectFactory.build(name="same", created_at=created_at) for _ in range(5)]

        ordered = sort_items(projects, SortKey.NEW)

        assert ordered == sorted(projects, key=lambda p: p.id)
        assert sort_items(list(reversed(projects)), SortKey.NEW) == ordered

    def test_unknown_sort_key_is_rejected(self, projects):
        with pytest.raises(ValueError):
            sort_items(projects, "random")


class TestPagination:
    def test_first_page(self):
        page = paginate(list(range(5)), 1, 2, NO_LIMIT)
        assert page.items == [0, 1]
        assert page.total == 5
        assert page.has_more

    def test_last_partial_page(self):
        page = paginate(list(range(5)), 3, 2, NO_LIMIT)
        assert page.items == [4]
        assert not page.has_more

    def test_page_past_the_end_is_empty(self):
        page = paginate(list(range(5)), 10, 2, NO_LIMIT)
        assert page.items == []
        assert page.total == 5

    def test_sentinel_returns_everything(self):
        page = paginate(list(range(50)), NO_LIMIT, 2, NO_LIMIT)
        assert page.items == list(range(50))
        assert page.is_unlimited
        assert page.limit is None
        assert not page.has_more

    @pytest.mark.parametrize("page", [0, -2, True, "1", 1.0, None])
    def test_invalid_pages_are_rejected(self, page):
        with pytest.raises(InvalidArgumentError):
            validate_page(page, NO_LIMIT)

    @given(
        items=st.lists(st.integers(), unique=True, max_size=60),
        limit=st.integers(min_value=1, max_value=10),
    )
    def test_pages_partition_the_unlimited_result(self, items, limit):
        everything = paginate(items, NO_LIMIT, limit, NO_LIMIT).items

        collected = []
        page_number = 1
        while True:
            page = paginate(items, page_number, limit, NO_LIMIT)
            collected.extend(page.items)
            if not page.has_more:
                break
            page_number += 1

        assert collected == everything
