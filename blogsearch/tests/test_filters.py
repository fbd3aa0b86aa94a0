"""Tests for facet filtering and pagination."""

import pytest

from blogsearch.domain.results import BlogFacetMeta
from blogsearch.search.filters import (
    FilterCriteria,
    clamp_limit,
    filter_metas,
    language_of,
    matches,
    normalize_cursor,
    paginate,
)


@pytest.fixture
def metas():
    return [
        BlogFacetMeta(slug="git", lang=None, tags=("git", "tooling"), author="Alice", domain="Development"),
        BlogFacetMeta(slug="lpic", lang="en", tags=("linux",), author="Alice", domain="DevOps"),
        BlogFacetMeta(slug="net", lang="EN", tags=("network",), author="Bob", domain="DevOps"),
        BlogFacetMeta(slug="cloud", lang="fr", tags=("cloud",), author="Dave", domain="Development"),
        BlogFacetMeta(slug="bare"),
    ]


def _slugs(items):
    return [m.slug for m in items]


class TestMatches:
    """Test facet group semantics."""

    def test_empty_criteria_keeps_everything(self, metas):
        assert _slugs(filter_metas(metas, FilterCriteria())) == ["git", "lpic", "net", "cloud", "bare"]

    def test_missing_lang_counts_as_english(self, metas):
        assert language_of(metas[0]) == "en"
        assert _slugs(filter_metas(metas, FilterCriteria(lang="en"))) == ["git", "lpic", "net", "bare"]

    def test_lang_compared_case_insensitively(self, metas):
        assert matches(metas[2], FilterCriteria(lang="en"))
        assert _slugs(filter_metas(metas, FilterCriteria(lang="FR"))) == ["cloud"]

    def test_domain_group(self, metas):
        criteria = FilterCriteria.build(domains=["DevOps"])
        assert _slugs(filter_metas(metas, criteria)) == ["lpic", "net"]

    def test_author_group(self, metas):
        criteria = FilterCriteria.build(authors=["Alice", "Dave"])
        assert _slugs(filter_metas(metas, criteria)) == ["git", "lpic", "cloud"]

    def test_tags_are_or_within_group(self, metas):
        criteria = FilterCriteria.build(tags=["linux", "cloud"])
        assert _slugs(filter_metas(metas, criteria)) == ["lpic", "cloud"]

    def test_groups_are_and_across(self, metas):
        criteria = FilterCriteria.build(domains=["DevOps"], authors=["Alice"], tags=["linux", "network"])
        assert _slugs(filter_metas(metas, criteria)) == ["lpic"]

    def test_missing_fields_fail_active_groups(self, metas):
        bare = metas[-1]
        assert not matches(bare, FilterCriteria.build(domains=["DevOps"]))
        assert not matches(bare, FilterCriteria.build(authors=["Alice"]))
        assert not matches(bare, FilterCriteria.build(tags=["git"]))

    def test_build_accepts_none(self):
        assert FilterCriteria.build(None, None, None) == FilterCriteria()


class TestPagination:
    """Test cursor pagination."""

    def test_partitions_filtered_set(self):
        items = list(range(7))
        seen = []
        cursor = 0
        while cursor is not None:
            page = paginate(items, cursor, 3)
            assert page.total == 7
            seen.extend(page.items)
            cursor = page.next_cursor
        assert seen == items

    def test_five_items_two_per_page(self):
        items = ["s1", "s2", "s3", "s4", "s5"]
        first = paginate(items, 0, 2)
        second = paginate(items, first.next_cursor, 2)
        third = paginate(items, second.next_cursor, 2)

        assert (first.items, first.next_cursor) == (["s1", "s2"], 2)
        assert (second.items, second.next_cursor) == (["s3", "s4"], 4)
        assert (third.items, third.next_cursor) == (["s5"], None)

    def test_exact_fit_has_no_next(self):
        page = paginate([1, 2, 3, 4], 2, 2)
        assert page.items == [3, 4]
        assert page.next_cursor is None

    def test_cursor_past_end_restarts(self):
        items = ["s1", "s2", "s3", "s4", "s5"]
        page = paginate(items, 99, 2)
        assert page.items == ["s1", "s2"]
        assert page.next_cursor == 2
        assert page.total == 5

    def test_cursor_at_end_restarts(self):
        page = paginate([1, 2], 2, 5)
        assert page.items == [1, 2]
        assert page.next_cursor is None

    def test_empty(self):
        page = paginate([], 0, 10)
        assert page.items == []
        assert page.next_cursor is None
        assert page.total == 0

    def test_normalize_cursor(self):
        assert normalize_cursor(None) == 0
        assert normalize_cursor(-3) == 0
        assert normalize_cursor(4) == 4

    @pytest.mark.parametrize(
        "limit,expected",
        [(None, 10), (0, 1), (-5, 1), (25, 25), (500, 50)],
    )
    def test_clamp_limit(self, limit, expected):
        assert clamp_limit(limit, max_limit=50, default=10) == expected
