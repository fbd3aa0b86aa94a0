"""Structured facet filtering and cursor pagination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

from blogsearch.domain.results import BlogFacetMeta, Page

T = TypeVar("T")

DEFAULT_LANG = "en"


@dataclass(frozen=True)
class FilterCriteria:
    """Requested facet values.

    Empty groups do not filter. ``lang=None`` keeps every language.
    """

    domains: tuple[str, ...] = ()
    authors: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    lang: str | None = None

    @classmethod
    def build(
        cls,
        domains: Iterable[str] | None = None,
        authors: Iterable[str] | None = None,
        tags: Iterable[str] | None = None,
        lang: str | None = None,
    ) -> "FilterCriteria":
        return cls(
            domains=tuple(domains or ()),
            authors=tuple(authors or ()),
            tags=tuple(tags or ()),
            lang=lang,
        )


def language_of(meta: BlogFacetMeta) -> str:
    """Documents without an explicit language count as English."""
    return (meta.lang or DEFAULT_LANG).lower()


def matches(meta: BlogFacetMeta, criteria: FilterCriteria) -> bool:
    """AND across facet groups, OR within the requested tags."""
    if criteria.lang and language_of(meta) != criteria.lang.lower():
        return False

    if criteria.domains:
        if not meta.domain or meta.domain not in criteria.domains:
            return False

    if criteria.authors:
        if not meta.author or meta.author not in criteria.authors:
            return False

    if criteria.tags:
        if not any(tag in criteria.tags for tag in meta.tags):
            return False

    return True


def filter_metas(metas: Sequence[BlogFacetMeta], criteria: FilterCriteria) -> list[BlogFacetMeta]:
    return [meta for meta in metas if matches(meta, criteria)]


def clamp_limit(limit: int | None, max_limit: int, default: int) -> int:
    if limit is None:
        return default
    return max(1, min(int(limit), max_limit))


def normalize_cursor(cursor: int | None) -> int:
    if cursor is None or cursor < 0:
        return 0
    return int(cursor)


def paginate(items: Sequence[T], cursor: int, limit: int) -> Page[T]:
    """Slice ``[cursor, cursor + limit)`` out of ``items``.

    The cursor is a plain offset; it is only meaningful while the
    underlying set stays the same between calls. A cursor past the end of a
    non-empty set restarts at the first page.
    """
    cursor = normalize_cursor(cursor)
    if items and cursor >= len(items):
        cursor = 0
    limit = max(1, limit)
    window = list(items[cursor:cursor + limit])
    next_cursor = cursor + limit if cursor + limit < len(items) else None
    return Page(items=window, next_cursor=next_cursor, total=len(items))
