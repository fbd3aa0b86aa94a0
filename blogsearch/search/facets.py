"""Facet catalog derived from course metadata."""

from __future__ import annotations

import unicodedata
from typing import Iterable, Sequence

from blogsearch.domain.document import Document, DocumentKind
from blogsearch.domain.results import BlogFacetMeta, FacetCatalog


def collect_facet_metas(documents: Sequence[Document]) -> list[BlogFacetMeta]:
    """One facet record per course slug, taken from its entry file.

    A course directory without an entry file still yields a slug-only
    record. Order follows the first appearance of each slug.
    """
    by_slug: dict[str, BlogFacetMeta] = {}
    for doc in documents:
        if doc.kind is not DocumentKind.COURSE:
            continue
        if doc.is_entry:
            by_slug[doc.slug] = BlogFacetMeta(
                slug=doc.slug,
                title=doc.meta.title,
                description=doc.meta.description,
                lang=doc.meta.lang,
                tags=doc.tags,
                author=doc.author,
                domain=doc.meta.domain,
            )
        else:
            by_slug.setdefault(doc.slug, BlogFacetMeta(slug=doc.slug))
    return list(by_slug.values())


def locale_sort_key(value: str) -> tuple[str, str, str]:
    """Approximate a locale-aware collation.

    Base letters compare first ignoring case and accents, then accents,
    then case with lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), decomposed.casefold(), value.swapcase()


def distinct_sorted(values: Iterable[str | None]) -> list[str]:
    seen = {v.strip() for v in values if v and v.strip()}
    return sorted(seen, key=locale_sort_key)


def tags(metas: Sequence[BlogFacetMeta]) -> list[str]:
    return distinct_sorted(t for meta in metas for t in meta.tags)


def authors(metas: Sequence[BlogFacetMeta]) -> list[str]:
    return distinct_sorted(meta.author for meta in metas)


def domains(metas: Sequence[BlogFacetMeta]) -> list[str]:
    return distinct_sorted(meta.domain for meta in metas)


def build_catalog(metas: Sequence[BlogFacetMeta]) -> FacetCatalog:
    """All three facets from a single pass over the metadata."""
    tag_values: list[str] = []
    author_values: list[str | None] = []
    domain_values: list[str | None] = []
    for meta in metas:
        tag_values.extend(meta.tags)
        author_values.append(meta.author)
        domain_values.append(meta.domain)

    return FacetCatalog(
        tags=distinct_sorted(tag_values),
        authors=distinct_sorted(author_values),
        domains=distinct_sorted(domain_values),
    )
