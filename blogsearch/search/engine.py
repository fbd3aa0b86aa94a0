"""Query interface over the index store."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from blogsearch.config import AppConfig, BrowseConfig, SearchConfig, resolve_path
from blogsearch.domain.document import Document, DocumentKind
from blogsearch.domain.results import BlogFacetMeta, FacetCatalog, Page, SearchResultItem
from blogsearch.search import facets as facet_catalog
from blogsearch.search.filters import (
    DEFAULT_LANG,
    FilterCriteria,
    clamp_limit,
    filter_metas,
    language_of,
    matches,
    normalize_cursor,
    paginate,
)
from blogsearch.search.router import route_exact_match
from blogsearch.search.scorer import rank
from blogsearch.search.snippet import make_snippet
from blogsearch.storage.index_store import IndexStore

logger = logging.getLogger(__name__)


class SearchEngine:
    """Free-text search and faceted browsing over one index store.

    Both paths read the same cached documents and never mutate them.

    Attributes:
        store: Index store owned by this engine
        search_config: Limits and scoring constants for free-text search
        browse_config: Limits for faceted browsing
    """

    def __init__(
        self,
        store: IndexStore,
        search_config: SearchConfig | None = None,
        browse_config: BrowseConfig | None = None,
    ):
        self.store = store
        self.search_config = search_config or SearchConfig()
        self.browse_config = browse_config or BrowseConfig()

    @classmethod
    def from_config(cls, config: AppConfig, show_progress: bool = False) -> "SearchEngine":
        store = IndexStore(
            root=resolve_path(config.content.root),
            content_config=config.content,
            words_per_minute=config.search.words_per_minute,
            build_timeout=config.index.build_timeout_seconds,
            show_progress=show_progress,
        )
        return cls(store, config.search, config.browse)

    # ========== Free-text search ==========

    def search(
        self,
        query: str,
        limit: int | None = None,
        lang: str | None = None,
    ) -> list[SearchResultItem]:
        """Rank courses for a free-text query.

        An exact author or tag match returns every matching course at the
        maximal score; otherwise courses are scored field by field. Results
        are unique by url.

        Args:
            query: Free-text query; blank queries return no results
            limit: Maximum number of results (clamped to the configured range)
            lang: Keep only courses in this language when given

        Returns:
            Ranked search results
        """
        query = (query or "").strip()
        if not query:
            return []
        limit = clamp_limit(limit, self.search_config.max_limit, self.search_config.default_limit)

        documents = self.store.get()
        exact = route_exact_match(query, documents)
        if exact is not None:
            candidates = [(doc, self.search_config.exact_match_score) for doc in exact.documents]
        else:
            candidates = rank(query, (d for d in documents if d.kind is DocumentKind.COURSE))

        if lang:
            wanted = lang.lower()
            langs = {meta.slug: language_of(meta) for meta in facet_catalog.collect_facet_metas(documents)}
            candidates = [
                (doc, s) for doc, s in candidates
                if langs.get(doc.slug, DEFAULT_LANG) == wanted
            ]

        return self._dedupe(candidates, query, limit)

    def _dedupe(
        self,
        candidates: Iterable[tuple[Document, int]],
        query: str,
        limit: int,
    ) -> list[SearchResultItem]:
        deduped: dict[str, SearchResultItem] = {}
        for doc, score in candidates:
            previous = deduped.get(doc.url)
            if previous is None or score > previous.score:
                deduped[doc.url] = self._to_item(doc, score, query)
            if len(deduped) >= limit:
                break
        return list(deduped.values())

    def _to_item(self, doc: Document, score: int, query: str) -> SearchResultItem:
        return SearchResultItem(
            id=doc.id,
            title=doc.title,
            url=doc.url,
            kind=doc.kind,
            snippet=make_snippet(doc.plain_text, query, self.search_config.snippet_size),
            score=score,
            author=doc.author,
            reading_time=doc.reading_time,
        )

    def cards(
        self,
        query: str,
        limit: int | None = None,
        lang: str | None = None,
        domains: Sequence[str] | None = None,
        authors: Sequence[str] | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[SearchResultItem]:
        """Search, then keep courses whose metadata passes the facet filters.

        The language defaults to English; courses without a language count
        as English.
        """
        results = self.search(query, limit)
        if not results:
            return []

        documents = self.store.get()
        slug_by_id = {doc.id: doc.slug for doc in documents}
        metas = {meta.slug: meta for meta in facet_catalog.collect_facet_metas(documents)}
        criteria = FilterCriteria.build(domains, authors, tags, lang or DEFAULT_LANG)

        cards = []
        for item in results:
            if item.kind is not DocumentKind.COURSE:
                continue
            meta = metas.get(slug_by_id.get(item.id, ""))
            if meta is None:
                logger.debug("No course metadata for %s", item.id)
                continue
            if matches(meta, criteria):
                cards.append(item)
        return cards

    # ========== Facets ==========

    def facet_metas(self) -> list[BlogFacetMeta]:
        return facet_catalog.collect_facet_metas(self.store.get())

    def tags(self) -> list[str]:
        return facet_catalog.tags(self.facet_metas())

    def authors(self) -> list[str]:
        return facet_catalog.authors(self.facet_metas())

    def domains(self) -> list[str]:
        return facet_catalog.domains(self.facet_metas())

    def facets(self) -> FacetCatalog:
        return facet_catalog.build_catalog(self.facet_metas())

    # ========== Faceted browse ==========

    def filtered_browse(
        self,
        domains: Sequence[str] | None = None,
        authors: Sequence[str] | None = None,
        tags: Sequence[str] | None = None,
        lang: str | None = None,
        limit: int | None = None,
        cursor: int | None = 0,
    ) -> Page[BlogFacetMeta]:
        """One page of courses matching every requested facet group."""
        limit = clamp_limit(limit, self.browse_config.max_limit, self.browse_config.default_limit)
        criteria = FilterCriteria.build(domains, authors, tags, lang)
        filtered = filter_metas(self.facet_metas(), criteria)
        return paginate(filtered, normalize_cursor(cursor), limit)

    # ========== Index lifecycle ==========

    def refresh(self) -> dict:
        """Invalidate and rebuild the index, returning build stats."""
        self.store.invalidate()
        self.store.get()
        return dict(self.store.last_build_stats or {})
