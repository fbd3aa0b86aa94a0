"""Ranking, routing, snippets, facets and pagination."""

from blogsearch.search.engine import SearchEngine
from blogsearch.search.filters import FilterCriteria, filter_metas, paginate
from blogsearch.search.router import ExactMatch, route_exact_match
from blogsearch.search.scorer import rank, score
from blogsearch.search.snippet import make_snippet

__all__ = [
    "SearchEngine",
    "FilterCriteria",
    "filter_metas",
    "paginate",
    "ExactMatch",
    "route_exact_match",
    "rank",
    "score",
    "make_snippet",
]
