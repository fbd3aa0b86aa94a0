"""Domain entities for the search engine.

Immutable data structures shared by the loader, the index store and the
query interface.
"""

from blogsearch.domain.document import Document, DocumentKind, DocumentMeta
from blogsearch.domain.results import BlogFacetMeta, FacetCatalog, Page, SearchResultItem

__all__ = [
    "Document",
    "DocumentKind",
    "DocumentMeta",
    "BlogFacetMeta",
    "FacetCatalog",
    "Page",
    "SearchResultItem",
]
