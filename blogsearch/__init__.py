"""Course search and ranking engine."""

__version__ = "0.1.0"

# Domain entities
from blogsearch.domain.document import Document, DocumentKind, DocumentMeta
from blogsearch.domain.results import BlogFacetMeta, FacetCatalog, Page, SearchResultItem

# Configuration
from blogsearch.config import AppConfig, load_config

# Index
from blogsearch.pipeline.loader import load_documents
from blogsearch.storage.index_store import IndexStore

# Query interface
from blogsearch.search.engine import SearchEngine

# Errors
from blogsearch.errors import BlogSearchError, ConfigError, DocumentLoadError, IndexBuildError

__all__ = [
    # Domain
    "Document",
    "DocumentKind",
    "DocumentMeta",
    "BlogFacetMeta",
    "FacetCatalog",
    "Page",
    "SearchResultItem",
    # Configuration
    "AppConfig",
    "load_config",
    # Index
    "load_documents",
    "IndexStore",
    # Query interface
    "SearchEngine",
    # Errors
    "BlogSearchError",
    "ConfigError",
    "DocumentLoadError",
    "IndexBuildError",
]
