"""Storage adapters for the search engine."""

from blogsearch.storage.index_store import IndexStore

__all__ = ["IndexStore"]
