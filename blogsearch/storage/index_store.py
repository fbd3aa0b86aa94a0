"""In-memory document index with lazy build and explicit invalidation."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from functools import partial
from pathlib import Path
from typing import Callable

from blogsearch.config import ContentConfig
from blogsearch.domain.document import Document
from blogsearch.errors import IndexBuildError
from blogsearch.pipeline.loader import load_documents

logger = logging.getLogger(__name__)

Loader = Callable[[], tuple[list[Document], dict]]


class IndexStore:
    """Process-lifetime cache of every parsed document.

    The first ``get()`` walks the content tree; later calls return the same
    immutable tuple until ``invalidate()`` is called. Concurrent cold
    callers wait on one build instead of each walking the tree. Content
    changes are not seen until the next invalidation.
    """

    def __init__(
        self,
        root: str | Path,
        content_config: ContentConfig | None = None,
        words_per_minute: int = 60,
        build_timeout: float | None = 30.0,
        loader: Loader | None = None,
        show_progress: bool = False,
    ):
        """Initialize IndexStore.

        Args:
            root: Content root directory
            content_config: Content layout configuration
            words_per_minute: Reading speed for reading time estimates
            build_timeout: Seconds before a cold build is abandoned (None waits forever)
            loader: Replacement for the filesystem loader
            show_progress: Show a progress bar while loading files
        """
        self.root = Path(root)
        self._content_config = content_config or ContentConfig()
        self._build_timeout = build_timeout
        self._loader = loader or partial(
            load_documents,
            self.root,
            self._content_config,
            words_per_minute,
            show_progress=show_progress,
        )
        self._documents: tuple[Document, ...] | None = None
        self._last_build_stats: dict | None = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._documents is not None

    @property
    def last_build_stats(self) -> dict | None:
        """Stats of the most recent successful build."""
        return self._last_build_stats

    def build(self) -> tuple[Document, ...]:
        """Load all documents from source without touching the cache.

        Raises:
            IndexBuildError: If the content root is unusable or the build times out
        """
        start = time.monotonic()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="index-build")
        future = executor.submit(self._loader)
        try:
            documents, stats = future.result(timeout=self._build_timeout)
        except FutureTimeoutError as e:
            future.cancel()
            raise IndexBuildError(
                f"Index build exceeded {self._build_timeout}s for {self.root}"
            ) from e
        finally:
            executor.shutdown(wait=False)

        stats = {**stats, "elapsed_ms": int((time.monotonic() - start) * 1000)}
        self._last_build_stats = stats
        logger.info("Index built: %d documents in %dms", len(documents), stats["elapsed_ms"])
        return tuple(documents)

    def get(self) -> tuple[Document, ...]:
        """Return the cached documents, building them on first access."""
        documents = self._documents
        if documents is not None:
            return documents

        with self._lock:
            if self._documents is None:
                self._documents = self.build()
            return self._documents

    def invalidate(self) -> None:
        """Drop the cache so the next ``get()`` rebuilds from source."""
        with self._lock:
            self._documents = None
        logger.info("Index invalidated")
