"""Exact author/tag routing that bypasses the general scorer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from blogsearch.domain.document import Document, DocumentKind
from blogsearch.search.scorer import query_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactMatch:
    """Documents selected by an exact author or tag match.

    Attributes:
        reason: "author" or "tag"
        documents: Matching courses in index order
    """

    reason: str
    documents: list[Document]


def known_authors(documents: Sequence[Document]) -> set[str]:
    return {doc.author.lower() for doc in documents if doc.author}


def route_exact_match(query: str, documents: Sequence[Document]) -> ExactMatch | None:
    """Select every course matching the query verbatim.

    An author match on the whole query takes precedence over a tag match on
    any single query word. Returns None when neither applies, meaning the
    caller should fall back to full scoring.
    """
    needle = query.strip().lower()
    if not needle:
        return None

    courses = [doc for doc in documents if doc.kind is DocumentKind.COURSE]

    if needle in known_authors(documents):
        matched = [doc for doc in courses if doc.author and doc.author.lower() == needle]
        logger.debug("Author match for %r: %d documents", needle, len(matched))
        return ExactMatch(reason="author", documents=matched)

    words = set(query_words(needle))
    matched = [
        doc for doc in courses
        if any(tag.lower() in words for tag in doc.tags)
    ]
    if matched:
        logger.debug("Tag match for %r: %d documents", needle, len(matched))
        return ExactMatch(reason="tag", documents=matched)

    return None
