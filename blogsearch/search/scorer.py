"""Field-weighted relevance scoring."""

from __future__ import annotations

from typing import Iterable

from blogsearch.domain.document import Document, DocumentKind

TITLE_PRESENT = 5
TITLE_OCCURRENCE = 10
BODY_PRESENT = 1
BODY_OCCURRENCE = 2
TAG_EXACT = 120
TAG_PARTIAL = 40
AUTHOR_EXACT = 100
AUTHOR_PARTIAL = 50
COURSE_BONUS = 1


def query_words(query: str) -> list[str]:
    """Lowercase whitespace tokenization, the only one the engine uses."""
    return query.lower().split()


def score(query: str, document: Document) -> int:
    """Relevance of ``document`` for ``query``.

    Occurrences are raw substring counts, so "net" counts inside
    "network" and "internet". Only courses are scored and each gets a flat
    course bonus; every other kind gets 0.

    Args:
        query: Free-text query
        document: Indexed document

    Returns:
        Non-negative integer score, 0 for non-courses and blank queries
    """
    if document.kind is not DocumentKind.COURSE:
        return 0

    words = query_words(query)
    if not words:
        return 0

    title = document.title.lower()
    body = document.plain_text.lower()
    tags = [t.lower() for t in document.tags]
    author = (document.author or "").lower()

    total = 0
    for w in words:
        if w in title:
            total += TITLE_PRESENT
        total += title.count(w) * TITLE_OCCURRENCE

        if w in body:
            total += BODY_PRESENT
        total += body.count(w) * BODY_OCCURRENCE

        if any(t == w for t in tags):
            total += TAG_EXACT
        elif any(w in t for t in tags):
            total += TAG_PARTIAL

        if author:
            if author == w:
                total += AUTHOR_EXACT
            elif w in author:
                total += AUTHOR_PARTIAL

    if document.kind is DocumentKind.COURSE:
        total += COURSE_BONUS

    return total


def rank(query: str, documents: Iterable[Document]) -> list[tuple[Document, int]]:
    """Score documents and sort matches by descending score.

    The sort is stable: equal scores keep index order.
    """
    scored = [(doc, score(query, doc)) for doc in documents]
    matches = [(doc, s) for doc, s in scored if s > 0]
    matches.sort(key=lambda pair: pair[1], reverse=True)
    return matches
