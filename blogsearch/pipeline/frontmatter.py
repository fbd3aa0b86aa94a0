"""Frontmatter splitting and metadata normalization."""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

from blogsearch.domain.document import DocumentMeta

logger = logging.getLogger(__name__)

_frontmatter_re = re.compile(
    r"\A---[ \t]*\r?\n(?P<header>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a markdown file into its header mapping and body.

    A missing, unparseable or non-mapping header yields an empty dict; the
    body is everything after the closing ``---`` when a header block is
    present, otherwise the whole text.
    """
    match = _frontmatter_re.match(text)
    if not match:
        return {}, text

    body = text[match.end():]
    try:
        data = yaml.safe_load(match.group("header"))
    except yaml.YAMLError as e:
        logger.debug("Ignoring unparseable frontmatter: %s", e)
        return {}, body

    if not isinstance(data, dict):
        return {}, body
    return data, body


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def normalize_tags(raw: Any) -> tuple[str, ...]:
    """Tags may be a YAML list or a comma-separated string."""
    if isinstance(raw, (list, tuple)):
        candidates = [str(t).strip() for t in raw if t is not None]
    elif isinstance(raw, str):
        candidates = [t.strip() for t in raw.split(",")]
    else:
        return ()
    return tuple(dict.fromkeys(t for t in candidates if t))


def normalize_author(data: dict[str, Any]) -> str | None:
    """Pick one author from ``authors`` (string or list) or ``author``."""
    raw = data.get("authors", data.get("author"))
    if isinstance(raw, list):
        raw = raw[0] if raw else None
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


def parse_meta(data: dict[str, Any]) -> DocumentMeta:
    return DocumentMeta(
        title=_optional_str(data.get("title")),
        description=_optional_str(data.get("description")),
        lang=_optional_str(data.get("lang")),
        domain=_optional_str(data.get("domain")),
        author=normalize_author(data),
        tags=normalize_tags(data.get("tags")),
    )
