"""Bulk frontmatter maintenance for course files.

Edits are textual so the rest of each file keeps its formatting. After a
run the index must be refreshed to see the new values.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from blogsearch.domain.results import BlogFacetMeta
from blogsearch.search.facets import distinct_sorted

logger = logging.getLogger(__name__)

_tags_line_re = re.compile(r"^tags:[ \t]*(?P<value>\[.*?\]|.*)$", re.MULTILINE)


@dataclass(frozen=True)
class FileChange:
    """One rewritten frontmatter line."""

    path: str
    before: str
    after: str


def _iter_files(root: Path, names: Iterable[str]) -> list[Path]:
    wanted = set(names)
    return sorted(p for p in root.rglob("*") if p.is_file() and p.name in wanted)


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping unreadable file %s: %s", path, e)
        return None


def _domain_re(old: str) -> re.Pattern:
    return re.compile(
        rf"^domain:[ \t]*(?P<quote>[\"']?){re.escape(old)}(?P=quote)[ \t]*$",
        re.MULTILINE,
    )


def remap_domains(
    blog_root: str | Path,
    mappings: dict[str, str],
    course_file: str = "course.md",
    dry_run: bool = False,
) -> list[FileChange]:
    """Replace legacy ``domain:`` values in course entry files.

    Args:
        blog_root: Directory holding one sub-directory per course
        mappings: Old domain value to new domain value
        course_file: Name of the course entry file
        dry_run: Report changes without writing

    Returns:
        Changes made (or that would be made)
    """
    changes = []
    patterns = [(old, new, _domain_re(old)) for old, new in mappings.items() if old != new]

    for path in _iter_files(Path(blog_root), [course_file]):
        content = _read(path)
        if content is None:
            continue
        updated = content
        for old, new, pattern in patterns:
            updated, count = pattern.subn(f"domain: {new}", updated)
            if count:
                changes.append(FileChange(path=str(path), before=old, after=new))
                logger.info("Updated %s: %s -> %s", path, old, new)

        if updated != content and not dry_run:
            path.write_text(updated, encoding="utf-8")

    return changes


def _split_tags_value(value: str) -> list[str]:
    """Tag items as written, quotes included.

    A comma-separated string wrapped in one pair of quotes is unwrapped
    first so its items do not carry half a quote each.
    """
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
    elif len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return [t.strip() for t in value.split(",") if t.strip()]


def _unquote(tag: str) -> str:
    return tag.strip("\"'")


def prune_redundant_tags(
    blog_root: str | Path,
    redundant: Sequence[str],
    file_names: Sequence[str] = ("course.md", "slides.md"),
    dry_run: bool = False,
) -> list[FileChange]:
    """Drop redundant tags (case-insensitive) from ``tags:`` lines.

    Both list (``[a, b]``) and comma-separated forms are read. Rewritten
    lines use the list form and keep each remaining item as written,
    quotes included.
    """
    drop = {t.lower() for t in redundant}
    changes = []

    for path in _iter_files(Path(blog_root), file_names):
        content = _read(path)
        if content is None:
            continue
        match = _tags_line_re.search(content)
        if not match:
            continue

        tags = _split_tags_value(match.group("value"))
        kept = [t for t in tags if _unquote(t).lower() not in drop]
        if len(kept) == len(tags):
            continue

        new_line = f"tags: [{', '.join(kept)}]"
        changes.append(FileChange(path=str(path), before=match.group(0), after=new_line))
        logger.info("Updated %s: %s", path, new_line)
        if not dry_run:
            updated = content[: match.start()] + new_line + content[match.end():]
            path.write_text(updated, encoding="utf-8")

    return changes


def domain_report(metas: Sequence[BlogFacetMeta]) -> dict:
    """Group course slugs by whether they declare a domain."""
    with_domain = [(m.slug, m.domain) for m in metas if m.domain]
    without_domain = [m.slug for m in metas if not m.domain]
    return {
        "total": len(metas),
        "with_domain": with_domain,
        "without_domain": without_domain,
        "unique_domains": distinct_sorted(m.domain for m in metas),
    }
