"""Content tree walking and document parsing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tqdm import tqdm

from blogsearch.config import ContentConfig
from blogsearch.domain.document import Document, DocumentKind
from blogsearch.errors import DocumentLoadError, IndexBuildError
from blogsearch.pipeline.clean import reading_time, strip_markdown
from blogsearch.pipeline.frontmatter import parse_meta, split_frontmatter

logger = logging.getLogger(__name__)


def list_markdown_files(root: Path, extensions: list[str]) -> list[Path]:
    """Recursively list markdown files under ``root`` in sorted order.

    Raises:
        IndexBuildError: If ``root`` is not a readable directory
    """
    if not root.is_dir():
        raise IndexBuildError(f"Content root is not a directory: {root}")
    try:
        os.listdir(root)
    except OSError as e:
        raise IndexBuildError(f"Content root is unreadable: {root} ({e})") from e

    suffixes = tuple(ext.lower() for ext in extensions)

    def on_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error)

    files = []
    for current, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            if name.lower().endswith(suffixes):
                files.append(Path(current) / name)
    return files


def _strip_extension(name: str, extensions: list[str]) -> str:
    lowered = name.lower()
    for ext in extensions:
        if lowered.endswith(ext.lower()):
            return name[: -len(ext)]
    return name


def load_document(path: Path, rel: str, config: ContentConfig, words_per_minute: int = 60) -> Document:
    """Parse one markdown file into a Document.

    Args:
        path: Absolute file path
        rel: Path relative to the content root, ``/``-separated
        config: Content layout configuration
        words_per_minute: Reading speed for the reading time estimate

    Raises:
        DocumentLoadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(rel, str(e)) from e

    data, body = split_frontmatter(text)
    meta = parse_meta(data)
    parts = rel.split("/")

    tags: tuple[str, ...] = ()
    author = None
    minutes = None
    is_entry = False

    if parts[0] == config.blog_dir and len(parts) >= 3:
        kind = DocumentKind.COURSE
        slug = parts[1]
        url = f"/b/{slug}"
        if parts[-1] == config.course_file:
            is_entry = True
            tags = meta.tags
            author = meta.author
            minutes = reading_time(body, words_per_minute)
    elif parts[0] == config.resources_dir and len(parts) == 2:
        kind = DocumentKind.RESOURCE
        slug = _strip_extension(parts[1], config.file_extensions)
        url = f"/res/{slug}"
    else:
        kind = DocumentKind.GENERIC
        slug = _strip_extension(rel, config.file_extensions)
        url = "/"

    title = meta.title.strip() if meta.title and meta.title.strip() else slug

    return Document(
        id=rel,
        title=title,
        slug=slug,
        url=url,
        kind=kind,
        plain_text=strip_markdown(body),
        tags=tags,
        author=author,
        reading_time=minutes,
        meta=meta,
        is_entry=is_entry,
    )


def load_documents(
    root: str | Path,
    config: ContentConfig,
    words_per_minute: int = 60,
    show_progress: bool = False,
) -> tuple[list[Document], dict]:
    """Load every markdown document under ``root``.

    A file that fails to load is skipped and reported; duplicate ids keep
    the last document read.

    Returns:
        Tuple of (documents, stats) where stats has ``total``, ``indexed``,
        ``skipped`` and ``errors``
    """
    root = Path(root)
    files = list_markdown_files(root, config.file_extensions)

    stats = {
        "total": len(files),
        "indexed": 0,
        "skipped": 0,
        "errors": [],
    }

    unique: dict[str, Document] = {}
    for path in tqdm(files, desc="Loading", disable=not show_progress):
        rel = path.relative_to(root).as_posix()
        try:
            doc = load_document(path, rel, config, words_per_minute)
        except DocumentLoadError as e:
            logger.warning("Skipping document %s: %s", e.path, e.reason)
            stats["skipped"] += 1
            stats["errors"].append({"doc_id": e.path, "error": e.reason})
            continue
        unique[doc.id] = doc

    documents = list(unique.values())
    stats["indexed"] = len(documents)
    logger.info(
        "Loaded %d/%d documents from %s (%d skipped)",
        stats["indexed"], stats["total"], root, stats["skipped"],
    )
    return documents, stats
