"""Pytest configuration and shared fixtures for blogsearch tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from blogsearch.domain.document import Document, DocumentKind, DocumentMeta  # noqa: E402


def write_file(root: Path, rel: str, content) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


def write_course(root: Path, slug: str, header: str, body: str = "Course body.") -> Path:
    return write_file(root, f"blog/{slug}/course.md", f"---\n{header.strip()}\n---\n\n{body}\n")


@pytest.fixture(autouse=True)
def reset_blogsearch_logging():
    """Drop handlers attached by configure_logging between tests."""
    yield
    logger = logging.getLogger("blogsearch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def content_root(tmp_path):
    """A small content tree covering every document kind.

    - blog/alice-git: Alice (list form), tags as a comma string
    - blog/cloud: French course mentioning networking once
    - blog/lpic1: course + slides sharing /b/lpic1
    - blog/networking: "Networking Basics"
    - blog/broken: undecodable file, skipped by the loader
    - res/cheatsheet.md and index.md: resource and generic pages
    """
    root = tmp_path / "docs"

    write_file(root, "index.md", "# Welcome\n\nWelcome to the networking blog.\n")
    write_file(root, "res/cheatsheet.md", "---\ntitle: Linux Cheatsheet\n---\n\nlinux commands\n")

    write_course(
        root,
        "lpic1",
        """
title: Intro to LPIC
tags: [linux, certification]
authors: Alice
domain: DevOps
lang: en
description: Prepare the LPIC-1 exam
""",
        "# Intro to LPIC\n\n"
        "Learn **Linux** administration for the [LPI](https://lpi.org) exam.\n\n"
        "```bash\nls -la\n```\n\n"
        "![diagram](img/diagram.png)\n",
    )
    write_file(
        root,
        "blog/lpic1/slides.md",
        "---\ntitle: LPIC Slides\n---\n\nLinux commands slides\n",
    )
    write_course(
        root,
        "alice-git",
        """
title: Git Workflows
tags: "git, tooling"
authors: [Alice]
domain: Development
""",
        "Branching and merging with `git merge` and git rebase.",
    )
    write_course(
        root,
        "networking",
        """
title: Networking Basics
tags: [network]
authors: Bob
domain: DevOps
lang: en
""",
        "Networking basics: IP addresses, routing and switching.",
    )
    write_course(
        root,
        "cloud",
        """
title: Cloud Primer
tags: [cloud]
authors: Dave
domain: Development
lang: fr
""",
        "Cloud services rely on networking.",
    )
    write_file(root, "blog/broken/course.md", b"---\ntitle: Broken\n---\n\xff\xfe\xfa not utf-8")

    return root


@pytest.fixture
def security_root(tmp_path):
    """Five courses tagged security plus one that is not."""
    root = tmp_path / "docs"
    for i in range(1, 6):
        write_course(root, f"sec-{i}", f"title: Security {i}\ntags: [security]\nauthors: Eve")
    write_course(root, "other", "title: Other\ntags: [misc]\nauthors: Eve")
    return root


@pytest.fixture
def make_doc():
    """Factory for in-memory documents."""

    def _make(
        id="blog/test/course.md",
        title="Test",
        plain_text="",
        kind=DocumentKind.COURSE,
        tags=(),
        author=None,
        slug=None,
        url=None,
        **kwargs,
    ):
        slug = slug or (id.split("/")[1] if "/" in id else id)
        return Document(
            id=id,
            title=title,
            slug=slug,
            url=url or f"/b/{slug}",
            kind=kind,
            plain_text=plain_text,
            tags=tuple(tags),
            author=author,
            meta=kwargs.pop("meta", DocumentMeta()),
            **kwargs,
        )

    return _make
