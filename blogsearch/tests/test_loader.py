"""Tests for content tree loading."""

import pytest

from blogsearch.config import ContentConfig
from blogsearch.domain.document import DocumentKind
from blogsearch.errors import DocumentLoadError, IndexBuildError
from blogsearch.pipeline.loader import list_markdown_files, load_document, load_documents


@pytest.fixture
def loaded(content_root):
    return load_documents(content_root, ContentConfig())


def _by_id(documents):
    return {doc.id: doc for doc in documents}


class TestListMarkdownFiles:
    """Test directory walking."""

    def test_sorted_recursive_listing(self, content_root):
        files = list_markdown_files(content_root, [".md"])
        rel = [p.relative_to(content_root).as_posix() for p in files]
        assert rel == [
            "index.md",
            "blog/alice-git/course.md",
            "blog/broken/course.md",
            "blog/cloud/course.md",
            "blog/lpic1/course.md",
            "blog/lpic1/slides.md",
            "blog/networking/course.md",
            "res/cheatsheet.md",
        ]

    def test_other_extensions_ignored(self, tmp_path):
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "page.MD").write_text("x")
        files = list_markdown_files(tmp_path, [".md"])
        assert [p.name for p in files] == ["page.MD"]

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(IndexBuildError, match="not a directory"):
            list_markdown_files(tmp_path / "missing", [".md"])

    def test_file_as_root_raises(self, tmp_path):
        path = tmp_path / "file.md"
        path.write_text("x")
        with pytest.raises(IndexBuildError):
            list_markdown_files(path, [".md"])


class TestLoadDocuments:
    """Test document construction from the content tree."""

    def test_stats_report_skipped_file(self, loaded):
        documents, stats = loaded
        assert stats["total"] == 8
        assert stats["indexed"] == 7
        assert stats["skipped"] == 1
        assert stats["errors"][0]["doc_id"] == "blog/broken/course.md"
        assert len(documents) == 7

    def test_unique_ids(self, loaded):
        documents, _ = loaded
        ids = [doc.id for doc in documents]
        assert len(ids) == len(set(ids))

    def test_course_entry_document(self, loaded):
        doc = _by_id(loaded[0])["blog/lpic1/course.md"]
        assert doc.kind is DocumentKind.COURSE
        assert doc.slug == "lpic1"
        assert doc.url == "/b/lpic1"
        assert doc.title == "Intro to LPIC"
        assert doc.tags == ("linux", "certification")
        assert doc.author == "Alice"
        assert doc.reading_time == 1
        assert doc.is_entry
        assert doc.meta.domain == "DevOps"
        assert doc.meta.lang == "en"

    def test_course_plain_text_has_no_markup(self, loaded):
        doc = _by_id(loaded[0])["blog/lpic1/course.md"]
        assert doc.plain_text == "Intro to LPIC Learn Linux administration for the LPI exam."

    def test_secondary_course_file_shares_url(self, loaded):
        doc = _by_id(loaded[0])["blog/lpic1/slides.md"]
        assert doc.kind is DocumentKind.COURSE
        assert doc.url == "/b/lpic1"
        assert doc.title == "LPIC Slides"
        assert doc.tags == ()
        assert doc.author is None
        assert doc.reading_time is None
        assert not doc.is_entry

    def test_author_list_and_tag_string(self, loaded):
        doc = _by_id(loaded[0])["blog/alice-git/course.md"]
        assert doc.author == "Alice"
        assert doc.tags == ("git", "tooling")
        assert doc.meta.lang is None

    def test_resource_document(self, loaded):
        doc = _by_id(loaded[0])["res/cheatsheet.md"]
        assert doc.kind is DocumentKind.RESOURCE
        assert doc.slug == "cheatsheet"
        assert doc.url == "/res/cheatsheet"
        assert doc.title == "Linux Cheatsheet"

    def test_generic_document_title_falls_back_to_slug(self, loaded):
        doc = _by_id(loaded[0])["index.md"]
        assert doc.kind is DocumentKind.GENERIC
        assert doc.url == "/"
        assert doc.title == "index"
        assert doc.plain_text == "Welcome Welcome to the networking blog."

    def test_blank_title_falls_back_to_slug(self, tmp_path):
        path = tmp_path / "blog" / "empty" / "course.md"
        path.parent.mkdir(parents=True)
        path.write_text("---\ntitle: '  '\n---\nbody")
        doc = load_document(path, "blog/empty/course.md", ContentConfig())
        assert doc.title == "empty"

    def test_nested_resource_is_generic(self, tmp_path):
        path = tmp_path / "res" / "deep" / "page.md"
        path.parent.mkdir(parents=True)
        path.write_text("text")
        doc = load_document(path, "res/deep/page.md", ContentConfig())
        assert doc.kind is DocumentKind.GENERIC
        assert doc.url == "/"

    def test_undecodable_file_raises(self, content_root):
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document(
                content_root / "blog/broken/course.md", "blog/broken/course.md", ContentConfig()
            )
        assert exc_info.value.path == "blog/broken/course.md"

    def test_empty_root_is_valid(self, tmp_path):
        documents, stats = load_documents(tmp_path, ContentConfig())
        assert documents == []
        assert stats["total"] == 0

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(IndexBuildError):
            load_documents(tmp_path / "nope", ContentConfig())
