"""Document loading pipeline components."""

from blogsearch.pipeline.clean import reading_time, strip_markdown
from blogsearch.pipeline.frontmatter import parse_meta, split_frontmatter
from blogsearch.pipeline.loader import list_markdown_files, load_document, load_documents

__all__ = [
    # Cleaning
    "reading_time",
    "strip_markdown",
    # Frontmatter
    "parse_meta",
    "split_frontmatter",
    # Loading
    "list_markdown_files",
    "load_document",
    "load_documents",
]
