"""Markdown to plain text cleaning."""

import math
import re

_fenced_code_re = re.compile(r"```[\s\S]*?```")
_inline_code_re = re.compile(r"`[^`]*`")
_image_re = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_link_re = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_heading_re = re.compile(r"^\s{0,3}#{1,6}\s+", re.MULTILINE)
_markup_punct_re = re.compile(r"[>*_~`#|-]")
_html_tag_re = re.compile(r"<[^>]+>")
_space_re = re.compile(r"\s+")


def strip_markdown(markdown: str) -> str:
    """Reduce a markdown body to whitespace-collapsed plain text.

    Order matters: fences go before inline code, images before links, so
    that ``![alt](src)`` never leaves ``!alt`` behind.

    Args:
        markdown: Markdown body without frontmatter

    Returns:
        Plain text with single spaces and no leading/trailing whitespace
    """
    text = _fenced_code_re.sub(" ", markdown)
    text = _inline_code_re.sub(" ", text)
    text = _image_re.sub(" ", text)
    text = _link_re.sub(r"\1", text)
    text = _heading_re.sub("", text)
    text = _markup_punct_re.sub(" ", text)
    return _space_re.sub(" ", text).strip()


def count_words(content: str) -> int:
    """Count whitespace-separated words after dropping HTML tags."""
    return len(_html_tag_re.sub(" ", content).split())


def reading_time(content: str, words_per_minute: int = 60) -> int:
    """Estimated reading time in minutes, never below 1."""
    return max(1, math.ceil(count_words(content) / words_per_minute))
