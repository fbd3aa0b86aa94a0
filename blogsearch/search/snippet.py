"""Snippet extraction around the first query hit."""

ELLIPSIS = "…"


def make_snippet(content: str, query: str, size: int = 180) -> str:
    """Excerpt of ``content`` centred on the first occurrence of ``query``.

    The whole query is matched case-insensitively; without a hit the window
    starts at the beginning. An ellipsis marks each truncated side, so the
    result is at most ``size + 2`` characters.
    """
    if not content:
        return ""

    found = content.lower().find(query.lower())
    idx = found if found >= 0 else 0
    start = max(0, idx - size // 2)
    end = min(len(content), start + size)

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(content) else ""
    return f"{prefix}{content[start:end].strip()}{suffix}"
