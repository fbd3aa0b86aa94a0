"""Document entity for the search index."""

from dataclasses import dataclass, asdict, field
from enum import Enum


class DocumentKind(str, Enum):
    """Where a document lives in the content tree."""

    COURSE = "course"
    RESOURCE = "resource"
    GENERIC = "generic"


@dataclass(frozen=True, slots=True)
class DocumentMeta:
    """Normalized frontmatter of a markdown file.

    Attributes:
        title: Display title, if the header provides one
        description: Short summary shown on course cards
        lang: Language code (e.g. "en", "fr")
        domain: Subject area used by the domain facet
        author: Single canonical author
        tags: De-duplicated tags in header order
    """

    title: str | None = None
    description: str | None = None
    lang: str | None = None
    domain: str | None = None
    author: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable indexed document.

    Attributes:
        id: Path relative to the content root (e.g. "blog/lpic1/course.md")
        title: Frontmatter title, falling back to the slug
        slug: Short identifier used to build the url
        url: Canonical page path (e.g. "/b/lpic1")
        kind: Course, resource or generic page
        plain_text: Body with all markup removed
        tags: Tags of a course entry file
        author: Author of a course entry file
        reading_time: Estimated minutes, course entry files only
        meta: Parsed frontmatter
        is_entry: True for the course entry file of a blog directory
    """

    id: str
    title: str
    slug: str
    url: str
    kind: DocumentKind
    plain_text: str
    tags: tuple[str, ...] = ()
    author: str | None = None
    reading_time: int | None = None
    meta: DocumentMeta = field(default_factory=DocumentMeta)
    is_entry: bool = False

    def to_dict(self) -> dict:
        """Convert document to dictionary for serialization."""
        data = asdict(self)
        data["kind"] = self.kind.value
        return data
