"""Value objects returned by the query interface."""

from dataclasses import dataclass, asdict, field
from typing import Generic, TypeVar

from blogsearch.domain.document import DocumentKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SearchResultItem:
    """One ranked hit, at most one per url."""

    id: str
    title: str
    url: str
    kind: DocumentKind
    snippet: str
    score: int
    author: str | None = None
    reading_time: int | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True, slots=True)
class BlogFacetMeta:
    """Catalog/filter view of one course.

    Attributes:
        slug: Blog directory name
        title: Frontmatter title of the course entry file
        description: Frontmatter description
        lang: Language code; a missing value is treated as English by filters
        tags: Course tags
        author: Course author
        domain: Course domain
    """

    slug: str
    title: str | None = None
    description: str | None = None
    lang: str | None = None
    tags: tuple[str, ...] = ()
    author: str | None = None
    domain: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["tags"] = list(self.tags)
        return data


@dataclass(frozen=True, slots=True)
class FacetCatalog:
    """Distinct facet values across all courses."""

    tags: list[str] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    domains: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a cursor-paginated result set.

    ``next_cursor`` is the start offset of the following page, or ``None``
    on the last page. ``total`` counts the whole filtered set.
    """

    items: list[T]
    next_cursor: int | None
    total: int
