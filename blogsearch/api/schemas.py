"""Pydantic schemas for API request/response models."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

Lang = Literal["en", "fr"]


def _strip_query(v: str) -> str:
    if not v.strip():
        raise ValueError("query cannot be empty or whitespace")
    return v.strip()


# ========== Request Schemas ==========


class SearchRequest(BaseModel):
    """Request model for the search endpoint."""

    q: str = Field(..., min_length=1, max_length=500, description="Search query")
    limit: Optional[int] = Field(default=None, ge=1, le=50, description="Maximum results")
    lang: Optional[Lang] = Field(default=None, description="Language filter")

    @field_validator("q")
    @classmethod
    def query_must_not_be_empty(cls, v: str) -> str:
        return _strip_query(v)


class CardsRequest(BaseModel):
    """Request model for the cards endpoint."""

    q: str = Field(..., min_length=1, max_length=500, description="Search query")
    limit: Optional[int] = Field(default=None, ge=1, le=50, description="Maximum results")
    lang: Optional[Lang] = Field(default=None, description="Language, English when omitted")
    domains: Optional[List[str]] = Field(default=None, description="Allowed domains")
    authors: Optional[List[str]] = Field(default=None, description="Allowed authors")
    tags: Optional[List[str]] = Field(default=None, description="Courses need one of these tags")

    @field_validator("q")
    @classmethod
    def query_must_not_be_empty(cls, v: str) -> str:
        return _strip_query(v)


class FilteredRequest(BaseModel):
    """Request model for filtered browsing."""

    domains: Optional[List[str]] = None
    authors: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    lang: Optional[Lang] = None
    limit: int = Field(default=10, ge=1, le=50, description="Page size")
    cursor: int = Field(default=0, ge=0, description="Offset of the first item")


# ========== Response Schemas ==========


class SearchResultItem(BaseModel):
    """Single ranked search hit."""

    id: str = Field(..., description="Source path of the document")
    title: str
    url: str = Field(..., description="Canonical page path")
    kind: str = Field(..., description="course, resource or generic")
    snippet: str
    score: int = Field(..., ge=0)
    author: Optional[str] = None
    reading_time: Optional[int] = Field(None, ge=1, description="Estimated minutes")


class CourseMeta(BaseModel):
    """Catalog metadata of one course."""

    slug: str
    title: Optional[str] = None
    description: Optional[str] = None
    lang: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    author: Optional[str] = None
    domain: Optional[str] = None


class FilteredResponse(BaseModel):
    """One page of filtered courses."""

    items: List[CourseMeta]
    next_cursor: Optional[int] = Field(None, description="Cursor of the next page, null on the last")
    total: int = Field(..., description="Size of the filtered set")


class FacetsResponse(BaseModel):
    """Distinct facet values."""

    tags: List[str]
    authors: List[str]
    domains: List[str]


class RefreshResponse(BaseModel):
    """Statistics of an index rebuild."""

    total: int
    indexed: int
    skipped: int
    errors: List[dict] = Field(default_factory=list)
    elapsed_ms: int = 0


# ========== Error Schemas ==========


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
