"""Filtered course browsing endpoint."""

from fastapi import APIRouter, Depends

from blogsearch.api.dependencies import get_engine
from blogsearch.api.schemas import CourseMeta, FilteredRequest, FilteredResponse
from blogsearch.search.engine import SearchEngine

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/filtered", response_model=FilteredResponse)
def filtered(
    request: FilteredRequest,
    engine: SearchEngine = Depends(get_engine),
) -> FilteredResponse:
    """Cursor-paginated courses matching every requested facet group.

    ``next_cursor`` is the offset to send for the following page and is
    null on the last page.
    """
    page = engine.filtered_browse(
        domains=request.domains,
        authors=request.authors,
        tags=request.tags,
        lang=request.lang,
        limit=request.limit,
        cursor=request.cursor,
    )
    return FilteredResponse(
        items=[CourseMeta(**meta.to_dict()) for meta in page.items],
        next_cursor=page.next_cursor,
        total=page.total,
    )
