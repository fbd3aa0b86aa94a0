"""Search and facet endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from blogsearch.api.dependencies import get_engine
from blogsearch.api.schemas import CardsRequest, FacetsResponse, SearchRequest, SearchResultItem
from blogsearch.domain import results
from blogsearch.search.engine import SearchEngine

router = APIRouter(prefix="/search", tags=["search"])


def _to_schema(item: results.SearchResultItem) -> SearchResultItem:
    return SearchResultItem(**item.to_dict())


@router.post("", response_model=List[SearchResultItem])
def search(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
) -> List[SearchResultItem]:
    """Free-text search over courses.

    An exact author or tag query returns every matching course at the
    maximal score; other queries are ranked by field-weighted matching.
    """
    hits = engine.search(request.q, limit=request.limit, lang=request.lang)
    return [_to_schema(hit) for hit in hits]


@router.post("/cards", response_model=List[SearchResultItem])
def cards(
    request: CardsRequest,
    engine: SearchEngine = Depends(get_engine),
) -> List[SearchResultItem]:
    """Search restricted to courses passing the facet filters."""
    hits = engine.cards(
        request.q,
        limit=request.limit,
        lang=request.lang,
        domains=request.domains,
        authors=request.authors,
        tags=request.tags,
    )
    return [_to_schema(hit) for hit in hits]


@router.get("/tags", response_model=List[str])
def tags(engine: SearchEngine = Depends(get_engine)) -> List[str]:
    return engine.tags()


@router.get("/authors", response_model=List[str])
def authors(engine: SearchEngine = Depends(get_engine)) -> List[str]:
    return engine.authors()


@router.get("/domains", response_model=List[str])
def domains(engine: SearchEngine = Depends(get_engine)) -> List[str]:
    return engine.domains()


@router.get("/filters", response_model=FacetsResponse)
def filters(engine: SearchEngine = Depends(get_engine)) -> FacetsResponse:
    """All facet values, for populating filter widgets."""
    return FacetsResponse(**engine.facets().to_dict())
