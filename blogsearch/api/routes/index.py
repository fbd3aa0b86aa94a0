"""Index maintenance endpoint."""

from fastapi import APIRouter, Depends

from blogsearch.api.dependencies import get_engine
from blogsearch.api.schemas import RefreshResponse
from blogsearch.search.engine import SearchEngine

router = APIRouter(prefix="/index", tags=["index"])


@router.post("/refresh", response_model=RefreshResponse)
def refresh(engine: SearchEngine = Depends(get_engine)) -> RefreshResponse:
    """Rebuild the in-memory index from the content tree."""
    return RefreshResponse(**engine.refresh())
