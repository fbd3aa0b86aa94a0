"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogsearch import __version__
from blogsearch.api.dependencies import get_config
from blogsearch.api.routes import index, posts, search
from blogsearch.api.schemas import ErrorResponse
from blogsearch.config import AppConfig
from blogsearch.errors import IndexBuildError
from blogsearch.logging_setup import configure_logging
from blogsearch.search.engine import SearchEngine

logger = logging.getLogger(__name__)


def create_app(config: AppConfig | None = None, engine: SearchEngine | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Application configuration (loaded from BLOGSEARCH_CONFIG when omitted)
        engine: Prebuilt search engine, mainly for tests

    Returns:
        FastAPI: Configured application
    """
    config = config or get_config()
    configure_logging(config.logging)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the search engine on startup.

        The index itself is built lazily on the first query so a broken
        content tree does not block startup; /ready reports it.
        """
        app.state.engine = engine or SearchEngine.from_config(config)
        logger.info("Search API started (content root: %s)", app.state.engine.store.root)
        yield
        logger.info("Search API shutdown complete")

    app = FastAPI(
        title="Blog Search API",
        description="Course search, facets and filtered browsing",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search.router, prefix="/api/v1")
    app.include_router(posts.router, prefix="/api/v1")
    app.include_router(index.router, prefix="/api/v1")

    @app.exception_handler(IndexBuildError)
    async def index_build_error(request: Request, exc: IndexBuildError):
        logger.error("Index unavailable: %s", exc)
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error="Index unavailable", detail=str(exc)).model_dump(),
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/ready")
    def ready(request: Request):
        """Readiness check endpoint.

        Forces the index build so a missing or unreadable content root
        surfaces here instead of on the first search.
        """
        engine_ = request.app.state.engine
        try:
            documents = engine_.store.get()
        except IndexBuildError as e:
            raise HTTPException(status_code=503, detail=f"Index not ready: {e}")
        return {"status": "ready", "documents": len(documents)}

    return app
