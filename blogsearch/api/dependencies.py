"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import os
from functools import lru_cache

from fastapi import Request

from blogsearch.config import AppConfig, load_config, load_env_overrides
from blogsearch.search.engine import SearchEngine


@lru_cache
def get_config() -> AppConfig:
    """Get application configuration.

    Loads the file named by the BLOGSEARCH_CONFIG env var, or the defaults
    when it is unset.

    Returns:
        AppConfig: Application configuration
    """
    config_path = os.getenv("BLOGSEARCH_CONFIG")
    config = load_config(config_path)
    return load_env_overrides(config)


def get_engine(request: Request) -> SearchEngine:
    """Get the search engine created by the app lifespan.

    Returns:
        SearchEngine shared by all requests
    """
    return request.app.state.engine
