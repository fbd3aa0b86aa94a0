"""Logging wiring for the CLI and HTTP app."""

from __future__ import annotations

import logging

from blogsearch.config import LoggingConfig

_HANDLER_NAME = "blogsearch"


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Attach a stream handler to the ``blogsearch`` logger once.

    Calling this again only updates the level and format.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("blogsearch")
    logger.setLevel(config.level.upper())

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.format))
    return logger
