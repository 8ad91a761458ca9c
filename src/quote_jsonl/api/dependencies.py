"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The quote cache lives on the QuoteService instance, not in a global
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from quote_jsonl.config import configure_logging
from quote_jsonl.handlers import QuoteHandler
from quote_jsonl.repositories import QuotableRepository
from quote_jsonl.services import QuoteService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> QuoteHandler:
    """Dependency injection for QuoteHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The QuoteHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "quote_handler", None)
    if handler is None:
        raise RuntimeError("QuoteHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (quote API client) - app.state.repository
    2. Service (quote cache) - app.state.quote_service
    3. Handler (HTTP endpoints) - app.state.quote_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the HTTP client and removes all services from app.state
    """
    configure_logging()

    repository = QuotableRepository.create()
    quote_service = QuoteService.create(source=repository)
    quote_handler = QuoteHandler(quote_service=quote_service)

    app.state.repository = repository
    app.state.quote_service = quote_service
    app.state.quote_handler = quote_handler

    logger.info("Quote service initialized")
    logger.info("Upstream: %s (limit=%d)", repository.base_url, quote_service.limit)

    yield

    repository.close()
    del app.state.quote_handler
    del app.state.quote_service
    del app.state.repository
    logger.info("Quote service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[QuoteHandler, Depends(get_handler)]
