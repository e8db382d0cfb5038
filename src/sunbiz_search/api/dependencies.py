"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from sunbiz_search.config import settings
from sunbiz_search.handlers import SearchHandler
from sunbiz_search.repositories import SunbizClient, TTLResultCache
from sunbiz_search.services import SearchService

logger = logging.getLogger(__name__)


def get_search_service(request: Request) -> SearchService:
    """Dependency injection for SearchService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SearchService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise RuntimeError("SearchService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> SearchHandler:
    """Dependency injection for SearchHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SearchHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "search_handler", None)
    if handler is None:
        raise RuntimeError("SearchHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (result cache, registry client)
    2. Service (business logic) - stored in app.state.search_service
    3. Handler (HTTP endpoints) - stored in app.state.search_handler

    The cache lives for the lifetime of the process; nothing is persisted.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    cache = TTLResultCache()
    registry_client = SunbizClient.create()

    search_service = SearchService.create(cache=cache, registry_client=registry_client)
    search_handler = SearchHandler(search_service=search_service)

    app.state.result_cache = cache
    app.state.registry_client = registry_client
    app.state.search_service = search_service
    app.state.search_handler = search_handler

    logger.info("Search service initialized")
    logger.info("Registry: %s", settings.sunbiz_base_url)
    logger.info("Cache: %d entries, %ds TTL", cache.max_entries, cache.ttl)

    yield

    await registry_client.close()

    del app.state.search_handler
    del app.state.search_service
    del app.state.registry_client
    del app.state.result_cache
    logger.info("Search service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[SearchHandler, Depends(get_handler)]
ServiceDep = Annotated[SearchService, Depends(get_search_service)]
