"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
    - Tests pre-seed app.state.cache / app.state.fipe_client to swap backends
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from fipe_proxy.config import Settings, settings
from fipe_proxy.handlers import FipeHandler
from fipe_proxy.repositories import FipeHttpClient, InMemoryCacheRepository
from fipe_proxy.services import FipeService, RouteResolver

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> FipeHandler:
    """Dependency injection for FipeHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The FipeHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "fipe_handler", None)
    if handler is None:
        raise RuntimeError("FipeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache store and FIPE client - reused if already present in app.state
    2. Service (business logic) - stored in app.state.fipe_service
    3. Handler (HTTP endpoints) - stored in app.state.fipe_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the FIPE client and removes what the lifespan created from
        app.state; backends injected through create_app are kept
    """
    app_settings: Settings = getattr(app.state, "settings", None) or settings

    # empty caches are falsy
    created: list[str] = []
    cache = getattr(app.state, "cache", None)
    if cache is None:
        cache = InMemoryCacheRepository.create(ttl=app_settings.cache_ttl)
        created.append("cache")

    fipe_client = getattr(app.state, "fipe_client", None)
    if fipe_client is None:
        created.append("fipe_client")
        fipe_client = FipeHttpClient.create(
            base_url=app_settings.fipe_api_url,
            timeout=app_settings.fipe_timeout,
        )

    fipe_service = FipeService.create(cache=cache, client=fipe_client)
    fipe_handler = FipeHandler(resolver=RouteResolver(fipe_service))

    # Store in app.state (FastAPI pattern)
    app.state.cache = cache
    app.state.fipe_client = fipe_client
    app.state.fipe_service = fipe_service
    app.state.fipe_handler = fipe_handler

    logger.info("FIPE proxy initialized")
    logger.info("Upstream: %s", app_settings.fipe_api_url)
    logger.info("Cache TTL: %ss", app_settings.cache_ttl)

    yield

    await fipe_client.close()

    # Cleanup - injected backends stay for the next startup
    del app.state.fipe_handler
    del app.state.fipe_service
    for name in created:
        delattr(app.state, name)
    logger.info("FIPE proxy shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[FipeHandler, Depends(get_handler)]
