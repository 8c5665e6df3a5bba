"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The estate cache is built once per app and injected, never global
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from estate_search.handlers import EstateHandler
from estate_search.logging import configure_logging
from estate_search.protocols import EstateStore
from estate_search.repositories import RedisEstateRepository
from estate_search.services import EstateCache, EstateService, NazotteService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> EstateHandler:
    """Dependency injection for EstateHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The EstateHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "estate_handler", None)
    if handler is None:
        raise RuntimeError("EstateHandler not initialized. Check lifespan setup.")
    return handler


def make_lifespan(
    store: EstateStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for an app.

    Args:
        store: Estate store to serve from. If None, a Redis repository is
            created at startup.

    Returns:
        Lifespan context manager to pass to FastAPI
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Repository (data access)
        2. Estate cache (shared by every request thread)
        3. Services (business logic)
        4. Handler (HTTP endpoints) - stored in app.state.estate_handler

        Logging is configured first so worker processes started by uvicorn
        (reload mode, or serving the app object directly) log the same way.
        """
        configure_logging()

        repository = store if store is not None else RedisEstateRepository.create()
        cache = EstateCache()

        estate_service = EstateService.create(store=repository, cache=cache)
        nazotte_service = NazotteService.create(store=repository)

        app.state.repository = repository
        app.state.estate_cache = cache
        app.state.estate_service = estate_service
        app.state.nazotte_service = nazotte_service
        app.state.estate_handler = EstateHandler(
            estate_service=estate_service,
            nazotte_service=nazotte_service,
        )

        logger.info("Estate services initialized (nazotte limit %d)", nazotte_service.limit)
        if not repository.health_check():
            logger.warning("Estate store unreachable at startup")

        yield

        del app.state.estate_handler
        del app.state.nazotte_service
        del app.state.estate_service
        del app.state.estate_cache
        del app.state.repository
        logger.info("Estate services shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[EstateHandler, Depends(get_handler)]
