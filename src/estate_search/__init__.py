"""Estate Search - polygon search and cached lookups over estate listings.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (EstateStore)
    - repositories: Data access implementations (Redis)
    - geometry: Bounding box and point-in-polygon test
    - services: Business logic (polygon search, cached lookup)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from estate_search.repositories import RedisEstateRepository
    from estate_search.services import EstateCache, EstateService, NazotteService

    repo = RedisEstateRepository.create()
    nazotte = NazotteService.create(store=repo)
    estates = EstateService.create(store=repo, cache=EstateCache())
    ```

For HTTP API:
    ```python
    from estate_search.api.app import app
    ```
"""

from estate_search.config import get_redis_client, settings
from estate_search.dto import NazotteSearchRequest, RequestDocumentRequest
from estate_search.entities import (
    BoundingBox,
    Coordinate,
    EstateEntity,
    Polygon,
    SearchResultEntity,
)
from estate_search.errors import (
    EstateSearchError,
    InvalidInputError,
    NotFoundError,
    StorageError,
)
from estate_search.geometry import bounding_box, contains
from estate_search.handlers import EstateHandler
from estate_search.protocols import EstateStore
from estate_search.repositories import RedisEstateRepository
from estate_search.services import EntityCache, EstateCache, EstateService, NazotteService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "EstateStore",
    # Geometry
    "bounding_box",
    "contains",
    # Services (business logic)
    "EntityCache",
    "EstateCache",
    "EstateService",
    "NazotteService",
    # Handlers (HTTP)
    "EstateHandler",
    # Repositories (data access)
    "RedisEstateRepository",
    # Entities (domain models)
    "BoundingBox",
    "Coordinate",
    "EstateEntity",
    "Polygon",
    "SearchResultEntity",
    # Errors
    "EstateSearchError",
    "InvalidInputError",
    "NotFoundError",
    "StorageError",
    # DTOs (API contracts)
    "NazotteSearchRequest",
    "RequestDocumentRequest",
]
