"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from estate_search.services import EstateCache, EstateService, NazotteService

    cache = EstateCache()
    estates = EstateService.create(store=repo, cache=cache)
    nazotte = NazotteService.create(store=repo)
    ```
"""

from .entity_cache import EntityCache, EstateCache
from .estate_service import EstateService
from .nazotte_service import NazotteService

__all__ = [
    "EntityCache",
    "EstateCache",
    "EstateService",
    "NazotteService",
]
