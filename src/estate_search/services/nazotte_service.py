"""Polygon ("nazotte") search service.

Orchestrates the bounding-box prefilter in the store and the exact
containment test in application code.
"""

import logging

from estate_search.config import settings
from estate_search.entities import EstateEntity, Polygon, SearchResultEntity
from estate_search.errors import InvalidInputError
from estate_search.geometry import bounding_box, contains
from estate_search.protocols import EstateStore

logger = logging.getLogger(__name__)


class NazotteService:
    """Find estates inside a hand-drawn polygon.

    This service depends on the EstateStore PROTOCOL, not on a concrete
    backend. It holds no mutable state and is safe to share across threads.

    Example:
        ```python
        from estate_search.repositories import RedisEstateRepository
        from estate_search.services import NazotteService

        service = NazotteService.create(store=RedisEstateRepository.create())
        result = service.search_within_polygon(polygon)
        ```
    """

    def __init__(self, store: EstateStore, limit: int | None = None) -> None:
        """Initialize the nazotte service.

        Args:
            store: Estate storage backend (required).
            limit: Default result cap. Defaults to settings.
        """
        self._store = store
        self._limit = settings.nazotte_limit if limit is None else limit

    @classmethod
    def create(cls, store: EstateStore, limit: int | None = None) -> "NazotteService":
        """Factory method to create NazotteService with sensible defaults.

        Args:
            store: Estate storage backend (required).
            limit: Default result cap. If None, uses settings.

        Returns:
            Configured NazotteService instance
        """
        return cls(store=store, limit=limit)

    def search_within_polygon(self, polygon: Polygon, cap: int | None = None) -> SearchResultEntity:
        """Return the estates inside a polygon, capped and in listing order.

        Business logic:
        1. Reject an empty polygon before touching the store
        2. Ask the store for everything inside the polygon's bounding box
        3. Keep the candidates the containment test accepts, in store order
        4. Stop as soon as ``cap`` matches are collected

        The store already returns candidates in final listing order, so
        stopping early gives the same result as filtering everything and
        truncating.

        Args:
            polygon: The search area
            cap: Maximum number of estates. Defaults to the service limit.

        Returns:
            SearchResultEntity with at most ``cap`` estates

        Raises:
            InvalidInputError: If the polygon is empty or the cap is negative
            StorageError: If the store query fails
        """
        if polygon.is_empty:
            raise InvalidInputError("polygon must have at least one coordinate")

        cap = self._limit if cap is None else cap
        if cap < 0:
            raise InvalidInputError(f"cap must be >= 0, got {cap}")

        box = bounding_box(polygon)
        candidates = self._store.range_query(
            lat_min=box.top_left.latitude,
            lat_max=box.bottom_right.latitude,
            lon_min=box.top_left.longitude,
            lon_max=box.bottom_right.longitude,
        )

        matches: list[EstateEntity] = []
        for estate in candidates:
            if len(matches) >= cap:
                break
            if contains(polygon, estate.coordinate):
                matches.append(estate)

        logger.debug(
            "Nazotte search: %d vertices, %d candidates, %d matches",
            len(polygon),
            len(candidates),
            len(matches),
        )
        return SearchResultEntity.of(matches)

    @property
    def limit(self) -> int:
        """Get the default result cap."""
        return self._limit

    @property
    def store(self) -> EstateStore:
        """Get the underlying store (for testing)."""
        return self._store
