"""Estate lookup service with a read-through cache."""

import logging

from estate_search.config import settings
from estate_search.entities import EstateEntity
from estate_search.protocols import EstateStore

from .entity_cache import EstateCache

logger = logging.getLogger(__name__)


class EstateService:
    """Point lookups and listings over the estate store.

    ``get_estate`` checks the injected cache first and only goes to the
    store on a miss. Estates never change after insert, so a cached
    snapshot stays valid for the life of the process.

    Example:
        ```python
        from estate_search.services import EstateCache, EstateService

        service = EstateService.create(store=repository, cache=EstateCache())
        estate = service.get_estate(42)
        ```
    """

    def __init__(
        self,
        store: EstateStore,
        cache: EstateCache,
        low_priced_limit: int | None = None,
    ) -> None:
        """Initialize the estate service.

        Args:
            store: Estate storage backend (required).
            cache: Shared estate cache (required).
            low_priced_limit: Size of the low-priced listing. Defaults to settings.
        """
        self._store = store
        self._cache = cache
        self._low_priced_limit = (
            settings.low_priced_limit if low_priced_limit is None else low_priced_limit
        )

    @classmethod
    def create(
        cls,
        store: EstateStore,
        cache: EstateCache,
        low_priced_limit: int | None = None,
    ) -> "EstateService":
        """Factory method to create EstateService with sensible defaults.

        Args:
            store: Estate storage backend (required).
            cache: Shared estate cache (required).
            low_priced_limit: Size of the low-priced listing. If None, uses settings.

        Returns:
            Configured EstateService instance
        """
        return cls(store=store, cache=cache, low_priced_limit=low_priced_limit)

    def get_estate(self, estate_id: int) -> EstateEntity:
        """Fetch an estate, serving repeat lookups from the cache.

        Business logic:
        1. Return the cached estate if present
        2. Otherwise fetch it from the store
        3. Cache the fetched estate for later lookups

        Args:
            estate_id: The estate identifier

        Returns:
            The estate

        Raises:
            NotFoundError: If the estate does not exist (nothing is cached)
            StorageError: If the store fails (nothing is cached)
        """
        estate = self._cache.get(estate_id)
        if estate is not None:
            return estate

        estate = self._store.get_by_id(estate_id)
        self._cache.set(estate_id, estate)
        logger.debug("Cached estate %d", estate_id)
        return estate

    def list_low_priced(self) -> list[EstateEntity]:
        """List the cheapest estates, cheapest first."""
        return self._store.list_low_priced(self._low_priced_limit)

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        return self._store.health_check()

    @property
    def cache(self) -> EstateCache:
        """Get the shared cache (for testing)."""
        return self._cache
