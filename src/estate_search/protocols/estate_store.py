"""Estate storage protocol.

Defines the read path the search and lookup services depend on, plus the
bulk load used for seeding.

Implementations can include:
- Redis hashes with sorted-set coordinate indexes (default)
- A relational table with latitude/longitude indexes
- An in-memory list (tests)
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from estate_search.entities import EstateEntity


@runtime_checkable
class EstateStore(Protocol):
    """Protocol for estate storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Backend failures must surface as
    ``StorageError``.

    Example:
        ```python
        from estate_search.protocols import EstateStore

        store: EstateStore = RedisEstateRepository.create()
        ```
    """

    def range_query(
        self,
        lat_min: float,
        lat_max: float,
        lon_min: float,
        lon_max: float,
    ) -> list[EstateEntity]:
        """Find every estate inside a latitude/longitude rectangle.

        Both ranges are inclusive at both ends.

        Args:
            lat_min: Lowest latitude
            lat_max: Highest latitude
            lon_min: Lowest longitude
            lon_max: Highest longitude

        Returns:
            Estates ordered by popularity descending, then id ascending
        """
        ...

    def get_by_id(self, estate_id: int) -> EstateEntity:
        """Fetch a single estate.

        Args:
            estate_id: The estate identifier

        Returns:
            The stored estate

        Raises:
            NotFoundError: If no estate has this id
        """
        ...

    def list_low_priced(self, limit: int) -> list[EstateEntity]:
        """List the cheapest estates.

        Args:
            limit: Maximum number of estates to return

        Returns:
            Estates ordered by rent ascending, then id ascending
        """
        ...

    def save_many(self, estates: Iterable[EstateEntity]) -> int:
        """Insert estates in bulk.

        Args:
            estates: Estates to insert

        Returns:
            Number of estates written
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
