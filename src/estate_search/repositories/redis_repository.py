"""Redis implementation of EstateStore.

Each estate is a hash at ``{prefix}:{id}``. Three sorted sets index the
estate ids by latitude, longitude and rent, so the bounding-box prefilter is
two ``ZRANGEBYSCORE`` calls and an intersection instead of a full scan.
"""

import logging
from collections.abc import Iterable
from operator import attrgetter

import redis

from estate_search.config import get_redis_client, settings
from estate_search.entities import EstateEntity
from estate_search.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

_INT_FIELDS = ("id", "rent", "door_height", "door_width", "popularity")
_FLOAT_FIELDS = ("latitude", "longitude")


def _to_mapping(estate: EstateEntity) -> dict[str, str | int | float]:
    return {
        "id": estate.id,
        "name": estate.name,
        "description": estate.description,
        "thumbnail": estate.thumbnail,
        "address": estate.address,
        "latitude": repr(estate.latitude),
        "longitude": repr(estate.longitude),
        "rent": estate.rent,
        "door_height": estate.door_height,
        "door_width": estate.door_width,
        "features": estate.features,
        "popularity": estate.popularity,
    }


def _from_mapping(data: dict[str, str]) -> EstateEntity:
    values: dict[str, str | int | float] = dict(data)
    for name in _INT_FIELDS:
        values[name] = int(data[name])
    for name in _FLOAT_FIELDS:
        values[name] = float(data[name])
    return EstateEntity(**values)  # type: ignore[arg-type]


class RedisEstateRepository:
    """Redis implementation of the EstateStore protocol.

    This class satisfies the EstateStore protocol through structural
    typing - no explicit inheritance needed. Every ``redis.RedisError`` is
    re-raised as ``StorageError``.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis estate repository.

        Args:
            redis_client: Redis client instance (must decode responses). If None, creates default.
            key_prefix: Namespace for all keys. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.estate_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisEstateRepository":
        """Factory method to create RedisEstateRepository with defaults.

        Args:
            key_prefix: Redis key namespace. If None, uses settings.

        Returns:
            Configured RedisEstateRepository
        """
        return cls(key_prefix=key_prefix)

    def _estate_key(self, estate_id: int | str) -> str:
        return f"{self._prefix}:{estate_id}"

    def _index_key(self, field: str) -> str:
        return f"{self._prefix}:idx:{field}"

    def _fetch(self, estate_ids: Iterable[str]) -> list[EstateEntity]:
        """Load estate hashes in one round trip, skipping dangling index entries."""
        pipe = self._client.pipeline(transaction=False)
        for estate_id in estate_ids:
            pipe.hgetall(self._estate_key(estate_id))
        return [_from_mapping(data) for data in pipe.execute() if data]

    def range_query(
        self,
        lat_min: float,
        lat_max: float,
        lon_min: float,
        lon_max: float,
    ) -> list[EstateEntity]:
        """Find every estate inside a latitude/longitude rectangle.

        Args:
            lat_min: Lowest latitude (inclusive)
            lat_max: Highest latitude (inclusive)
            lon_min: Lowest longitude (inclusive)
            lon_max: Highest longitude (inclusive)

        Returns:
            Estates ordered by popularity descending, then id ascending

        Raises:
            StorageError: If Redis fails
        """
        try:
            lat_ids = self._client.zrangebyscore(self._index_key("latitude"), lat_min, lat_max)
            if not lat_ids:
                return []
            lon_ids = set(self._client.zrangebyscore(self._index_key("longitude"), lon_min, lon_max))
            estates = self._fetch(estate_id for estate_id in lat_ids if estate_id in lon_ids)
        except redis.RedisError as e:
            raise StorageError(f"range query failed: {e}") from e

        estates.sort(key=attrgetter("sort_key"))
        return estates

    def get_by_id(self, estate_id: int) -> EstateEntity:
        """Fetch a single estate.

        Args:
            estate_id: The estate identifier

        Returns:
            The stored estate

        Raises:
            NotFoundError: If no estate has this id
            StorageError: If Redis fails
        """
        try:
            data = self._client.hgetall(self._estate_key(estate_id))
        except redis.RedisError as e:
            raise StorageError(f"failed to get estate {estate_id}: {e}") from e

        if not data:
            raise NotFoundError(estate_id)
        return _from_mapping(data)  # type: ignore[arg-type]

    def list_low_priced(self, limit: int) -> list[EstateEntity]:
        """List the cheapest estates, ties on rent broken by ascending id.

        Sorted-set ties are ordered by member string, not by numeric id, so
        every estate sharing the highest rent in the window is loaded before
        the final sort and cut.

        Args:
            limit: Maximum number of estates to return

        Returns:
            Estates ordered by rent ascending, then id ascending

        Raises:
            StorageError: If Redis fails
        """
        if limit <= 0:
            return []

        rent_index = self._index_key("rent")
        try:
            window = self._client.zrange(rent_index, 0, limit - 1, withscores=True)
            if not window:
                return []
            max_rent = window[-1][1]
            estate_ids = self._client.zrangebyscore(rent_index, "-inf", max_rent)
            estates = self._fetch(estate_ids)
        except redis.RedisError as e:
            raise StorageError(f"low priced query failed: {e}") from e

        estates.sort(key=lambda estate: (estate.rent, estate.id))
        return estates[:limit]

    def save_many(self, estates: Iterable[EstateEntity]) -> int:
        """Insert estates in bulk inside one MULTI/EXEC transaction.

        Args:
            estates: Estates to insert

        Returns:
            Number of estates written

        Raises:
            StorageError: If Redis fails
        """
        count = 0
        try:
            pipe = self._client.pipeline(transaction=True)
            for estate in estates:
                pipe.hset(self._estate_key(estate.id), mapping=_to_mapping(estate))
                pipe.zadd(self._index_key("latitude"), {str(estate.id): estate.latitude})
                pipe.zadd(self._index_key("longitude"), {str(estate.id): estate.longitude})
                pipe.zadd(self._index_key("rent"), {str(estate.id): estate.rent})
                count += 1
            pipe.execute()
        except redis.RedisError as e:
            raise StorageError(f"failed to save estates: {e}") from e

        logger.info("Saved %d estates under prefix %s", count, self._prefix)
        return count

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            logger.warning("Redis health check failed", exc_info=True)
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
