"""Process-wide entity cache shared by all request threads."""

from typing import Generic, TypeVar

from estate_search.entities import EstateEntity
from estate_search.utils import ReadWriteLock

K = TypeVar("K")
V = TypeVar("V")


class EntityCache(Generic[K, V]):
    """Thread-safe key to entity map without eviction.

    Meant for entities that never change after insert: there is no delete,
    no expiry and no size bound. Reads share a lock and run concurrently;
    a write excludes every other read and write on the whole map.

    Two threads missing on the same key may both fetch and both ``set``.
    Both store the same immutable value, so the last write wins harmlessly.

    Example:
        ```python
        cache: EntityCache[int, EstateEntity] = EntityCache()
        cache.set(1, estate)
        cache.get(1)  # estate
        cache.get(2)  # None
        ```
    """

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self._lock = ReadWriteLock()

    def get(self, key: K) -> V | None:
        """Look up a cached value.

        Args:
            key: The entity key

        Returns:
            The cached value, or None if it was never set
        """
        with self._lock.read_locked():
            return self._entries.get(key)

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite a cached value.

        Args:
            key: The entity key
            value: The entity to cache (must not be None)
        """
        with self._lock.write_locked():
            self._entries[key] = value


EstateCache = EntityCache[int, EstateEntity]
