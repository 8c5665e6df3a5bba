"""
Shared fixtures: an in-memory EstateStore and an estate factory.
"""

import logging
from collections.abc import Iterable
from operator import attrgetter

import pytest

from estate_search.entities import EstateEntity
from estate_search.errors import NotFoundError, StorageError


def make_estate(
    estate_id: int,
    latitude: float = 0.0,
    longitude: float = 0.0,
    popularity: int = 0,
    rent: int = 100000,
) -> EstateEntity:
    """Build an estate with filler values for the fields tests don't care about."""
    return EstateEntity(
        id=estate_id,
        name=f"estate {estate_id}",
        description="test estate",
        thumbnail=f"/images/estate/{estate_id}.png",
        address=f"address {estate_id}",
        latitude=latitude,
        longitude=longitude,
        rent=rent,
        door_height=200,
        door_width=100,
        features="",
        popularity=popularity,
    )


class InMemoryEstateStore:
    """EstateStore backed by a dict, with call counters and failure injection."""

    def __init__(self, estates: Iterable[EstateEntity] = ()) -> None:
        self.estates: dict[int, EstateEntity] = {}
        self.range_queries: list[tuple[float, float, float, float]] = []
        self.get_calls = 0
        self.fail = False
        self.save_many(estates)

    def _check(self) -> None:
        if self.fail:
            raise StorageError("store unavailable")

    def range_query(
        self,
        lat_min: float,
        lat_max: float,
        lon_min: float,
        lon_max: float,
    ) -> list[EstateEntity]:
        self._check()
        self.range_queries.append((lat_min, lat_max, lon_min, lon_max))
        found = [
            e
            for e in self.estates.values()
            if lat_min <= e.latitude <= lat_max and lon_min <= e.longitude <= lon_max
        ]
        return sorted(found, key=attrgetter("sort_key"))

    def get_by_id(self, estate_id: int) -> EstateEntity:
        self._check()
        self.get_calls += 1
        try:
            return self.estates[estate_id]
        except KeyError:
            raise NotFoundError(estate_id) from None

    def list_low_priced(self, limit: int) -> list[EstateEntity]:
        self._check()
        return sorted(self.estates.values(), key=lambda e: (e.rent, e.id))[:limit]

    def save_many(self, estates: Iterable[EstateEntity]) -> int:
        count = 0
        for estate in estates:
            self.estates[estate.id] = estate
            count += 1
        return count

    def health_check(self) -> bool:
        return not self.fail


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryEstateStore()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way pytest left it.

    Starting the app configures logging, which replaces the root handlers.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
