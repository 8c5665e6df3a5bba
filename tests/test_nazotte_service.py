"""
Tests for the polygon search service.
"""

import pytest

from conftest import InMemoryEstateStore, make_estate

from estate_search.entities import Polygon
from estate_search.errors import InvalidInputError, StorageError
from estate_search.geometry import contains
from estate_search.services import NazotteService
from estate_search.services import nazotte_service as nazotte_module

SQUARE = Polygon.from_pairs([(0, 0), (0, 10), (10, 10), (10, 0)])
NOTCHED_SQUARE = Polygon.from_pairs(
    [(0, 0), (0, 10), (10, 10), (10, 7), (3, 7), (3, 3), (10, 3), (10, 0)]
)


@pytest.fixture
def checked_points(monkeypatch):
    """Record every point handed to the containment test."""
    points = []

    def spy(polygon, point):
        points.append(point)
        return contains(polygon, point)

    monkeypatch.setattr(nazotte_module, "contains", spy)
    return points


def test_square_includes_center(store):
    """An estate in the middle of the square is found."""
    store.save_many([make_estate(1, 5, 5)])
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE)
    assert result.count == 1
    assert [e.id for e in result.estates] == [1]


def test_far_estate_removed_by_prefilter(store, checked_points):
    """An estate outside the bounding box never reaches the containment test."""
    store.save_many([make_estate(1, 5, 5), make_estate(2, 20, 20)])
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE)

    assert [e.id for e in result.estates] == [1]
    assert store.range_queries == [(0, 10, 0, 10)]
    assert [(p.latitude, p.longitude) for p in checked_points] == [(5, 5)]


def test_notch_excluded_by_containment(store, checked_points):
    """An estate inside the box but in the notch is dropped by the exact test."""
    store.save_many([make_estate(1, 6, 5), make_estate(2, 1, 5)])
    result = NazotteService(store, limit=50).search_within_polygon(NOTCHED_SQUARE)

    assert [e.id for e in result.estates] == [2]
    assert len(checked_points) == 2


def test_cap_keeps_first_matches_in_order(store, checked_points):
    """Cap 3 over 5 matches returns the 3 most popular and stops scanning."""
    store.save_many([make_estate(i, 5, 5, popularity=100 - i) for i in range(1, 6)])
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE, cap=3)

    assert result.count == 3
    assert [e.id for e in result.estates] == [1, 2, 3]
    assert len(checked_points) == 3


def test_order_is_popularity_then_id(store):
    """Most popular first, equal popularity ordered by id."""
    store.save_many(
        [
            make_estate(4, 1, 1, popularity=5),
            make_estate(2, 2, 2, popularity=9),
            make_estate(3, 3, 3, popularity=5),
            make_estate(1, 4, 4, popularity=1),
        ]
    )
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE)
    assert [e.id for e in result.estates] == [2, 3, 4, 1]


def test_early_stop_matches_full_filter(store):
    """Stopping at the cap gives the same estates as filtering all and truncating."""
    estates = [make_estate(i, i % 11, (i * 7) % 11, popularity=i % 4) for i in range(1, 60)]
    store.save_many(estates)
    service = NazotteService(store, limit=50)

    full = service.search_within_polygon(NOTCHED_SQUARE, cap=1000)
    for cap in (0, 1, 5, 10):
        capped = service.search_within_polygon(NOTCHED_SQUARE, cap=cap)
        assert capped.estates == full.estates[:cap]
        assert capped.count == len(capped.estates) <= cap


def test_search_is_idempotent(store):
    """Two identical searches over an unchanged store return the same list."""
    store.save_many([make_estate(i, i % 10, (i * 3) % 10, popularity=i % 3) for i in range(30)])
    service = NazotteService(store, limit=7)
    assert service.search_within_polygon(SQUARE) == service.search_within_polygon(SQUARE)


def test_zero_rows_is_empty_result(store):
    """Nothing in the box gives an empty result, not an error."""
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE)
    assert result.count == 0
    assert result.estates == ()


def test_default_cap_from_limit(store):
    """Without an explicit cap, the service limit applies."""
    store.save_many([make_estate(i, 5, 5) for i in range(10)])
    result = NazotteService(store, limit=4).search_within_polygon(SQUARE)
    assert result.count == 4


def test_cap_zero(store):
    """Cap 0 returns nothing."""
    store.save_many([make_estate(1, 5, 5)])
    result = NazotteService(store, limit=50).search_within_polygon(SQUARE, cap=0)
    assert result.count == 0


def test_empty_polygon_rejected_without_store_access(store):
    """An empty polygon is invalid input and the store is not queried."""
    with pytest.raises(InvalidInputError):
        NazotteService(store).search_within_polygon(Polygon(vertices=()))
    assert store.range_queries == []


def test_negative_cap_rejected(store):
    """A negative cap is invalid input."""
    with pytest.raises(InvalidInputError):
        NazotteService(store).search_within_polygon(SQUARE, cap=-1)


def test_store_failure_propagates():
    """Store failures surface as StorageError with no partial result."""
    failing = InMemoryEstateStore([make_estate(1, 5, 5)])
    failing.fail = True
    with pytest.raises(StorageError):
        NazotteService(failing).search_within_polygon(SQUARE)
