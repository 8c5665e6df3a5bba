"""
Tests for the bounding-box builder and the containment engine.
"""

import pytest

from estate_search.entities import Coordinate, Polygon
from estate_search.geometry import bounding_box, contains

SQUARE = Polygon.from_pairs([(0, 0), (0, 10), (10, 10), (10, 0)])

# Square with a rectangular notch cut in from the latitude=10 side,
# spanning latitude 3..10 and longitude 3..7.
NOTCHED_SQUARE = Polygon.from_pairs(
    [(0, 0), (0, 10), (10, 10), (10, 7), (3, 7), (3, 3), (10, 3), (10, 0)]
)


def test_bounding_box_square():
    """Square corners give the min and max on each axis."""
    box = bounding_box(SQUARE)
    assert box.top_left == Coordinate(0, 0)
    assert box.bottom_right == Coordinate(10, 10)


def test_bounding_box_single_vertex():
    """A single vertex collapses the box to a point."""
    box = bounding_box(Polygon.from_pairs([(35.5, 139.7)]))
    assert box.top_left == box.bottom_right == Coordinate(35.5, 139.7)


def test_bounding_box_encloses_every_vertex():
    """Every vertex of an irregular polygon lies inside its box."""
    polygon = Polygon.from_pairs(
        [(35.68, 139.76), (35.61, 139.80), (35.70, 139.71), (35.64, 139.69), (35.66, 139.83)]
    )
    box = bounding_box(polygon)
    assert box.top_left == Coordinate(35.61, 139.69)
    assert box.bottom_right == Coordinate(35.70, 139.83)
    for vertex in polygon:
        assert box.encloses(vertex)


def test_bounding_box_rejects_empty_polygon():
    """An empty polygon has no bounding box."""
    with pytest.raises(ValueError):
        bounding_box(Polygon(vertices=()))


def test_contains_center_of_square():
    """The middle of the square is inside."""
    assert contains(SQUARE, Coordinate(5, 5))


@pytest.mark.parametrize("point", [(20, 20), (-1, 5), (5, 11), (10.5, 0.5)])
def test_contains_outside_square(point):
    """Points beyond the square are outside."""
    assert not contains(SQUARE, Coordinate(*point))


def test_contains_ignores_vertex_order_direction():
    """Clockwise and counter-clockwise rings agree."""
    reversed_square = Polygon(vertices=tuple(reversed(SQUARE.vertices)))
    assert contains(reversed_square, Coordinate(5, 5))
    assert not contains(reversed_square, Coordinate(20, 20))


def test_contains_excludes_point_in_notch():
    """A point inside the bounding box but in the notch is outside."""
    point = Coordinate(6, 5)
    assert bounding_box(NOTCHED_SQUARE).encloses(point)
    assert not contains(NOTCHED_SQUARE, point)


@pytest.mark.parametrize("point", [(1, 5), (8, 1), (8, 9), (5, 1.5)])
def test_contains_includes_points_around_notch(point):
    """Points in the solid part of the notched square are inside."""
    assert contains(NOTCHED_SQUARE, Coordinate(*point))


def test_contains_triangle():
    """Points on each side of a triangle's hypotenuse."""
    triangle = Polygon.from_pairs([(0, 0), (10, 0), (0, 10)])
    assert contains(triangle, Coordinate(2, 2))
    assert not contains(triangle, Coordinate(6, 6))


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [(1, 1)],
        [(0, 0), (10, 10)],
    ],
)
def test_contains_fewer_than_three_vertices(pairs):
    """Polygons with fewer than three vertices enclose nothing."""
    assert not contains(Polygon.from_pairs(pairs), Coordinate(1, 1))


def test_contains_degenerate_polygons():
    """Collinear and repeated vertices return a boolean without error."""
    collinear = Polygon.from_pairs([(0, 0), (5, 5), (10, 10)])
    same_longitude = Polygon.from_pairs([(0, 3), (5, 3), (10, 3)])
    repeated = Polygon.from_pairs([(1, 1), (1, 1), (1, 1), (1, 1)])

    for polygon in (collinear, same_longitude, repeated):
        for point in (Coordinate(5, 5), Coordinate(5, 3), Coordinate(1, 1)):
            assert contains(polygon, point) in (True, False)


def test_contains_is_deterministic_on_boundary():
    """Boundary points always get the same answer."""
    for point in (Coordinate(0, 5), Coordinate(10, 5), Coordinate(5, 0), Coordinate(10, 10)):
        first = contains(SQUARE, point)
        assert all(contains(SQUARE, point) == first for _ in range(10))
