"""Geographic value types: coordinates, polygons and bounding boxes."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A point on the map.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
    """

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Polygon:
    """An ordered ring of vertices.

    Consecutive vertices define the edges, and the last vertex closes the
    ring back to the first. Vertex order is significant.

    Attributes:
        vertices: The ring vertices in drawing order
    """

    vertices: tuple[Coordinate, ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "Polygon":
        """Build a polygon from ``(latitude, longitude)`` pairs."""
        return cls(vertices=tuple(Coordinate(latitude=lat, longitude=lon) for lat, lon in pairs))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.vertices)

    @property
    def is_empty(self) -> bool:
        return not self.vertices


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle enclosing a polygon.

    ``top_left`` holds the minimum latitude and longitude, ``bottom_right``
    the maximum ones.
    """

    top_left: Coordinate
    bottom_right: Coordinate

    def encloses(self, point: Coordinate) -> bool:
        """Check whether a point lies inside the box, edges included."""
        return (
            self.top_left.latitude <= point.latitude <= self.bottom_right.latitude
            and self.top_left.longitude <= point.longitude <= self.bottom_right.longitude
        )
