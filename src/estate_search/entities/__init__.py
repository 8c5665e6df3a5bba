"""Domain entities for internal representation.

These are pure frozen dataclasses used internally by services, geometry
and repositories. They are NOT used for API contracts - use DTOs from the
dto package for that.
"""

from .estate import EstateEntity
from .geo import BoundingBox, Coordinate, Polygon
from .search_result import SearchResultEntity

__all__ = ["BoundingBox", "Coordinate", "EstateEntity", "Polygon", "SearchResultEntity"]
