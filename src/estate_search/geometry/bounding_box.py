"""Bounding-box builder used as the cheap prefilter for polygon search."""

from estate_search.entities import BoundingBox, Coordinate, Polygon


def bounding_box(polygon: Polygon) -> BoundingBox:
    """Compute the axis-aligned rectangle enclosing a polygon.

    Single pass over the vertices with running min/max values seeded from
    the first vertex.

    Args:
        polygon: A polygon with at least one vertex

    Returns:
        BoundingBox whose top-left holds the minimum latitude/longitude and
        whose bottom-right holds the maximum ones

    Raises:
        ValueError: If the polygon has no vertices
    """
    if polygon.is_empty:
        raise ValueError("cannot compute the bounding box of an empty polygon")

    first = polygon.vertices[0]
    lat_min = lat_max = first.latitude
    lon_min = lon_max = first.longitude

    for vertex in polygon.vertices[1:]:
        if vertex.latitude < lat_min:
            lat_min = vertex.latitude
        elif vertex.latitude > lat_max:
            lat_max = vertex.latitude

        if vertex.longitude < lon_min:
            lon_min = vertex.longitude
        elif vertex.longitude > lon_max:
            lon_max = vertex.longitude

    return BoundingBox(
        top_left=Coordinate(latitude=lat_min, longitude=lon_min),
        bottom_right=Coordinate(latitude=lat_max, longitude=lon_max),
    )
