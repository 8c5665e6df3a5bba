"""Point-in-polygon test.

Ray casting: a ray leaves the query point in the direction of increasing
latitude and every polygon edge it crosses flips the inside/outside state.
An edge is a candidate only when it straddles the point's longitude, using
a half-open comparison, so edges whose endpoints share a longitude are never
candidates and the crossing latitude is always well defined.

Points exactly on an edge or vertex are classified by those half-open
comparisons and always get the same answer for the same input.
"""

from estate_search.entities import Coordinate, Polygon

MIN_VERTICES = 3


def contains(polygon: Polygon, point: Coordinate) -> bool:
    """Check whether a point lies inside a polygon.

    Args:
        polygon: The polygon ring (closing edge is implicit)
        point: The query point

    Returns:
        True if the point is inside, False otherwise. Polygons with fewer
        than three vertices enclose nothing.
    """
    vertices = polygon.vertices
    if len(vertices) < MIN_VERTICES:
        return False

    lat, lon = point.latitude, point.longitude
    inside = False

    prev = vertices[-1]
    for cur in vertices:
        if (cur.longitude > lon) != (prev.longitude > lon):
            crossing_lat = cur.latitude + (prev.latitude - cur.latitude) * (lon - cur.longitude) / (
                prev.longitude - cur.longitude
            )
            if lat < crossing_lat:
                inside = not inside
        prev = cur

    return inside
