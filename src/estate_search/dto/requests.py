"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from estate_search.entities import Coordinate, Polygon


class CoordinateItem(BaseModel):
    """A single polygon vertex."""

    latitude: float = Field(..., description="Latitude in decimal degrees", allow_inf_nan=False)
    longitude: float = Field(..., description="Longitude in decimal degrees", allow_inf_nan=False)


class NazotteSearchRequest(BaseModel):
    """Request DTO for polygon search.

    The handler converts this to a Polygon entity. An empty coordinate list
    is accepted here and rejected by the search service.
    """

    coordinates: list[CoordinateItem] = Field(
        ...,
        description="Polygon vertices in drawing order (the ring closes implicitly)",
    )

    def to_polygon(self) -> Polygon:
        return Polygon(
            vertices=tuple(
                Coordinate(latitude=item.latitude, longitude=item.longitude)
                for item in self.coordinates
            )
        )


class RequestDocumentRequest(BaseModel):
    """Request DTO for asking documents about an estate."""

    email: str = Field(..., description="Where to send the documents")
