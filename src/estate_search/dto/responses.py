"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from estate_search.entities import EstateEntity


class EstateItem(BaseModel):
    """Public view of an estate. Popularity is never exposed."""

    id: int = Field(..., description="Estate identifier")
    thumbnail: str = Field(..., description="Thumbnail image path")
    name: str = Field(..., description="Listing title")
    description: str = Field(..., description="Free-text description")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    address: str = Field(..., description="Postal address")
    rent: int = Field(..., description="Monthly rent")
    door_height: int = Field(..., serialization_alias="doorHeight", description="Door height in cm")
    door_width: int = Field(..., serialization_alias="doorWidth", description="Door width in cm")
    features: str = Field(..., description="Comma-separated feature list")

    @classmethod
    def from_entity(cls, estate: EstateEntity) -> "EstateItem":
        return cls(
            id=estate.id,
            thumbnail=estate.thumbnail,
            name=estate.name,
            description=estate.description,
            latitude=estate.latitude,
            longitude=estate.longitude,
            address=estate.address,
            rent=estate.rent,
            door_height=estate.door_height,
            door_width=estate.door_width,
            features=estate.features,
        )


class EstateSearchResponse(BaseModel):
    """Response DTO for polygon search."""

    count: int = Field(..., description="Number of estates returned", ge=0)
    estates: list[EstateItem] = Field(
        default_factory=list,
        description="Matching estates, most popular first",
    )


class EstateListResponse(BaseModel):
    """Response DTO for plain estate listings."""

    estates: list[EstateItem] = Field(default_factory=list, description="Listed estates")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the estate store is reachable")
