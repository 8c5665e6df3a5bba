"""Estate domain entity."""

from dataclasses import dataclass

from .geo import Coordinate


@dataclass(frozen=True)
class EstateEntity:
    """Domain entity for a listed estate.

    Estates are never updated after they are inserted, which is what makes
    them safe to keep in the process-wide cache.

    Attributes:
        id: Store identifier
        name: Listing title
        description: Free-text description
        thumbnail: Thumbnail image path
        address: Postal address
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        rent: Monthly rent
        door_height: Entrance door height in cm
        door_width: Entrance door width in cm
        features: Comma-separated feature list
        popularity: Popularity score (higher is more popular)
    """

    id: int
    name: str
    description: str
    thumbnail: str
    address: str
    latitude: float
    longitude: float
    rent: int
    door_height: int
    door_width: int
    features: str
    popularity: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Listing order: most popular first, ties broken by ascending id."""
        return (-self.popularity, self.id)
