"""Error taxonomy shared by services, repositories and handlers.

Handlers translate these into HTTP status codes:

- InvalidInputError -> 400
- NotFoundError -> 404
- StorageError -> 500
"""


class EstateSearchError(Exception):
    """Base class for all estate search errors."""


class InvalidInputError(EstateSearchError):
    """Request data was rejected before any store access."""


class NotFoundError(EstateSearchError):
    """The requested estate does not exist in the store."""

    def __init__(self, estate_id: int) -> None:
        super().__init__(f"estate {estate_id} not found")
        self.estate_id = estate_id


class StorageError(EstateSearchError):
    """The backing store was unavailable or failed unexpectedly."""
