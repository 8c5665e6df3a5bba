"""Search result domain entity."""

from dataclasses import dataclass

from .estate import EstateEntity


@dataclass(frozen=True)
class SearchResultEntity:
    """Capped, ordered result of a polygon search.

    Attributes:
        count: Number of estates returned (always ``len(estates)``)
        estates: Matching estates in listing order
    """

    count: int
    estates: tuple[EstateEntity, ...]

    @classmethod
    def of(cls, estates: list[EstateEntity]) -> "SearchResultEntity":
        return cls(count=len(estates), estates=tuple(estates))
