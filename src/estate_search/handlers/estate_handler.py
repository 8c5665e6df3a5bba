"""HTTP handlers for estate operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from estate_search.dto import (
    EstateItem,
    EstateListResponse,
    EstateSearchResponse,
    HealthCheckResponse,
    NazotteSearchRequest,
    RequestDocumentRequest,
)
from estate_search.errors import InvalidInputError, NotFoundError, StorageError
from estate_search.services import EstateService, NazotteService

logger = logging.getLogger(__name__)

_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def parse_estate_id(raw: str) -> int:
    """Parse a path parameter into a signed 64-bit estate id.

    Raises:
        InvalidInputError: If the value is not an integer or out of range
    """
    try:
        estate_id = int(raw)
    except ValueError as e:
        raise InvalidInputError(f"estate id must be an integer, got {raw!r}") from e

    if not _ID_MIN <= estate_id <= _ID_MAX:
        raise InvalidInputError(f"estate id out of range: {raw}")
    return estate_id


@contextmanager
def _http_errors(operation: str) -> Iterator[None]:
    """Translate service errors into HTTP errors for one operation."""
    try:
        yield
    except InvalidInputError as e:
        logger.info("%s rejected: %s", operation, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        logger.info("%s: %s", operation, e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except StorageError as e:
        logger.error("%s failed: %s", operation, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {operation}",
        ) from e


class EstateHandler:
    """HTTP handlers for estate operations.

    This handler delegates business logic to the services and handles
    HTTP-specific concerns like:
    - Parsing path parameters
    - Converting entities to DTOs
    - Mapping errors to status codes

    Methods are synchronous so FastAPI runs them in its thread pool; the
    services they call are thread-safe.

    Example:
        ```python
        handler = EstateHandler(estate_service=estates, nazotte_service=nazotte)

        @app.post("/api/estate/nazotte", response_model=EstateSearchResponse)
        def search_nazotte(request: NazotteSearchRequest):
            return handler.search_nazotte(request)
        ```
    """

    def __init__(self, estate_service: EstateService, nazotte_service: NazotteService) -> None:
        """Initialize the estate handler.

        Args:
            estate_service: Lookup service with the shared cache (required).
            nazotte_service: Polygon search service (required).
        """
        self._estates = estate_service
        self._nazotte = nazotte_service

    def search_nazotte(self, request: NazotteSearchRequest) -> EstateSearchResponse:
        """Handle POST /api/estate/nazotte requests.

        Args:
            request: The polygon search request DTO

        Returns:
            EstateSearchResponse with the capped matches

        Raises:
            HTTPException: 400 for an empty polygon, 500 on store failure
        """
        with _http_errors("search estates in polygon"):
            result = self._nazotte.search_within_polygon(request.to_polygon())

        return EstateSearchResponse(
            count=result.count,
            estates=[EstateItem.from_entity(estate) for estate in result.estates],
        )

    def get_estate_detail(self, raw_id: str) -> EstateItem:
        """Handle GET /api/estate/{estate_id} requests.

        Args:
            raw_id: The estate id path parameter

        Returns:
            EstateItem for the requested estate

        Raises:
            HTTPException: 400 for a bad id, 404 if missing, 500 on store failure
        """
        with _http_errors("get estate detail"):
            estate = self._estates.get_estate(parse_estate_id(raw_id))

        return EstateItem.from_entity(estate)

    def request_document(self, raw_id: str, request: RequestDocumentRequest) -> None:
        """Handle POST /api/estate/req_doc/{estate_id} requests.

        Only checks that the estate exists; document delivery happens
        elsewhere.

        Args:
            raw_id: The estate id path parameter
            request: The document request DTO

        Raises:
            HTTPException: 400 for a bad id, 404 if missing, 500 on store failure
        """
        with _http_errors("request estate document"):
            estate = self._estates.get_estate(parse_estate_id(raw_id))

        logger.info("Document requested for estate %d", estate.id)

    def list_low_priced(self) -> EstateListResponse:
        """Handle GET /api/estate/low_priced requests.

        Returns:
            EstateListResponse with the cheapest estates first

        Raises:
            HTTPException: 500 on store failure
        """
        with _http_errors("list low priced estates"):
            estates = self._estates.list_low_priced()

        return EstateListResponse(estates=[EstateItem.from_entity(estate) for estate in estates])

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse when the store is reachable

        Raises:
            HTTPException: 503 if the store is unreachable
        """
        if not self._estates.is_healthy():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Estate store unreachable",
            )

        return HealthCheckResponse(status="healthy", store_healthy=True)
