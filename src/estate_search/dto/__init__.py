"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CoordinateItem, NazotteSearchRequest, RequestDocumentRequest
from .responses import EstateItem, EstateListResponse, EstateSearchResponse, HealthCheckResponse

__all__ = [
    "CoordinateItem",
    "NazotteSearchRequest",
    "RequestDocumentRequest",
    "EstateItem",
    "EstateListResponse",
    "EstateSearchResponse",
    "HealthCheckResponse",
]
