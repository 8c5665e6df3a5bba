"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .estate_handler import EstateHandler, parse_estate_id

__all__ = [
    "EstateHandler",
    "parse_estate_id",
]
