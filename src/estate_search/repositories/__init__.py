"""Repository layer for data access.

This layer hides the store backend behind the EstateStore protocol. The
repositories are protocol-based (structural typing), not inheritance-based.
"""

from estate_search.protocols import EstateStore

from .redis_repository import RedisEstateRepository

__all__ = [
    "EstateStore",
    "RedisEstateRepository",
]
