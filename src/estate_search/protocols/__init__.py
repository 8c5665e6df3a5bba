"""Protocol interfaces for swappable implementations.

Protocols use structural typing, which enables:
- Swapping the store backend without touching the services
- Unit testing with in-memory implementations
"""

from .estate_store import EstateStore

__all__ = [
    "EstateStore",
]
