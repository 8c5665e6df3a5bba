"""Pure geometry used by polygon search.

Everything here is stateless and safe to call from any thread.
"""

from .bounding_box import bounding_box
from .containment import contains

__all__ = ["bounding_box", "contains"]
