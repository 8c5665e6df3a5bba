"""Utility modules for estate search."""

from .rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
