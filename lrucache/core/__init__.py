"""Core LRU cache types."""

from lrucache.core.cache import NOT_FOUND, LRUCache
from lrucache.core.entry import Entry

__all__ = [
    "LRUCache",
    "Entry",
    "NOT_FOUND",
]
