"""
Fixed-capacity LRU cache built from a dict index and a doubly linked chain.
"""

from __future__ import annotations

import logging
from typing import Iterator

from lrucache.core.entry import Entry

LOGGER = logging.getLogger(__name__)

NOT_FOUND = -1


class LRUCache:
    """Count-bound LRU cache with O(1) ``get`` and ``put``.

    The chain runs from ``_head`` (least recently used) to ``_tail`` (most
    recently used). Not thread-safe: wrap every call in a single lock if the
    cache is shared between threads.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"LRUCache capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise ValueError(f"LRUCache capacity must be > 0, got {capacity}")
        self._capacity = capacity
        self._index: dict[int, Entry] = {}
        self._head: Entry | None = None
        self._tail: Entry | None = None
        LOGGER.debug("Created LRU cache with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    # Public API ----------------------------------------------------------
    def get(self, key: int) -> int | None:
        """Return the value for ``key`` and mark it most recently used."""
        entry = self._index.get(key)
        if entry is None:
            return None
        self._detach(entry)
        self._insert_most_recent(entry)
        return entry.value

    def get_or_sentinel(self, key: int, sentinel: int = NOT_FOUND) -> int:
        """Like :meth:`get`, but report a missing key as ``sentinel`` (``-1``)."""
        value = self.get(key)
        return sentinel if value is None else value

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key`` as the most recently used entry.

        Re-putting a key replaces its entry. Inserting a new key into a full
        cache evicts the least recently used entry first.
        """
        existing = self._index.get(key)
        if existing is not None:
            self._detach(existing)
        elif len(self._index) >= self._capacity:
            self._evict_least_recent()
        self._insert_most_recent(Entry(key, value))

    def peek(self, key: int) -> int | None:
        """Return the value for ``key`` without changing recency."""
        entry = self._index.get(key)
        return None if entry is None else entry.value

    def keys(self) -> list[int]:
        """Keys ordered from least to most recently used."""
        return [entry.key for entry in self._walk()]

    def items(self) -> list[tuple[int, int]]:
        return [(entry.key, entry.value) for entry in self._walk()]

    def clear(self) -> None:
        for entry in self._index.values():
            entry.unlink()
        self._index.clear()
        self._head = None
        self._tail = None

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self)}, keys={self.keys()})"

    # Chain primitives ----------------------------------------------------
    def _detach(self, entry: Entry) -> None:
        """Unlink ``entry`` from the chain and drop its key from the index."""
        match (entry.prev, entry.next):
            case (None, None):
                self._head = None
                self._tail = None
            case (None, nxt):
                self._head = nxt
                nxt.prev = None
            case (prev, None):
                self._tail = prev
                prev.next = None
            case (prev, nxt):
                prev.next = nxt
                nxt.prev = prev
        entry.unlink()
        del self._index[entry.key]

    def _insert_most_recent(self, entry: Entry) -> None:
        """Append ``entry`` at the most-recent end and index it by key."""
        tail = self._tail
        entry.next = None
        if tail is None:
            entry.prev = None
            self._head = entry
        else:
            tail.next = entry
            entry.prev = tail
        self._tail = entry
        self._index[entry.key] = entry

    def _evict_least_recent(self) -> Entry | None:
        head = self._head
        if head is None:
            return None
        self._detach(head)
        LOGGER.debug("Evicted key %s (capacity %d)", head.key, self._capacity)
        return head

    def _walk(self) -> Iterator[Entry]:
        node = self._head
        while node is not None:
            yield node
            node = node.next
