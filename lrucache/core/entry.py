"""
Cache entry: one key/value pair and its place in the recency chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Entry:
    """Linked node held by the cache index.

    ``prev`` points toward the least-recent end of the chain, ``next`` toward
    the most-recent end. The index owns the entry; the links only relate it
    to its neighbours.
    """

    key: int
    value: int
    prev: Entry | None = field(default=None, repr=False)
    next: Entry | None = field(default=None, repr=False)

    def unlink(self) -> None:
        self.prev = None
        self.next = None
