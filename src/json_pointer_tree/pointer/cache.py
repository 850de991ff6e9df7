"""PointerCache: LRU cache of parsed pointer segments.

Pointer strings are parsed into immutable segment tuples, so a parsed result
can be shared safely between calls.  Each ``PointerCache`` instance keeps its
own ``LRUCache``; there is no class-level shared state.  Eviction is silent.

Example::

    from json_pointer_tree.pointer.cache import PointerCache

    cache = PointerCache(max_size=128)
    cache.segments("/users/0/name")   # parsed: ("users", "0", "name")
    cache.segments("/users/0/name")   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from json_pointer_tree.pointer.parser import parse_pointer

__all__ = ["PointerCache"]


class PointerCache:
    """LRU-backed memo for ``parse_pointer``.

    Args:
        max_size: Maximum number of pointer strings to remember.  0 disables
            caching: every lookup parses afresh.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._enabled = max_size > 0
        self._cache: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=max(max_size, 1))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize) if self._enabled else 0

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def segments(self, pointer: str | None) -> tuple[str, ...]:
        """Return the parsed segments of ``pointer``, parsing on a miss."""
        if not self._enabled or pointer is None:
            return parse_pointer(pointer)
        cached = self._cache.get(pointer)
        if cached is None:
            cached = parse_pointer(pointer)
            self._cache[pointer] = cached
        return cached

    def clear(self) -> None:
        self._cache.clear()
