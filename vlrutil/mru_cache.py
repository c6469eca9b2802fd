"""A small most-recently-added cache with a bounded number of entries."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import Any

DEFAULT_CACHE_SIZE = 100


class MRUCache:
    """Keeps the most recently added values, evicting the oldest additions.

    Every call to :meth:`add` counts towards the size limit, including
    repeated additions of the same key. Lookups do not change the order.
    """

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE) -> None:
        self._keys: deque[Hashable] = deque()
        self._values: dict[Hashable, Any] = {}
        self._cache_size = self._validate_size(cache_size)

    @staticmethod
    def _validate_size(cache_size: int) -> int:
        if isinstance(cache_size, bool) or not isinstance(cache_size, int):
            raise TypeError(f"cache size must be an integer, not {type(cache_size).__name__}")
        if cache_size < 0:
            raise ValueError(f"cache size must not be negative, got {cache_size}")
        return cache_size

    @property
    def cache_size(self) -> int:
        return self._cache_size

    def _truncate(self) -> None:
        while len(self._keys) > self._cache_size:
            self._values.pop(self._keys.pop(), None)

    def set_cache_size(self, cache_size: int) -> None:
        """Change the size limit, evicting the oldest entries if needed."""
        self._cache_size = self._validate_size(cache_size)
        self._truncate()

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value for ``key``, or ``default`` if absent."""
        return self._values.get(key, default)

    def add(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key`` as the most recent addition."""
        self._keys.appendleft(key)
        self._values[key] = value
        self._truncate()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)