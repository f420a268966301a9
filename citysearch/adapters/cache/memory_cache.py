"""Thread-safe in-memory cache implementation.

Entries are kept for the lifetime of the cache: there is no TTL and no
eviction, which suits a store bounded by the rate of interactive
queries. Hit and miss counts are tracked for reporting.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

_MISSING = object()


@dataclass
class InMemoryCache(Generic[K, T]):
    """Thread-safe in-memory cache.

    This cache implements the CachePort protocol and can be injected
    into services that need caching functionality.

    Attributes:
        name: Cache name for logging

    Example:
        cache = InMemoryCache[tuple[str, str], PathResult](name="routes")
        result = cache.get_or_compute(("A", "B"), lambda: solve("A", "B"))
    """

    name: str = "cache"

    _store: Dict[K, T] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: K) -> Optional[T]:
        """Get a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if not found.
        """
        with self._lock:
            value = self._store.get(key, _MISSING)
            if value is _MISSING:
                self._misses += 1
                return None

            self._hits += 1
            return value  # type: ignore[return-value]

    def set(self, key: K, value: T) -> None:
        """Set a value in the cache, replacing any previous entry."""
        with self._lock:
            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: K, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        with self._lock:
            if key in self._store:
                self._hits += 1
                self._logger.debug("Cache hit", extra={"key": key})
                return self._store[key]
            self._misses += 1

        # Compute value (outside lock to avoid blocking)
        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()

        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        """Return the number of entries in the cache."""
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with hit/miss counts and size.
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }

    def keys(self) -> List[K]:
        """Return all keys in the cache, in insertion order."""
        with self._lock:
            return list(self._store.keys())
