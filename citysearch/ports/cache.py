"""Cache port - Injectable caching abstraction.

This protocol defines the contract for the session's query cache, so
that caching can be swapped out or disabled without touching the
service that uses it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Optional, Protocol, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class CachePort(Protocol[K, T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Caching disabled / tests

    Entries are never expired or evicted; the cache lives as long as the
    session that owns it.
    """

    def get(self, key: K) -> Optional[T]:
        """Get a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if not found.
        """
        ...

    def set(self, key: K, value: T) -> None:
        """Set a value in the cache.

        Args:
            key: The cache key.
            value: The value to cache.
        """
        ...

    def get_or_compute(self, key: K, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        This is the primary method for cache-aside pattern:
        1. Check if key exists in cache
        2. If yes, return cached value
        3. If no, call compute_fn, cache result, return result

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        ...
