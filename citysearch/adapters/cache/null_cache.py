"""Null cache implementation.

This cache always misses. It is selected when caching is disabled in
the configuration, and in tests that must not depend on cached state
from earlier queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


@dataclass
class NullCache(Generic[K, T]):
    """No-op cache - always misses.

    Implements the CachePort protocol but never stores anything. Every
    get() returns None and every get_or_compute() calls the compute
    function.
    """

    name: str = "null"

    def get(self, key: K) -> Optional[T]:
        """Always returns None (cache miss)."""
        return None

    def set(self, key: K, value: T) -> None:
        """Does nothing."""
        pass

    def get_or_compute(self, key: K, compute_fn: Callable[[], T]) -> T:
        """Always calls compute_fn.

        Returns:
            The computed value (never cached).
        """
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {
            "size": 0,
            "hits": 0,
            "misses": 0,
            "hit_rate_percent": 0,
        }

    def keys(self) -> List[K]:
        return []
