"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe in-memory cache without expiry
- NullCache: No-op cache (always misses)
- RouteQueryCache: Path-result cache keyed by (source, destination)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache
from .route_cache import RouteKey, RouteQueryCache

__all__ = ["InMemoryCache", "NullCache", "RouteKey", "RouteQueryCache"]
