"""Query cache for path results.

Results are keyed by the literal ``(source, destination)`` pair.
``(A, B)`` and ``(B, A)`` are separate entries even though the graph is
undirected, so a reversed query is a cache miss.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from ...domain.models import PathResult
from ...ports.cache import CachePort
from .memory_cache import InMemoryCache

RouteKey = Tuple[str, str]


@dataclass
class RouteQueryCache:
    """Memoizes path results per ordered (source, destination) pair.

    Attributes:
        backend: Underlying cache store (InMemoryCache or NullCache)
    """

    backend: CachePort[RouteKey, PathResult] = field(
        default_factory=lambda: InMemoryCache(name="routes")
    )

    def get(self, source: str, destination: str) -> Optional[PathResult]:
        return self.backend.get((source, destination))

    def put(self, source: str, destination: str, result: PathResult) -> None:
        self.backend.set((source, destination), result)

    def get_or_compute(
        self,
        source: str,
        destination: str,
        compute_fn: Callable[[], PathResult],
    ) -> PathResult:
        return self.backend.get_or_compute((source, destination), compute_fn)

    def size(self) -> int:
        return self.backend.size()

    def stats(self) -> Dict[str, Any]:
        return self.backend.stats()

    def clear(self) -> int:
        return self.backend.clear()
