"""City search service - Query session orchestrator.

A CitySearchService is one query session: it owns a built graph, a
route solver and a route cache. Sessions are explicit objects, so
several independent graphs can be queried in the same process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..adapters.cache import RouteQueryCache
from ..adapters.graph import DijkstraRouteSolver
from ..config import AppConfig
from ..domain.errors import LocationNotFoundError
from ..domain.models import PathResult
from ..graph.city_graph import CityGraph
from ..ports.graph import RouteSolverPort
from ..rendering import format_path


@dataclass
class CitySearchService:
    """Answers shortest-path queries over one graph, with caching.

    Cache hits return the result computed for the same ordered
    ``(source, destination)`` pair earlier in the session. Misses are
    delegated to the route solver and stored.

    Attributes:
        graph: The built city graph
        route_solver: Computes shortest paths
        route_cache: Memoizes results per ordered pair
    """

    graph: CityGraph
    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)
    route_cache: RouteQueryCache = field(default_factory=RouteQueryCache)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[AppConfig] = None,
    ) -> CitySearchService:
        """Build a session from a tab-separated city file.

        Raises:
            GraphError: If the file cannot be loaded.
        """
        from ..container import Container

        container = Container.create_default(config, cities_path=Path(path))
        return container.resolve(cls)

    def contains(self, key: str) -> bool:
        return self.graph.contains(key)

    def find_path(self, source: str, destination: str) -> PathResult:
        """Return the shortest path between two locations.

        Raises:
            LocationNotFoundError: If either key is not in the graph.
        """
        for key in (source, destination):
            if not self.graph.contains(key):
                raise LocationNotFoundError(
                    f"{key} is not part of the graph",
                    location_key=key,
                )

        cached = self.route_cache.get(source, destination)
        if cached is not None:
            self._logger.debug(
                "Route served from cache",
                extra={"source": source, "destination": destination},
            )
            return cached

        result = self.route_solver.solve(self.graph, source, destination)
        self.route_cache.put(source, destination, result)
        return result

    def describe_path(self, source: str, destination: str) -> str:
        """Return the rendered description of the shortest path."""
        return format_path(self.find_path(source, destination))

    def cache_stats(self) -> Dict[str, Any]:
        return self.route_cache.stats()
