"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the city network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Location, PathResult
    from ..graph.city_graph import CityGraph

# Maps location key -> list of (neighbor_key, distance_miles)
Graph = Mapping[str, Sequence[Tuple[str, float]]]


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/tsv_repository.py

    The repository is responsible for building and caching the city
    graph from persistent storage.
    """

    def load(self) -> CityGraph:
        """Load the city graph.

        Returns:
            The fully built, frozen graph.
        """
        ...

    def get_location(self, key: str) -> Optional[Location]:
        """Get location details by key.

        Args:
            key: The location key to look up (e.g., 'Chicago').

        Returns:
            The location, or None if not found.
        """
        ...

    def list_locations(self) -> Sequence[Location]:
        """List all locations in the graph."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes least-weight paths through the city graph.
    """

    def solve(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> PathResult:
        """Find the shortest path between two locations.

        Args:
            graph: The city graph.
            source: Starting location key.
            destination: Target location key.

        Returns:
            PathResult with the path and its total weight. The path is
            empty when the destination is unreachable.
        """
        ...
