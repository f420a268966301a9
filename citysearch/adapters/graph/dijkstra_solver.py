"""Dijkstra Route Solver adapter.

This adapter wraps the path engine in graph/dijkstra.py and adds:
- Configurable total-weight reporting
- Input validation with typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import PathResult, PathWeighting
from ...graph.dijkstra import shortest_path
from ...ports.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        weighting: How the total weight of a path is reported
    """

    weighting: PathWeighting = PathWeighting.EDGE_SUM

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            PathResult with the path and its total weight, or an empty
            result if the destination is unreachable.

        Raises:
            LocationNotFoundError: If source or destination not in graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        result = shortest_path(graph, source, destination, self.weighting)

        if result.is_empty:
            self._logger.info(
                "No route found",
                extra={"source": source, "destination": destination},
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "stops": result.num_stops,
                    "total_miles": result.total_weight,
                },
            )
        return result
