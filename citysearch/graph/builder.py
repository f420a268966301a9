"""Incremental graph construction with a distance threshold.

Locations arrive one at a time. Each new location is connected to every
location already in the graph whose great-circle distance is strictly
below the threshold, so the edge set is discovered in insertion order
rather than by an all-pairs pass at the end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import DEFAULT_EDGE_THRESHOLD_MILES
from ..domain.errors import ConfigurationError
from .city_graph import CityGraph
from .geodistance import distance


@dataclass
class GraphBuilder:
    """Adds locations to a graph and wires them to their near neighbors.

    Attributes:
        graph: Graph being built (mutated in place)
        threshold_miles: Pairs closer than this get an edge
    """

    graph: CityGraph = field(default_factory=CityGraph)
    threshold_miles: float = DEFAULT_EDGE_THRESHOLD_MILES

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.threshold_miles <= 0:
            raise ConfigurationError(
                f"Edge threshold must be positive, got {self.threshold_miles}",
                setting_name="edge_threshold_miles",
                expected_type="float > 0",
            )

    def add_location(self, key: str, longitude: float, latitude: float) -> int:
        """Add a location and connect it to the known locations in range.

        Returns:
            Number of edges added for this location.
        """
        self.graph.add_node(key, longitude, latitude)
        here = self.graph.location(key).coordinate

        added = 0
        for other in list(self.graph.keys()):
            if other == key:
                continue
            miles = distance(here, self.graph.location(other).coordinate)
            if miles < self.threshold_miles:
                self.graph.add_edge(key, other, miles)
                added += 1

        self._logger.debug(
            "Location added",
            extra={"key": key, "edges_added": added},
        )
        return added

    def build(self) -> CityGraph:
        """Freeze and return the graph."""
        self.graph.freeze()
        self._logger.info(
            "Graph built",
            extra={"nodes": len(self.graph), "edges": self.graph.edge_count()},
        )
        return self.graph
