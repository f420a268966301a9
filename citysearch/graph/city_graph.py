"""In-memory undirected, weighted graph of named locations.

The graph maps a unique location key to a node holding its coordinates
and an ordered adjacency list of ``(neighbor_key, weight)`` pairs.
Every edge is stored twice, once on each endpoint.

CityGraph is also a read-only ``Mapping`` from key to adjacency, which
is the shape the path engine consumes (see ``ports.graph.Graph``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from ..domain.errors import GraphFrozenError, LocationNotFoundError
from ..domain.models import Coordinate, Location


@dataclass
class _Node:
    coordinate: Coordinate
    adjacent: List[Tuple[str, float]] = field(default_factory=list)


class CityGraph(Mapping):
    """Undirected graph keyed by location name.

    Example:
        graph = CityGraph()
        graph.add_node("X", 0.0, 0.0)
        graph.add_node("Y", 0.0, 1.0)
        graph.add_edge("X", "Y", 5.0)
        graph.neighbors("X")  # (("Y", 5.0),)
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, _Node] = {}
        self._frozen = False
        self._logger = logging.getLogger(__name__)

    # -- construction ---------------------------------------------------

    def add_node(self, key: str, longitude: float, latitude: float) -> None:
        """Insert a location, replacing any node already stored under ``key``.

        Replacing a node drops its edges on both sides: the old adjacency
        list and every neighbor entry pointing back at ``key``.
        """
        self._check_mutable()
        coordinate = Coordinate(longitude=longitude, latitude=latitude)
        previous = self._nodes.get(key)
        if previous is not None:
            self._detach(key, previous)
            self._logger.warning(
                "Location replaced, previous edges dropped",
                extra={"key": key, "dropped_edges": len(previous.adjacent)},
            )
        self._nodes[key] = _Node(coordinate=coordinate)

    def add_edge(self, key_a: str, key_b: str, weight: float) -> None:
        """Connect two known locations in both directions.

        Adding the same pair twice stores parallel entries.

        Raises:
            LocationNotFoundError: If either key is not in the graph.
            ValueError: If ``weight`` is negative.
        """
        self._check_mutable()
        for key in (key_a, key_b):
            if key not in self._nodes:
                raise LocationNotFoundError(
                    f"Location not in graph: {key}",
                    location_key=key,
                )
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")

        self._nodes[key_a].adjacent.append((key_b, weight))
        self._nodes[key_b].adjacent.append((key_a, weight))

    def _detach(self, key: str, node: _Node) -> None:
        for neighbor in {other for other, _ in node.adjacent}:
            adjacent = self._nodes[neighbor].adjacent
            adjacent[:] = [entry for entry in adjacent if entry[0] != key]

    def freeze(self) -> None:
        """Forbid further mutation; later add_node/add_edge calls raise."""
        self._frozen = True
        self._logger.debug(
            "Graph frozen",
            extra={"nodes": len(self._nodes), "edges": self.edge_count()},
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; construction has finished")

    # -- queries --------------------------------------------------------

    def contains(self, key: str) -> bool:
        return key in self._nodes

    def location(self, key: str) -> Location:
        """Return the location stored under ``key``.

        Raises:
            LocationNotFoundError: If the key is not in the graph.
        """
        node = self._nodes.get(key)
        if node is None:
            raise LocationNotFoundError(
                f"Location not in graph: {key}",
                location_key=key,
            )
        return Location(key=key, coordinate=node.coordinate)

    def neighbors(self, key: str) -> Tuple[Tuple[str, float], ...]:
        """Return a snapshot of the adjacency list of ``key``."""
        return self[key]

    def edge_count(self) -> int:
        """Number of undirected edges, parallel entries included."""
        return sum(len(node.adjacent) for node in self._nodes.values()) // 2

    # -- Mapping protocol -----------------------------------------------

    def __getitem__(self, key: str) -> Tuple[Tuple[str, float], ...]:
        return tuple(self._nodes[key].adjacent)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __repr__(self) -> str:
        return f"CityGraph(nodes={len(self._nodes)}, edges={self.edge_count()})"
