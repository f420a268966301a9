"""Shortest-path computation using Dijkstra's algorithm.

The engine runs a single-source relaxation over any mapping of
``key -> [(neighbor, weight), ...]`` (a CityGraph or a plain dict) and
returns the path to the requested destination together with its total
weight. All traversal state (tentative distances, predecessors, settled
set) lives in a ShortestPathTree built fresh for each query; nothing is
written back to the graph.

Weights must be non-negative. Negative weights are not detected.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from ..domain.errors import LocationNotFoundError
from ..domain.models import PathResult, PathWeighting
from ..ports.graph import Graph


@dataclass
class ShortestPathTree:
    """Per-query result of a full single-source Dijkstra run.

    Attributes:
        source: Key the tree is rooted at
        distances: Settled distance of every reachable key
        previous: Predecessor of every reachable key except the source
    """

    source: str
    distances: Dict[str, float] = field(default_factory=dict)
    previous: Dict[str, str] = field(default_factory=dict)
    settled: Set[str] = field(default_factory=set)

    def path_to(self, destination: str, max_steps: int) -> List[str]:
        """Follow predecessor links back from ``destination``.

        Returns an empty list when the chain does not reach the source
        within ``max_steps`` links.
        """
        path = [destination]
        current = destination
        while current != self.source:
            parent = self.previous.get(current)
            if parent is None or len(path) > max_steps:
                return []
            path.append(parent)
            current = parent

        path.reverse()
        return path


def shortest_path_tree(graph: Graph, source: str) -> ShortestPathTree:
    """Settle every node reachable from ``source``.

    The frontier is a binary heap of ``(tentative_distance, key)``
    entries. A node may be pushed several times; stale entries are
    skipped when popped. Ties are broken by heap order.
    """
    if source not in graph:
        raise LocationNotFoundError(
            f"Source location not in graph: {source}",
            location_key=source,
        )

    tree = ShortestPathTree(source=source)
    distances = tree.distances
    distances[source] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, source)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in tree.settled:
            continue

        tree.settled.add(u)

        for v, weight in graph.get(u, ()):
            if v in tree.settled:
                continue
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                tree.previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return tree


def shortest_path(
    graph: Graph,
    source: str,
    destination: str,
    weighting: PathWeighting = PathWeighting.EDGE_SUM,
) -> PathResult:
    """Compute the least-weight path between two locations.

    Parameters
    ----------
    graph:
        Mapping of location key to its adjacency list.
    source:
        Key of the starting location.
    destination:
        Key of the target location.
    weighting:
        How ``total_weight`` is reported. ``EDGE_SUM`` gives the sum of
        edge weights along the path; ``SETTLED_SUM`` adds the settled
        distance of every node on the path, each truncated to whole
        miles first.

    Returns
    -------
    PathResult
        The path from ``source`` to ``destination`` (inclusive). When
        the destination is unreachable the path is empty and the total
        weight is ``inf``.

    Raises
    ------
    LocationNotFoundError
        If ``source`` or ``destination`` is not a key of ``graph``.
    """
    if destination not in graph:
        raise LocationNotFoundError(
            f"Destination location not in graph: {destination}",
            location_key=destination,
        )

    tree = shortest_path_tree(graph, source)
    path = tree.path_to(destination, max_steps=len(graph))
    if not path:
        return PathResult.no_path(source, destination)

    if weighting is PathWeighting.SETTLED_SUM:
        total = float(sum(math.floor(tree.distances[key]) for key in path))
    else:
        total = tree.distances[destination]

    return PathResult(
        source=source,
        destination=destination,
        path=tuple(path),
        total_weight=total,
    )
