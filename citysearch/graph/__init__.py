"""Graph-related modules for representing the city network.

This subpackage contains the in-memory graph, the great-circle distance
function used to weight edges, the threshold-based builder, and the
Dijkstra path engine that runs on top of the graph.
"""

from .builder import GraphBuilder
from .city_graph import CityGraph
from .dijkstra import ShortestPathTree, shortest_path, shortest_path_tree
from .geodistance import distance

__all__ = [
    "CityGraph",
    "GraphBuilder",
    "ShortestPathTree",
    "distance",
    "shortest_path",
    "shortest_path_tree",
]
