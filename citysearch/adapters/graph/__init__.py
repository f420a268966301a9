"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CityFileRepository: Builds the graph from a tab-separated city file
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .tsv_repository import CityFileRepository, parse_city_line

__all__ = ["CityFileRepository", "DijkstraRouteSolver", "parse_city_line"]
