"""Top-level package for the City Search project.

City Search builds an undirected graph of cities, connecting every pair
closer than a distance threshold, and answers repeated shortest-path
queries between named cities with a per-session cache.
"""

from .domain import (
    CitySearchError,
    Coordinate,
    GraphError,
    Location,
    LocationNotFoundError,
    PathResult,
    PathWeighting,
)
from .graph import CityGraph, GraphBuilder, distance, shortest_path
from .services import CitySearchService

__all__ = [
    "CityGraph",
    "CitySearchError",
    "CitySearchService",
    "Coordinate",
    "GraphBuilder",
    "GraphError",
    "Location",
    "LocationNotFoundError",
    "PathResult",
    "PathWeighting",
    "distance",
    "shortest_path",
]
