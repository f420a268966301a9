"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and the
adapters that load graphs, solve routes and cache results. They enable
dependency injection and make the system testable.
"""

from .cache import CachePort
from .graph import Graph, GraphRepositoryPort, RouteSolverPort

__all__ = [
    # Graph
    "Graph",
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Cache
    "CachePort",
]
