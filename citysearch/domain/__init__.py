"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CitySearchError,
    ConfigurationError,
    GraphError,
    GraphFrozenError,
    LocationNotFoundError,
)
from .models import Coordinate, Location, PathResult, PathWeighting

__all__ = [
    # Models
    "Coordinate",
    "Location",
    "PathResult",
    "PathWeighting",
    # Errors
    "CitySearchError",
    "ConfigurationError",
    "GraphError",
    "GraphFrozenError",
    "LocationNotFoundError",
]
