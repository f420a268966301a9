"""Immutable domain models for City Search.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the values exchanged between the graph,
the path engine, the cache and the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PathWeighting(str, Enum):
    """How the total weight of a path result is reported.

    EDGE_SUM is the sum of the edge weights along the returned path.
    SETTLED_SUM adds up the settled distance of every node on the path,
    each truncated to whole miles before it is added.
    """

    EDGE_SUM = "edge_sum"
    SETTLED_SUM = "settled_sum"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Geographic coordinates in degrees."""

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Location:
    """A named point in the graph.

    Attributes:
        key: Unique location identifier (e.g., 'Chicago')
        coordinate: Position of the location
    """

    key: str
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        source: Key the query started from
        destination: Key the query ended at
        path: Ordered keys from source to destination, inclusive.
            Empty when no path exists.
        total_weight: Reported length of the path in miles
            (``inf`` when the path is empty)
    """

    source: str
    destination: str
    path: tuple[str, ...]
    total_weight: float

    @classmethod
    def no_path(cls, source: str, destination: str) -> PathResult:
        """Build the empty result used for unreachable destinations."""
        return cls(
            source=source,
            destination=destination,
            path=(),
            total_weight=float("inf"),
        )

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the path."""
        return len(self.path)
