"""Typed domain errors for City Search.

These error types make failures explicit so that each layer can decide
how to report them. The core never terminates the process; only the
command-line entry point turns an error into an exit code.

All errors inherit from CitySearchError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CitySearchError(Exception):
    """Base error for the city search domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LocationNotFoundError(CitySearchError):
    """A location key is not present in the graph.

    Raised when an edge or a path query names an unknown node.

    Attributes:
        location_key: The key that was not found
    """

    location_key: str = ""


@dataclass
class GraphError(CitySearchError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the city file if relevant
        line_number: 1-based line of the offending record, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class GraphFrozenError(GraphError):
    """The graph was mutated after construction finished."""


@dataclass
class ConfigurationError(CitySearchError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
