"""City file repository adapter.

Builds the city graph from a tab-separated text file::

    City            Longitude   Latitude
    Chicago\t-87.65\t41.85
    New York\t-74.00\t40.71

The first line is a header and is always skipped. Fields are separated
by a run of whitespace that starts with a tab, so city names may contain
spaces. The file must be UTF-8. Every record is fed to GraphBuilder as
it is read, which connects it to the cities already loaded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Location
from ...graph.builder import GraphBuilder
from ...graph.city_graph import CityGraph

_FIELD_SEPARATOR = re.compile(r"(?=\t)\s+")

CityRecord = Tuple[str, float, float]


def parse_city_line(line: str) -> Optional[CityRecord]:
    """Split one record into ``(name, longitude, latitude)``.

    Returns None for blank lines. Columns after the third are ignored.

    Raises:
        ValueError: If the line has fewer than three fields or a
            coordinate is not a number.
    """
    stripped = line.rstrip("\r\n")
    if not stripped.strip():
        return None

    fields = [part.strip() for part in _FIELD_SEPARATOR.split(stripped)]
    fields = [part for part in fields if part]
    if len(fields) < 3:
        raise ValueError(f"expected name, longitude and latitude, got {fields!r}")

    return fields[0], float(fields[1]), float(fields[2])


@dataclass
class CityFileRepository:
    """Graph repository that builds the graph from a city file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (file location, edge threshold)
        path: Explicit file path, overriding ``config.cities_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[CityGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def cities_path(self) -> Path:
        return self.path if self.path is not None else self.config.cities_path

    def load(self) -> CityGraph:
        """Build the city graph from the file.

        Returns:
            The frozen graph. Later calls return the same instance.

        Raises:
            GraphError: If the file cannot be read or a record is malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "cities_path": str(self.cities_path),
                "threshold_miles": self.config.edge_threshold_miles,
            },
        )

        builder = GraphBuilder(threshold_miles=self.config.edge_threshold_miles)
        try:
            for line_number, record in self._read_records():
                name, longitude, latitude = record
                try:
                    builder.add_location(name, longitude, latitude)
                except ValueError as e:
                    raise GraphError(
                        f"Invalid coordinates for {name!r}",
                        file_path=str(self.cities_path),
                        line_number=line_number,
                        cause=e,
                    )
        except OSError as e:
            raise GraphError(
                f"Failed to read city file {self.cities_path}",
                file_path=str(self.cities_path),
                cause=e,
            )

        self._graph = builder.build()
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(self._graph), "edges": self._graph.edge_count()},
        )
        return self._graph

    def _read_records(self) -> Iterator[Tuple[int, CityRecord]]:
        with self.cities_path.open("rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                    if line_number == 1:
                        continue  # header
                    record = parse_city_line(line)
                except ValueError as e:
                    raise GraphError(
                        f"Malformed record on line {line_number}",
                        file_path=str(self.cities_path),
                        line_number=line_number,
                        cause=e,
                    )
                if record is not None:
                    yield line_number, record

    def get_location(self, key: str) -> Optional[Location]:
        """Get location details by key.

        Returns:
            The location, or None if not found.
        """
        graph = self.load()
        if key not in graph:
            return None
        return graph.location(key)

    def list_locations(self) -> Sequence[Location]:
        graph = self.load()
        return [graph.location(key) for key in graph]

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load() rereads the file."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
