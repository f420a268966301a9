from __future__ import annotations

import os
from pathlib import Path

import pytest

from citysearch.config import reset_config
from citysearch.graph import CityGraph

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from CITYSEARCH_* variables and cached config."""
    for name in list(os.environ):
        if name.startswith("CITYSEARCH_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def triangle() -> CityGraph:
    """X-Y (5) and Y-Z (3) beat the direct X-Z edge (20)."""
    graph = CityGraph()
    graph.add_node("X", 0.0, 0.0)
    graph.add_node("Y", 0.0, 1.0)
    graph.add_node("Z", 0.0, 2.0)
    graph.add_edge("X", "Y", 5.0)
    graph.add_edge("Y", "Z", 3.0)
    graph.add_edge("X", "Z", 20.0)
    return graph


@pytest.fixture
def cities_file(tmp_path) -> Path:
    path = tmp_path / "cities.txt"
    path.write_text(
        "City\tLongitude\tLatitude\n"
        "Chicago\t-87.63\t41.88\n"
        "New York\t-74.01\t40.71\n"
        "Denver\t-104.99\t39.74\n"
        "Honolulu\t-157.86\t21.31\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_cities_file() -> Path:
    """The bundled US cities file."""
    return DATA_DIR / "cities.txt"
