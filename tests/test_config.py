from __future__ import annotations

import pytest
from pydantic import ValidationError

from citysearch.config import GraphConfig, get_config, reset_config
from citysearch.domain.models import PathWeighting


def test_defaults():
    config = get_config()

    assert config.graph.edge_threshold_miles == 2000.0
    assert config.graph.weighting is PathWeighting.EDGE_SUM
    assert config.graph.cities_path.name == "cities.txt"
    assert config.cache.enabled is True
    assert config.observability.level == "WARNING"


def test_config_is_cached_until_reset():
    first = get_config()
    assert get_config() is first

    reset_config()
    assert get_config() is not first


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CITYSEARCH_GRAPH_EDGE_THRESHOLD_MILES", "1500")
    monkeypatch.setenv("CITYSEARCH_GRAPH_WEIGHTING", "settled_sum")
    monkeypatch.setenv("CITYSEARCH_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CITYSEARCH_CACHE_ENABLED", "false")
    monkeypatch.setenv("CITYSEARCH_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.graph.edge_threshold_miles == 1500.0
    assert config.graph.weighting is PathWeighting.SETTLED_SUM
    assert config.graph.cities_path == tmp_path / "cities.txt"
    assert config.cache.enabled is False
    assert config.observability.level == "DEBUG"


@pytest.mark.parametrize("value", [0.0, -1.0])
def test_threshold_must_be_positive(value):
    with pytest.raises(ValidationError):
        GraphConfig(edge_threshold_miles=value)
