"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- graph construction (city file location, edge threshold, weighting)
- route caching
- logging

Configuration can be overridden via environment variables:
- CITYSEARCH_GRAPH_DATA_DIR=/path/to/data
- CITYSEARCH_GRAPH_EDGE_THRESHOLD_MILES=1500
- CITYSEARCH_GRAPH_WEIGHTING=settled_sum
- CITYSEARCH_CACHE_ENABLED=false
- CITYSEARCH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import PathWeighting

# Cities closer than this are connected when the graph is built.
DEFAULT_EDGE_THRESHOLD_MILES = 2000.0


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYSEARCH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYSEARCH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "cities.txt"
    edge_threshold_miles: float = Field(default=DEFAULT_EDGE_THRESHOLD_MILES, gt=0)
    weighting: PathWeighting = PathWeighting.EDGE_SUM

    @property
    def cities_path(self) -> Path:
        """Full path to the tab-separated cities file."""
        return self.data_dir / self.cities_file


class CacheConfig(BaseSettings):
    """Route cache configuration.

    Environment variables prefixed with CITYSEARCH_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYSEARCH_CACHE_")

    enabled: bool = True
    name: str = "routes"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYSEARCH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYSEARCH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.cities_path)
        print(config.cache.enabled)

    Environment variables prefixed with CITYSEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYSEARCH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
