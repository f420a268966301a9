"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving the adapters and the search session
for one city file.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. One container per session - there is no process-wide default
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default(cities_path=Path("cities.txt"))
        service = container.resolve(CitySearchService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: FakeRepository())
        repository = container.resolve(GraphRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons so the next resolve builds fresh ones."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        cities_path: Optional[Path] = None,
    ) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.
            cities_path: City file to load, overriding the configured one.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache, NullCache, RouteQueryCache
        from .adapters.graph import CityFileRepository, DijkstraRouteSolver
        from .ports.cache import CachePort
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import CitySearchService

        config = config or get_config()
        container = cls(config=config)

        # Cache
        def create_cache() -> CachePort[Any, Any]:
            if config.cache.enabled:
                return InMemoryCache(name=config.cache.name)
            return NullCache(name=config.cache.name)

        container.register(CachePort, create_cache)
        container.register(
            RouteQueryCache,
            lambda: RouteQueryCache(backend=container.resolve(CachePort)),
        )

        # Graph
        container.register(
            GraphRepositoryPort,
            lambda: CityFileRepository(config=config.graph, path=cities_path),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(weighting=config.graph.weighting),
        )

        # Main service
        def create_city_search() -> CitySearchService:
            return CitySearchService(
                graph=container.resolve(GraphRepositoryPort).load(),
                route_solver=container.resolve(RouteSolverPort),
                route_cache=container.resolve(RouteQueryCache),
            )

        container.register(CitySearchService, create_city_search)

        return container
