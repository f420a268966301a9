"""Tests for the path-result query cache and its backends."""

from __future__ import annotations

import pytest

from citysearch.adapters.cache import InMemoryCache, NullCache, RouteQueryCache
from citysearch.domain.models import PathResult


def _result(source: str, destination: str, weight: float = 1.0) -> PathResult:
    return PathResult(
        source=source,
        destination=destination,
        path=(source, destination),
        total_weight=weight,
    )


class TestRouteQueryCache:
    """Ordered-pair memoization of path results."""

    @pytest.fixture
    def cache(self):
        return RouteQueryCache(backend=InMemoryCache(name="test-routes"))

    def test_get_after_put_returns_same_result(self, cache):
        result = _result("A", "B")
        cache.put("A", "B", result)

        assert cache.get("A", "B") is result

    def test_reverse_pair_is_a_separate_entry(self, cache):
        cache.put("A", "B", _result("A", "B"))

        assert cache.get("B", "A") is None

        reverse = _result("B", "A", 2.0)
        cache.put("B", "A", reverse)

        assert cache.get("B", "A") is reverse
        assert cache.get("A", "B").total_weight == 1.0
        assert cache.size() == 2

    def test_empty_result_is_cached_too(self, cache):
        empty = PathResult.no_path("A", "Z")
        cache.put("A", "Z", empty)

        assert cache.get("A", "Z") is empty

    def test_get_or_compute_calls_compute_once(self, cache):
        calls = []

        def compute():
            calls.append(1)
            return _result("A", "B")

        first = cache.get_or_compute("A", "B", compute)
        second = cache.get_or_compute("A", "B", compute)

        assert first is second
        assert len(calls) == 1
        assert cache.stats()["hits"] == 1
        assert cache.stats()["misses"] == 1

    def test_default_backend_is_in_memory(self):
        cache = RouteQueryCache()
        cache.put("A", "B", _result("A", "B"))

        assert cache.size() == 1


class TestInMemoryCache:
    def test_miss_then_hit_statistics(self):
        cache = InMemoryCache(name="stats")

        assert cache.get(("A", "B")) is None
        cache.set(("A", "B"), "value")
        assert cache.get(("A", "B")) == "value"

        assert cache.stats() == {
            "size": 1,
            "hits": 1,
            "misses": 1,
            "hit_rate_percent": 50.0,
        }

    def test_falsy_values_are_cache_hits(self):
        cache = InMemoryCache(name="falsy")
        calls = []

        def compute():
            calls.append(1)
            return 0

        cache.get_or_compute("k", compute)
        cache.get_or_compute("k", compute)

        assert len(calls) == 1

    def test_clear_resets_entries_and_counters(self):
        cache = InMemoryCache(name="clear")
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")

        assert cache.clear() == 2
        assert cache.size() == 0
        assert cache.stats()["hits"] == 0

    def test_keys_in_insertion_order(self):
        cache = InMemoryCache(name="keys")
        cache.set(("B", "A"), 1)
        cache.set(("A", "B"), 2)

        assert cache.keys() == [("B", "A"), ("A", "B")]


class TestNullCache:
    def test_always_misses(self):
        cache = RouteQueryCache(backend=NullCache())
        cache.put("A", "B", _result("A", "B"))

        assert cache.get("A", "B") is None
        assert cache.size() == 0
        assert cache.clear() == 0

    def test_get_or_compute_always_computes(self):
        cache = NullCache()
        calls = []

        def compute():
            calls.append(1)
            return "value"

        cache.get_or_compute("k", compute)
        cache.get_or_compute("k", compute)

        assert len(calls) == 2
        assert cache.stats()["hits"] == 0
        assert cache.keys() == []
