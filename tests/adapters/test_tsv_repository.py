"""Tests for the tab-separated city file repository."""

from __future__ import annotations

import pytest

from citysearch.adapters.graph import CityFileRepository, parse_city_line
from citysearch.config import GraphConfig
from citysearch.domain.errors import GraphError


class TestParseCityLine:
    def test_simple_record(self):
        assert parse_city_line("Chicago\t-87.63\t41.88\n") == ("Chicago", -87.63, 41.88)

    def test_name_may_contain_spaces(self):
        assert parse_city_line("New York\t-74.01\t40.71") == ("New York", -74.01, 40.71)

    def test_whitespace_run_after_tab_is_one_separator(self):
        assert parse_city_line("Denver\t  \t-104.99\t 39.74\r\n") == (
            "Denver",
            -104.99,
            39.74,
        )

    def test_blank_line_is_skipped(self):
        assert parse_city_line("   \n") is None

    def test_extra_columns_are_ignored(self):
        assert parse_city_line("Miami\t-80.19\t25.76\tFL") == ("Miami", -80.19, 25.76)

    @pytest.mark.parametrize(
        "line",
        ["Chicago\t-87.63\n", "Chicago -87.63 41.88\n", "Chicago\tabc\t41.88\n"],
    )
    def test_malformed_lines_raise_value_error(self, line):
        with pytest.raises(ValueError):
            parse_city_line(line)


class TestCityFileRepository:
    def test_load_builds_frozen_graph(self, cities_file):
        repository = CityFileRepository(config=GraphConfig(), path=cities_file)

        graph = repository.load()

        assert set(graph.keys()) == {"Chicago", "New York", "Denver", "Honolulu"}
        assert graph.frozen
        assert {key for key, _ in graph.neighbors("Chicago")} == {"New York", "Denver"}
        assert graph.neighbors("Honolulu") == ()

    def test_load_is_cached_until_cleared(self, cities_file):
        repository = CityFileRepository(config=GraphConfig(), path=cities_file)

        first = repository.load()
        assert repository.load() is first

        repository.clear_cache()
        assert repository.load() is not first

    def test_threshold_comes_from_config(self, cities_file):
        config = GraphConfig(edge_threshold_miles=800.0)
        graph = CityFileRepository(config=config, path=cities_file).load()

        # Chicago - New York is about 700 miles, Chicago - Denver about 905.
        assert [key for key, _ in graph.neighbors("Chicago")] == ["New York"]
        assert graph.neighbors("Denver") == ()

    def test_configured_path_is_used_when_none_given(self, cities_file):
        config = GraphConfig(data_dir=cities_file.parent, cities_file=cities_file.name)
        repository = CityFileRepository(config=config)

        assert repository.cities_path == cities_file
        assert len(repository.load()) == 4

    def test_get_location_and_list_locations(self, cities_file):
        repository = CityFileRepository(config=GraphConfig(), path=cities_file)

        chicago = repository.get_location("Chicago")
        assert chicago is not None
        assert chicago.coordinate.longitude == -87.63
        assert repository.get_location("Paris") is None
        assert [loc.key for loc in repository.list_locations()] == [
            "Chicago",
            "New York",
            "Denver",
            "Honolulu",
        ]

    def test_duplicate_city_overwrites_earlier_record(self, tmp_path):
        path = tmp_path / "dupes.txt"
        path.write_text(
            "City\tLon\tLat\n"
            "A\t0.0\t0.0\n"
            "B\t1.0\t0.0\n"
            "A\t2.0\t0.0\n",
            encoding="utf-8",
        )

        graph = CityFileRepository(config=GraphConfig(), path=path).load()

        assert graph.location("A").coordinate.longitude == 2.0
        assert [key for key, _ in graph.neighbors("A")] == ["B"]
        assert [key for key, _ in graph.neighbors("B")] == ["A"]
        assert graph.edge_count() == 1

    def test_missing_file_raises_graph_error(self, tmp_path):
        path = tmp_path / "missing.txt"
        repository = CityFileRepository(config=GraphConfig(), path=path)

        with pytest.raises(GraphError) as excinfo:
            repository.load()

        assert excinfo.value.file_path == str(path)
        assert isinstance(excinfo.value.cause, OSError)

    def test_malformed_record_reports_line_number(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("City\tLon\tLat\nA\t0.0\t0.0\nB\tnorth\t1.0\n", encoding="utf-8")

        with pytest.raises(GraphError) as excinfo:
            CityFileRepository(config=GraphConfig(), path=path).load()

        assert excinfo.value.line_number == 3

    def test_undecodable_bytes_raise_graph_error(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"City\tLon\tLat\nA\t0.0\t0.0\nS\xe3o Paulo\t-46.63\t-23.55\n")

        with pytest.raises(GraphError) as excinfo:
            CityFileRepository(config=GraphConfig(), path=path).load()

        assert excinfo.value.line_number == 3
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_undecodable_header_raises_graph_error(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\t1\t1")

        with pytest.raises(GraphError) as excinfo:
            CityFileRepository(config=GraphConfig(), path=path).load()

        assert excinfo.value.line_number == 1

    def test_out_of_range_coordinate_raises_graph_error(self, tmp_path):
        path = tmp_path / "range.txt"
        path.write_text("City\tLon\tLat\nA\t0.0\t95.0\n", encoding="utf-8")

        with pytest.raises(GraphError) as excinfo:
            CityFileRepository(config=GraphConfig(), path=path).load()

        assert excinfo.value.line_number == 2
        assert isinstance(excinfo.value.cause, ValueError)

    def test_header_only_file_gives_empty_graph(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("City\tLon\tLat\n", encoding="utf-8")

        assert len(CityFileRepository(config=GraphConfig(), path=path).load()) == 0

    def test_bundled_sample_file_loads(self, sample_cities_file):
        graph = CityFileRepository(config=GraphConfig(), path=sample_cities_file).load()

        assert len(graph) == 9
        assert "Los Angeles" in graph
        assert graph.neighbors("Honolulu") == ()
