"""Tests for ConfigStore read helpers."""

from __future__ import annotations

import pytest

from shini.core.loader import parse_ini_text
from shini.core.store import ConfigStore
from shini.parsers import ParsedKV


@pytest.fixture
def store() -> ConfigStore:
    return parse_ini_text(
        "\n".join(
            [
                "[server]",
                "port = 8080",
                "ratio = 0.75",
                "debug = Yes",
                "workers = -3",
                "name =",
                "threshold = abc",
            ]
        )
    )


class TestMembership:
    def test_contains_pairs(self, sample_store: ConfigStore) -> None:
        assert ("database", "host") in sample_store
        assert ("database", "nope") not in sample_store
        assert "database" not in sample_store

    def test_len_counts_entries(self, sample_store: ConfigStore) -> None:
        assert len(sample_store) == 6

    def test_sections_in_parse_order(self, sample_store: ConfigStore) -> None:
        assert sample_store.sections() == ["default", "database", "cache"]

    def test_flat_view(self, sample_store: ConfigStore) -> None:
        flat = sample_store.flat()
        assert flat["database.password"] == "s3cr=t"
        assert flat["default.log_level"] == "info"

    def test_from_entries(self) -> None:
        store = ConfigStore.from_entries(
            [ParsedKV("s", "k", "1", 1), ParsedKV("s", "k", "2", 5)],
            source="x.ini",
        )
        assert store.get("s", "k") == "2"
        assert store.line_of("s", "k") == 5
        assert store.source == "x.ini"


class TestTypedGetters:
    def test_get_default(self, store: ConfigStore) -> None:
        assert store.get("server", "missing") is None
        assert store.get("server", "missing", "x") == "x"

    def test_get_str_blank_falls_back(self, store: ConfigStore) -> None:
        assert store.get_str("server", "name", "anon") == "anon"
        assert store.get_str("server", "port") == "8080"

    def test_get_int(self, store: ConfigStore) -> None:
        assert store.get_int("server", "port") == 8080
        assert store.get_int("server", "threshold", 7) == 7
        assert store.get_int("server", "missing", 9) == 9
        assert store.get_int("server", "workers", 1, minimum=1) == 1

    def test_get_float(self, store: ConfigStore) -> None:
        assert store.get_float("server", "ratio") == pytest.approx(0.75)
        assert store.get_float("server", "threshold", 1.5) == pytest.approx(1.5)
        assert store.get_float("server", "ratio", minimum=1.0) == pytest.approx(1.0)

    def test_get_bool(self, store: ConfigStore) -> None:
        assert store.get_bool("server", "debug") is True
        assert store.get_bool("server", "port", default=True) is True
        assert store.get_bool("server", "missing") is False
