"""Tests for the JSON key-value stores."""

import logging

import pytest

from pos.infrastructure.persistence.key_value_store import JsonFileStore, read_records
from tests.fakes import InMemoryStore


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "data")


class TestJsonFileStore:

    def test_round_trip(self, store):
        store.write("cctv_cart", [{"id": "a", "productId": "p", "qty": 2}])
        assert store.read("cctv_cart", []) == [{"id": "a", "productId": "p", "qty": 2}]

    def test_creates_one_file_per_key(self, store):
        store.write("cctv_sales", [])
        assert (store.data_dir / "cctv_sales.json").exists()

    def test_missing_key_returns_fallback(self, store):
        assert store.read("absent", ["fallback"]) == ["fallback"]

    def test_empty_file_returns_fallback(self, store):
        store.data_dir.mkdir(parents=True)
        (store.data_dir / "k.json").write_text("", encoding="utf-8")
        assert store.read("k", 7) == 7

    def test_null_returns_fallback(self, store):
        store.write("k", None)
        assert store.read("k", []) == []

    def test_corrupt_json_returns_fallback_and_logs(self, store, caplog):
        store.data_dir.mkdir(parents=True)
        (store.data_dir / "k.json").write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert store.read("k", []) == []
        assert "not valid JSON" in caplog.text

    def test_write_overwrites(self, store):
        store.write("k", [1])
        store.write("k", [2])
        assert store.read("k", []) == [2]

    def test_remove(self, store):
        store.write("k", [1])
        store.remove("k")
        assert store.read("k", "gone") == "gone"

    def test_remove_missing_key_is_noop(self, store):
        store.remove("never-written")


class TestReadRecords:

    def test_non_list_value_is_ignored(self):
        store = InMemoryStore({"k": '{"id": "x"}'})
        assert read_records(store, "k", lambda raw: raw["id"]) == []

    def test_malformed_record_is_skipped(self, caplog):
        store = InMemoryStore({"k": '[{"id": "a"}, {"oops": 1}, "text", {"id": "b"}]'})
        with caplog.at_level(logging.WARNING):
            assert read_records(store, "k", lambda raw: raw["id"]) == ["a", "b"]
        assert "malformed" in caplog.text
