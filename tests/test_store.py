"""Tests for jsonshelf.store — the read-only endpoint table."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from jsonshelf.store import EndpointStore


class TestEndpointStore:
    def test_get_present(self) -> None:
        store = EndpointStore({"json": b"{}"})
        assert store.get("json") == b"{}"

    def test_get_absent(self) -> None:
        store = EndpointStore({"json": b"{}"})
        assert store.get("json/missing") is None

    def test_empty_default(self) -> None:
        store = EndpointStore()
        assert len(store) == 0
        assert store.get("") is None

    def test_contains_and_len(self) -> None:
        store = EndpointStore({"a": b"1", "a/b": b"2"})
        assert "a/b" in store
        assert "b" not in store
        assert len(store) == 2
        assert set(store.keys()) == {"a", "a/b"}

    def test_snapshot_is_read_only(self) -> None:
        store = EndpointStore({"a": b"1"})
        with pytest.raises(TypeError):
            store.snapshot["b"] = b"2"  # type: ignore[index]

    def test_source_table_is_copied(self) -> None:
        table = {"a": b"1"}
        store = EndpointStore(table)

        table["a"] = b"changed"
        table["b"] = b"new"

        assert store.get("a") == b"1"
        assert "b" not in store

    def test_repr(self) -> None:
        assert repr(EndpointStore({"a": b"1"})) == "EndpointStore(1 endpoints)"

    def test_concurrent_reads_from_threads(self) -> None:
        table = {f"json/item{i}": f'{{"id":{i}}}'.encode() for i in range(50)}
        store = EndpointStore(table)
        keys = [f"json/item{i % 50}" for i in range(2000)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(store.get, keys))

        assert results == [table[key] for key in keys]
