"""Tests for the DI container lifecycle."""

import pytest

import settings
from app.container import container
from app.models.summary import AggregationQuery
from app.repositories.authorization import AllowList
from app.repositories.cache import DuckDbCacheStore, StorageError
from app.repositories.db import connect

QUERY = AggregationQuery.from_params("example.com", "/blog")


@pytest.fixture
def duckdb_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "CACHE_BACKEND", "duckdb")
    monkeypatch.setattr(settings, "CACHE_DB_PATH", str(tmp_path / "cache.duckdb"))
    container.reset()
    yield
    container.reset()


def test_reset_closes_built_store(duckdb_settings):
    container.init(authorization=AllowList(["example.com"]))
    store = container.cache_store
    assert isinstance(store, DuckDbCacheStore)
    store.put(QUERY, [{"id": "1"}])

    container.reset()

    with pytest.raises(StorageError):
        store.get(QUERY)


def test_reset_leaves_injected_store_open(duckdb_settings):
    store = DuckDbCacheStore(connect(":memory:"))
    container.init(cache_store=store, authorization=AllowList(["example.com"]))

    container.reset()

    store.put(QUERY, [{"id": "1"}])
    assert store.get(QUERY).items == [{"id": "1"}]
    store.close()
