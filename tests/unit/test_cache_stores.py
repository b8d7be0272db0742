"""Tests for cache store backends."""

import pytest

from app.models.summary import AggregationQuery
from app.repositories.cache import DuckDbCacheStore, FileCacheStore, MemoryCacheStore, StorageError
from app.repositories.db import connect

TTL = 300

QUERY_A = AggregationQuery.from_params("tenant-a.com", "/blog")
QUERY_A_FEATURED = AggregationQuery.from_params("tenant-a.com", "/blog", featured="true")
QUERY_B = AggregationQuery.from_params("tenant-b.com", "/blog")

ITEMS = [
    {"id": "1", "title": "First", "starred": True, "categories": ["News"], "tags": []},
    {"id": "2", "title": "Second", "starred": False, "categories": [], "tags": ["x"]},
]


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture(params=["memory", "filesystem", "duckdb"])
def clock_and_store(request, tmp_path):
    clock = FakeClock()
    if request.param == "memory":
        store = MemoryCacheStore(ttl=TTL, clock=clock)
    elif request.param == "filesystem":
        store = FileCacheStore(tmp_path / "cache", ttl=TTL, clock=clock)
    else:
        store = DuckDbCacheStore(connect(":memory:"), ttl=TTL, clock=clock)
    return clock, store


class TestCacheStore:
    def test_miss(self, clock_and_store):
        _, store = clock_and_store
        assert store.get(QUERY_A) is None

    def test_put_then_get(self, clock_and_store):
        clock, store = clock_and_store
        store.put(QUERY_A, ITEMS)

        entry = store.get(QUERY_A)
        assert entry.items == ITEMS
        assert entry.tenant == "tenant-a.com"
        assert entry.key == QUERY_A.cache_key
        assert entry.created_at == clock.now

    def test_reads_are_unchanged(self, clock_and_store):
        _, store = clock_and_store
        store.put(QUERY_A, ITEMS)

        first = store.get(QUERY_A)
        first.items.append({"id": "mutated"})
        assert store.get(QUERY_A).items == ITEMS

    def test_freshness_window(self, clock_and_store):
        clock, store = clock_and_store
        store.put(QUERY_A, ITEMS)

        clock.now += TTL - 1
        assert store.is_fresh(store.get(QUERY_A))

        clock.now += 1
        assert not store.is_fresh(store.get(QUERY_A))

    def test_overwrite_replaces_whole_entry(self, clock_and_store):
        clock, store = clock_and_store
        store.put(QUERY_A, ITEMS)
        clock.now += 10
        store.put(QUERY_A, ITEMS[:1])

        entry = store.get(QUERY_A)
        assert entry.items == ITEMS[:1]
        assert entry.created_at == clock.now

    def test_filters_are_separate_entries(self, clock_and_store):
        _, store = clock_and_store
        store.put(QUERY_A, ITEMS)
        store.put(QUERY_A_FEATURED, ITEMS[:1])

        assert store.get(QUERY_A).items == ITEMS
        assert store.get(QUERY_A_FEATURED).items == ITEMS[:1]

    def test_purge_only_touches_tenant(self, clock_and_store):
        _, store = clock_and_store
        store.put(QUERY_A, ITEMS)
        store.put(QUERY_A_FEATURED, ITEMS[:1])
        store.put(QUERY_B, ITEMS)

        assert store.purge("tenant-a.com") == 2

        assert store.get(QUERY_A) is None
        assert store.get(QUERY_A_FEATURED) is None
        assert store.get(QUERY_B).items == ITEMS

    def test_purge_unknown_tenant(self, clock_and_store):
        _, store = clock_and_store
        assert store.purge("nobody.com") == 0


class TestFileCacheStore:
    def test_directories_created_lazily(self, tmp_path):
        root = tmp_path / "cache"
        store = FileCacheStore(root)
        assert not root.exists()

        store.put(QUERY_A, ITEMS)

        files = list((root / "tenant-a.com").iterdir())
        assert [f.name for f in files] == [f"{QUERY_A.cache_key}.json"]

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        store = FileCacheStore(tmp_path)
        store.put(QUERY_A, ITEMS)
        (tmp_path / "tenant-a.com" / f"{QUERY_A.cache_key}.json").write_text("{not json")

        with pytest.raises(StorageError):
            store.get(QUERY_A)

    def test_unwritable_root_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = FileCacheStore(blocker / "cache")

        with pytest.raises(StorageError):
            store.put(QUERY_A, ITEMS)

    def test_unserializable_items_leave_no_temp_file(self, tmp_path):
        store = FileCacheStore(tmp_path)

        with pytest.raises(StorageError):
            store.put(QUERY_A, [{"id": object()}])

        assert list((tmp_path / "tenant-a.com").iterdir()) == []

    @pytest.mark.parametrize("tenant", ["..", ".", ""])
    def test_purge_stays_inside_root(self, tmp_path, tenant):
        sibling = tmp_path / "authorized-users.json"
        sibling.write_text("[]")
        store = FileCacheStore(tmp_path / "cache")

        with pytest.raises(StorageError):
            store.purge(tenant)

        assert sibling.exists()

    def test_entry_outside_root_is_refused(self, tmp_path):
        store = FileCacheStore(tmp_path / "cache")
        escaping = AggregationQuery.from_params("..", "/blog")

        with pytest.raises(StorageError):
            store.put(escaping, ITEMS)

        assert list(tmp_path.glob("*.json")) == []
