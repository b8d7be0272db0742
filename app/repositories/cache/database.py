"""DuckDB cache store - summary cache table."""

import json

import duckdb
from loguru import logger

from app.models.summary import AggregationQuery, CacheEntry, CollectionItem
from app.repositories.base import BaseRepository
from app.repositories.cache.base import CacheStore, StorageError


class DuckDbCacheStore(BaseRepository, CacheStore):
    """Cache rows in ``summary_cache`` with an explicit ``created_at`` column."""

    def __init__(self, conn: duckdb.DuckDBPyConnection, *args, **kwargs):
        BaseRepository.__init__(self, conn)
        CacheStore.__init__(self, *args, **kwargs)

    def get(self, query: AggregationQuery) -> CacheEntry | None:
        try:
            row = self.fetchone(
                "SELECT data, created_at FROM summary_cache WHERE tenant = ? AND key = ?",
                [query.tenant, query.cache_key],
            )
        except duckdb.Error as e:
            raise StorageError(f"Cache read failed: {e}") from e

        if not row:
            return None
        logger.debug("Cache hit: tenant={}, key={}", query.tenant, query.cache_key[:12])
        return CacheEntry(
            tenant=query.tenant,
            key=query.cache_key,
            items=json.loads(row[0])["items"],
            created_at=row[1],
        )

    def put(self, query: AggregationQuery, items: list[CollectionItem]) -> CacheEntry:
        created_at = self.now()
        try:
            self.execute(
                """
                INSERT OR REPLACE INTO summary_cache (tenant, key, data, created_at)
                VALUES (?, ?, ?, ?)
                """,
                [query.tenant, query.cache_key, json.dumps({"items": items}), created_at],
            )
        except (duckdb.Error, TypeError, ValueError) as e:
            raise StorageError(f"Cache write failed: {e}") from e

        logger.debug("Cache saved: tenant={}, key={}", query.tenant, query.cache_key[:12])
        return CacheEntry(tenant=query.tenant, key=query.cache_key, items=items, created_at=created_at)

    def purge(self, tenant: str) -> int:
        try:
            row = self.fetchone("SELECT COUNT(*) FROM summary_cache WHERE tenant = ?", [tenant])
            self.execute("DELETE FROM summary_cache WHERE tenant = ?", [tenant])
        except duckdb.Error as e:
            raise StorageError(f"Cache purge failed: {e}") from e

        logger.info("Cache cleared for {}: {} rows", tenant, row[0])
        return row[0]
