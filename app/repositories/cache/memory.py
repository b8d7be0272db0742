"""In-memory cache store."""

import copy
import threading

from loguru import logger

from app.models.summary import AggregationQuery, CacheEntry, CollectionItem
from app.repositories.cache.base import CacheStore


class MemoryCacheStore(CacheStore):
    """Process-local store; entries are deep-copied in and out."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._entries: dict[str, dict[str, CacheEntry]] = {}
        self._lock = threading.Lock()

    def get(self, query: AggregationQuery) -> CacheEntry | None:
        with self._lock:
            entry = self._entries.get(query.tenant, {}).get(query.cache_key)
        if entry is None:
            return None
        return copy.deepcopy(entry)

    def put(self, query: AggregationQuery, items: list[CollectionItem]) -> CacheEntry:
        entry = CacheEntry(
            tenant=query.tenant,
            key=query.cache_key,
            items=copy.deepcopy(items),
            created_at=self.now(),
        )
        with self._lock:
            self._entries.setdefault(query.tenant, {})[entry.key] = entry
        logger.debug("Cache saved: tenant={}, key={}", entry.tenant, entry.key[:12])
        return copy.deepcopy(entry)

    def purge(self, tenant: str) -> int:
        with self._lock:
            removed = self._entries.pop(tenant, {})
        logger.info("Cache purged for {}: {} entries", tenant, len(removed))
        return len(removed)
