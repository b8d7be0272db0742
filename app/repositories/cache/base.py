"""Cache store interface."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from app.models.summary import AggregationQuery, CacheEntry, CollectionItem

DEFAULT_TTL = 5 * 60


class StorageError(Exception):
    """Cache backend could not read or write."""

    def __init__(self, message: str = "Cache storage error"):
        self.message = message
        super().__init__(self.message)


class CacheStore(ABC):
    """TTL-bounded item-list cache, partitioned by tenant.

    Entries are whole-list replacements keyed by ``query.cache_key``; there is
    no merging and the last completed write wins.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    def is_fresh(self, entry: CacheEntry) -> bool:
        """``now - created_at < ttl``."""
        return entry.age(self.now()) < self.ttl

    @abstractmethod
    def get(self, query: AggregationQuery) -> CacheEntry | None:
        """Return the stored entry (fresh or stale), or None. Raises ``StorageError``."""

    @abstractmethod
    def put(self, query: AggregationQuery, items: list[CollectionItem]) -> CacheEntry:
        """Replace the entry for ``query``. Raises ``StorageError``."""

    @abstractmethod
    def purge(self, tenant: str) -> int:
        """Delete every entry of ``tenant``; return how many were removed."""
