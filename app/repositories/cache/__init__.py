"""Cache stores - filesystem, in-memory and DuckDB backends."""

from app.repositories.cache.base import DEFAULT_TTL, CacheStore, StorageError
from app.repositories.cache.database import DuckDbCacheStore
from app.repositories.cache.filesystem import FileCacheStore
from app.repositories.cache.memory import MemoryCacheStore

__all__ = [
    "DEFAULT_TTL",
    "CacheStore",
    "StorageError",
    "FileCacheStore",
    "MemoryCacheStore",
    "DuckDbCacheStore",
]
