"""Repositories package - cache storage and the domain allow-list."""

from app.repositories.authorization import AllowList, AuthorizationRepository
from app.repositories.base import BaseRepository
from app.repositories.cache import (
    CacheStore,
    DuckDbCacheStore,
    FileCacheStore,
    MemoryCacheStore,
    StorageError,
)
from app.repositories.db import connect, init_tables

__all__ = [
    # DB
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Cache
    "CacheStore",
    "StorageError",
    "FileCacheStore",
    "MemoryCacheStore",
    "DuckDbCacheStore",
    # Authorization
    "AuthorizationRepository",
    "AllowList",
]
