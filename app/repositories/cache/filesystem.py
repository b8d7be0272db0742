"""Filesystem cache store - one JSON file per (tenant, query key)."""

import json
import os
import tempfile
from pathlib import Path
from urllib.parse import quote

from loguru import logger

from app.models.summary import AggregationQuery, CacheEntry, CollectionItem
from app.repositories.cache.base import CacheStore, StorageError


class FileCacheStore(CacheStore):
    """Stores ``{root}/{tenant}/{key}.json``; freshness comes from the file mtime.

    Directories are created on first write. Writes go to a temporary file in
    the tenant directory and are moved into place with ``os.replace`` so a
    reader never sees a half-written entry.
    """

    def __init__(self, root: str | Path, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.root = Path(root)

    def _tenant_dir(self, tenant: str) -> Path:
        path = self.root / quote(tenant, safe="")
        if not tenant or path.resolve().parent != self.root.resolve():
            raise StorageError(f"Tenant {tenant!r} escapes cache root {self.root}")
        return path

    def _entry_path(self, query: AggregationQuery) -> Path:
        return self._tenant_dir(query.tenant) / f"{query.cache_key}.json"

    def get(self, query: AggregationQuery) -> CacheEntry | None:
        path = self._entry_path(query)
        try:
            if not path.exists():
                return None
            created_at = path.stat().st_mtime
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise StorageError(f"Corrupt cache file {path}")

        logger.debug("Cache file read: {}", path)
        return CacheEntry(tenant=query.tenant, key=query.cache_key, items=items, created_at=created_at)

    def put(self, query: AggregationQuery, items: list[CollectionItem]) -> CacheEntry:
        path = self._entry_path(query)
        created_at = self.now()
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                json.dump({"items": items}, tmp)
            os.utime(tmp_name, (created_at, created_at))
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {path}: {e}") from e

        logger.debug("Cache saved: {}", path)
        return CacheEntry(tenant=query.tenant, key=query.cache_key, items=items, created_at=created_at)

    def purge(self, tenant: str) -> int:
        tenant_dir = self._tenant_dir(tenant)
        if not tenant_dir.is_dir():
            logger.info("Cache purged for {}: nothing stored", tenant)
            return 0

        removed = 0
        try:
            for f in tenant_dir.glob("*.json"):
                f.unlink(missing_ok=True)
                removed += 1
        except OSError as e:
            raise StorageError(f"Cannot purge {tenant_dir}: {e}") from e

        logger.info("Cache purged for {}: {} files", tenant, removed)
        return removed
