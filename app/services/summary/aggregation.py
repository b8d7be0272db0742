"""Aggregation gate - authorized, cached server-side aggregation."""

import asyncio
from collections.abc import Callable
from typing import Protocol

from loguru import logger

from app.models.summary import (
    AggregationQuery,
    CollectionItem,
    featured_only,
    is_valid_tenant,
    normalize_domain,
)
from app.repositories.cache import CacheStore, StorageError
from app.services.admin import AdminGuard, Credentials
from app.services.summary.errors import (
    AdminAuthRequired,
    BadRequest,
    FailureReason,
    Forbidden,
    UpstreamFailure,
)
from collection_client import (
    PageClient,
    Pager,
    PaginationLoopError,
    UpstreamAuthRequired,
    UpstreamError,
    UpstreamTransient,
)
from collection_client.pager import MAX_ITEMS, MAX_PAGES


class Authorization(Protocol):
    def is_authorized(self, domain: str) -> bool: ...


def _failure_reason(exc: UpstreamError) -> FailureReason:
    if isinstance(exc, UpstreamAuthRequired):
        return FailureReason.UPSTREAM_AUTH_REQUIRED
    if isinstance(exc, UpstreamTransient):
        return FailureReason.UPSTREAM_TRANSIENT
    if isinstance(exc, PaginationLoopError):
        return FailureReason.PAGINATION_LOOP
    return FailureReason.UPSTREAM_FATAL


class AggregationGate:
    """Validate, authorize, serve from cache or paginate upstream and cache the result."""

    def __init__(
        self,
        cache: CacheStore,
        authorization: Authorization,
        admin: AdminGuard,
        client_factory: Callable[[], PageClient] = PageClient,
        require_authorized_domain: bool = True,
        max_pages: int = MAX_PAGES,
        max_items: int = MAX_ITEMS,
    ):
        self._cache = cache
        self._authorization = authorization
        self._admin = admin
        self._client_factory = client_factory
        self._require_authorized = require_authorized_domain
        self._max_pages = max_pages
        self._max_items = max_items
        logger.debug("AggregationGate initialized (require_authorized_domain={})", require_authorized_domain)

    def validate(self, query: AggregationQuery) -> None:
        if not is_valid_tenant(query.domain) or not query.base_path.startswith("/"):
            raise BadRequest()

    def authorize(self, query: AggregationQuery) -> None:
        if self._require_authorized and not self._authorization.is_authorized(query.domain):
            logger.info("Rejected unauthorized domain {}", query.domain)
            raise Forbidden(query.domain)

    async def aggregate(self, query: AggregationQuery) -> list[CollectionItem]:
        """Complete item list for ``query``.

        Raises ``BadRequest``, ``Forbidden`` or ``UpstreamFailure``. Cache
        backend failures are logged and treated as a miss.
        """
        self.validate(query)

        with logger.contextualize(tenant=query.domain):
            self.authorize(query)

            cached = await self._lookup(query)
            if cached is not None:
                return cached

            items = await self._fetch(query)

            # Runs to completion in its thread even if this task is cancelled.
            await asyncio.to_thread(self._store, query, items)
            return items

    async def _lookup(self, query: AggregationQuery) -> list[CollectionItem] | None:
        try:
            entry = await asyncio.to_thread(self._cache.get, query)
        except StorageError as e:
            logger.warning("Cache read failed for {}, treating as miss: {}", query.domain, e)
            return None

        if entry is None:
            logger.debug("Cache miss: {}{}", query.domain, query.base_path)
            return None
        if not self._cache.is_fresh(entry):
            logger.debug("Cache stale: {}{}", query.domain, query.base_path)
            return None

        logger.debug("Cache hit: {}{} ({} items)", query.domain, query.base_path, len(entry.items))
        return entry.items

    async def _fetch(self, query: AggregationQuery) -> list[CollectionItem]:
        seed_url = query.seed_url()
        try:
            async with self._client_factory() as client:
                pager = Pager(client, max_pages=self._max_pages, max_items=self._max_items)
                items = await pager.paginate(seed_url)
        except UpstreamError as e:
            reason = _failure_reason(e)
            logger.warning("Aggregation failed for {} ({}): {}", query.domain, reason.value, e)
            raise UpstreamFailure(reason, e.message, url=e.url) from e

        if query.featured:
            items = featured_only(items)
        logger.info("Aggregated {} items for {}{}", len(items), query.domain, query.base_path)
        return items

    def _store(self, query: AggregationQuery, items: list[CollectionItem]) -> None:
        try:
            self._cache.put(query, items)
        except StorageError as e:
            logger.warning("Cache write failed for {}: {}", query.domain, e)

    async def purge_tenant(self, domain: str, credentials: Credentials | None) -> str:
        """Delete every cache entry of a tenant. Admin only."""
        if not self._admin.check(credentials):
            raise AdminAuthRequired()

        tenant = normalize_domain(domain)
        if not tenant:
            raise BadRequest("domain required")
        if not is_valid_tenant(tenant):
            raise BadRequest(f"invalid domain: {domain}")

        with logger.contextualize(tenant=tenant):
            removed = await asyncio.to_thread(self._cache.purge, tenant)
            logger.info("Purged {} cache entries for {}", removed, tenant)
        return tenant
