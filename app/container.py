"""Dependency Injection container - initialized at app startup."""

from loguru import logger

import settings
from app.repositories.authorization import AuthorizationRepository
from app.repositories.cache import CacheStore, DuckDbCacheStore, FileCacheStore, MemoryCacheStore
from app.repositories.db import connect
from app.services.admin import AdminGuard
from app.services.summary import AggregationGate, FallbackCoordinator, SummaryResolver
from collection_client import set_client_config


def build_cache_store(backend: str) -> CacheStore:
    """Cache backend selected by ``SUMMARY_CACHE_BACKEND``."""
    if backend == "memory":
        return MemoryCacheStore(ttl=settings.CACHE_TTL)
    if backend == "duckdb":
        return DuckDbCacheStore(connect(settings.CACHE_DB_PATH), ttl=settings.CACHE_TTL)
    if backend == "filesystem":
        return FileCacheStore(settings.CACHE_ROOT, ttl=settings.CACHE_TTL)
    raise ValueError(f"Unknown cache backend: {backend}")


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, cache_store=None, authorization=None, admin=None, client_factory=None) -> None:
        """Initialize all dependencies. Call once at app startup.

        Any collaborator passed in replaces the one built from settings.
        """
        if self._initialized:
            return

        set_client_config(settings.UPSTREAM_TIMEOUT, settings.UPSTREAM_RETRIES, settings.UPSTREAM_BACKOFF)

        # Repositories (singletons)
        self._owns_cache_store = cache_store is None
        self.cache_store = cache_store or build_cache_store(settings.CACHE_BACKEND)
        self.authorization = authorization or AuthorizationRepository(settings.USERS_FILE)
        self.admin = admin or AdminGuard(settings.ADMIN_USER, settings.ADMIN_PASS)

        factory_kwargs = {"client_factory": client_factory} if client_factory else {}

        # Services (with injected repos)
        self.gate = AggregationGate(
            cache=self.cache_store,
            authorization=self.authorization,
            admin=self.admin,
            require_authorized_domain=settings.REQUIRE_AUTHORIZED_DOMAIN,
            max_pages=settings.MAX_PAGES,
            max_items=settings.MAX_ITEMS,
            **factory_kwargs,
        )

        self.fallback = FallbackCoordinator(
            max_pages=settings.MAX_PAGES,
            max_items=settings.MAX_ITEMS,
            **factory_kwargs,
        )

        self.resolver = SummaryResolver(
            gate=self.gate,
            fallback=self.fallback,
            gate_timeout=settings.GATE_TIMEOUT,
            deadline=settings.SUMMARY_DEADLINE,
        )

        self._initialized = True
        logger.info("Container initialized (cache={})", self.cache_store.__class__.__name__)

    def reset(self) -> None:
        """Drop all instances so the next ``init`` rebuilds them.

        A cache store built here from settings is closed; an injected one is
        left to its owner.
        """
        if self._initialized and self._owns_cache_store and hasattr(self.cache_store, "close"):
            self.cache_store.close()
        self._initialized = False


# Global container instance
container = Container()
