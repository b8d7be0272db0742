"""Fallback coordinator - direct, uncached pagination under the caller's identity."""

from collections.abc import Callable

import httpx
from loguru import logger

from app.models.summary import AggregationQuery, CollectionItem, featured_only
from collection_client import PageClient, Pager, UpstreamError
from collection_client.pager import MAX_ITEMS, MAX_PAGES


class FallbackCoordinator:
    """Best-effort aggregation that never touches the shared cache.

    Results depend on the caller's own credentials (a visitor session may
    open a password-protected collection), so they must not be cached.
    """

    def __init__(
        self,
        client_factory: Callable[..., PageClient] = PageClient,
        max_pages: int = MAX_PAGES,
        max_items: int = MAX_ITEMS,
    ):
        self._client_factory = client_factory
        self._max_pages = max_pages
        self._max_items = max_items

    @staticmethod
    def seed_url_for(query: AggregationQuery) -> str:
        return query.seed_url()

    async def aggregate_direct(
        self,
        seed_url: str,
        featured: bool = False,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
    ) -> list[CollectionItem]:
        """Paginate ``seed_url``; on failure return whatever was collected."""
        collected: list[CollectionItem] = []
        try:
            async with self._client_factory(headers=headers, cookies=cookies) as client:
                pager = Pager(client, max_pages=self._max_pages, max_items=self._max_items)
                async for items in pager.iter_pages(seed_url):
                    collected.extend(items)
        except (UpstreamError, httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Direct fetch stopped after {} items: {}", len(collected), e)

        if featured:
            collected = featured_only(collected)
        logger.info("Direct fetch returned {} items for {}", len(collected), seed_url)
        return collected
