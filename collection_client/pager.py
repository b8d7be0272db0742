"""Walks a paginated collection to completion."""

from collections.abc import AsyncIterator
from urllib.parse import parse_qsl, urljoin, urlsplit, urlunsplit

from loguru import logger

from collection_client.errors import (
    PaginationLoopError,
    UpstreamAuthRequired,
    UpstreamFatal,
    UpstreamTransient,
)
from collection_client.page import AuthRequired, CollectionItem, Fatal, Ok, PageClient, Transient

MAX_PAGES = 250
MAX_ITEMS = 10_000

FORMAT_PARAM = ("format", "json")
HTTP_SCHEMES = ("http", "https")


def ensure_json_format(url: str) -> str:
    """Append ``format=json`` unless the URL already carries a ``format`` parameter."""
    parts = urlsplit(url)
    name, value = FORMAT_PARAM
    if any(k == name for k, _ in parse_qsl(parts.query, keep_blank_values=True)):
        return url
    query = f"{parts.query}&{name}={value}" if parts.query else f"{name}={value}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def resolve_page_url(current: str, target: str, reason: str) -> str:
    """Absolute ``format=json`` URL for ``target`` relative to ``current``.

    Raises ``UpstreamFatal`` when the result is not a parseable http(s) URL.
    """
    try:
        url = ensure_json_format(urljoin(current, target))
        scheme = urlsplit(url).scheme
    except ValueError as e:
        raise UpstreamFatal(current, reason=f"{reason}: {e}") from e
    if scheme not in HTTP_SCHEMES:
        raise UpstreamFatal(current, reason=f"{reason}: unsupported scheme {scheme or '(none)'}")
    return url


class Pager:
    """Sequential pagination over one collection with page/item safety caps."""

    def __init__(self, client: PageClient, max_pages: int = MAX_PAGES, max_items: int = MAX_ITEMS):
        self._client = client
        self._max_pages = max_pages
        self._max_items = max_items

    async def iter_pages(self, seed_url: str) -> AsyncIterator[list[CollectionItem]]:
        """Yield each page's items in upstream order.

        Raises ``UpstreamAuthRequired``, ``UpstreamTransient``, ``UpstreamFatal``
        or ``PaginationLoopError``.
        """
        url: str | None = resolve_page_url(seed_url, seed_url, "malformed url")
        pages = 0
        items = 0

        while url:
            if pages >= self._max_pages:
                raise PaginationLoopError(url, pages, items)

            result = await self._client.fetch_page(url)
            match result:
                case Ok(page=page):
                    pass
                case AuthRequired():
                    raise UpstreamAuthRequired(url)
                case Transient(status=status):
                    raise UpstreamTransient(url, status)
                case Fatal(status=status, reason=reason):
                    raise UpstreamFatal(url, status, reason)

            pages += 1
            items += len(page.items)
            if items > self._max_items:
                raise PaginationLoopError(url, pages, items)

            yield page.items

            next_url = page.next_url
            # nextPageUrl is usually site-relative ("/blog?offset=...")
            url = resolve_page_url(url, next_url, "malformed nextPageUrl") if next_url else None

        logger.debug("Paginated {}: {} pages, {} items", seed_url, pages, items)

    async def paginate(self, seed_url: str) -> list[CollectionItem]:
        """Fetch every page and return the concatenated items."""
        collected: list[CollectionItem] = []
        async for items in self.iter_pages(seed_url):
            collected.extend(items)
        return collected
