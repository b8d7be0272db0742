"""Collection page client - one page per call."""

import asyncio

import httpx
from loguru import logger

from collection_client.base import BaseClient, RetryableResponseError
from collection_client.page.schemas import PageSchema
from collection_client.page.results import AuthRequired, Fatal, Ok, PageResult, Transient


class PageClient(BaseClient):
    """Client for paginated collection endpoints."""

    async def fetch_page(self, url: str) -> PageResult:
        """GET one collection page.

        401 is returned as ``AuthRequired`` without retrying. 429/5xx, timeouts
        and connection errors are retried; once the budget is spent the result
        is ``Transient`` with the last status seen. Anything else that is not
        2xx, a URL httpx cannot request, or a payload that does not parse, is
        ``Fatal``.
        """
        try:
            resp = await self._retrying()(self._get, url)
        except RetryableResponseError as e:
            logger.warning("Upstream {} after {} attempts: {}", e.status, self._retries + 1, url)
            return Transient(url=url, status=e.status)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            logger.warning("Unusable upstream URL {}: {}", url, e)
            return Fatal(url=url, reason=f"invalid url: {e}")
        except (httpx.TransportError, asyncio.TimeoutError) as e:
            logger.warning("Upstream unreachable after {} attempts: {} ({})", self._retries + 1, url, e)
            return Transient(url=url)

        if resp.status_code == 401:
            logger.info("Upstream requires visitor auth: {}", url)
            return AuthRequired(url=url)

        if not resp.is_success:
            logger.warning("Upstream {} on {}", resp.status_code, url)
            return Fatal(url=url, status=resp.status_code, reason=f"unexpected status {resp.status_code}")

        try:
            page = PageSchema.model_validate(resp.json())
        except ValueError as e:
            logger.warning("Malformed upstream payload on {}: {}", url, e)
            return Fatal(url=url, status=resp.status_code, reason="malformed payload")

        return Ok(url=url, page=page)
