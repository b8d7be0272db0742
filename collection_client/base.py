"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_incrementing,
)

# Default settings
UPSTREAM_TIMEOUT = 6.0
UPSTREAM_RETRIES = 2
UPSTREAM_BACKOFF = 0.3

RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


def set_client_config(timeout: float, retries: int, backoff: float) -> None:
    """Set upstream client configuration."""
    global UPSTREAM_TIMEOUT, UPSTREAM_RETRIES, UPSTREAM_BACKOFF
    UPSTREAM_TIMEOUT = timeout
    UPSTREAM_RETRIES = retries
    UPSTREAM_BACKOFF = backoff


class RetryableResponseError(Exception):
    """Upstream answered with a status worth retrying."""

    def __init__(self, url: str, status: int):
        self.url = url
        self.status = status
        super().__init__(f"Upstream {status} on {url}")


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors, timeouts, retryable statuses)."""
    if isinstance(exc, httpx.UnsupportedProtocol):
        return False
    if isinstance(exc, (httpx.TransportError, asyncio.TimeoutError)):
        return True
    return isinstance(exc, RetryableResponseError)


class BaseClient:
    """Base async HTTP client with per-attempt timeout and linear backoff.

    ``headers`` and ``cookies`` select the network identity the requests run
    under: none for the server-side fetch, the visitor's own for the direct
    fallback fetch.
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        backoff: float | None = None,
        sleep=asyncio.sleep,
    ):
        self._client: httpx.AsyncClient | None = None
        self._headers = headers or {}
        self._cookies = cookies or {}
        self._timeout = UPSTREAM_TIMEOUT if timeout is None else timeout
        self._retries = UPSTREAM_RETRIES if retries is None else retries
        self._backoff = UPSTREAM_BACKOFF if backoff is None else backoff
        self._sleep = sleep
        self._request_count = 0
        logger.debug(
            "{}: timeout={}s, retries={}, backoff={}s",
            self.__class__.__name__,
            self._timeout,
            self._retries,
            self._backoff,
        )

    @property
    def request_count(self) -> int:
        return self._request_count

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers=self._headers,
            cookies=self._cookies,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("Total upstream requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    def _retrying(self) -> AsyncRetrying:
        """Retry policy: ``retries`` extra attempts, waiting ``backoff * attempt`` between them."""
        return AsyncRetrying(
            stop=stop_after_attempt(self._retries + 1),
            wait=wait_incrementing(start=self._backoff, increment=self._backoff),
            retry=retry_if_exception(_is_retryable_error),
            sleep=self._sleep,
            reraise=True,
        )

    async def _get(self, url: str) -> httpx.Response:
        """Single GET attempt bounded by the per-attempt timeout."""
        self._request_count += 1
        resp = await asyncio.wait_for(self._client.get(url), timeout=self._timeout)
        if resp.status_code in RETRYABLE_STATUSES:
            logger.debug("Retryable upstream status {} on {}", resp.status_code, url)
            raise RetryableResponseError(url, resp.status_code)
        return resp
