"""Upstream pagination errors."""


class UpstreamError(Exception):
    """Pagination against the upstream collection failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)


class UpstreamAuthRequired(UpstreamError):
    """Collection is access-restricted (HTTP 401)."""

    def __init__(self, url: str):
        super().__init__(url, f"Upstream requires visitor authentication: {url}")


class UpstreamTransient(UpstreamError):
    """Retryable failure, retry budget exhausted."""

    def __init__(self, url: str, status: int | None = None):
        self.status = status
        detail = f"status {status}" if status is not None else "timeout/network error"
        super().__init__(url, f"Upstream unavailable ({detail}) on {url}")


class UpstreamFatal(UpstreamError):
    """Non-retryable failure."""

    def __init__(self, url: str, status: int | None = None, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(url, f"Upstream failure on {url}: {reason or status}")


class PaginationLoopError(UpstreamError):
    """Page or item safety cap exceeded."""

    def __init__(self, url: str, pages: int, items: int):
        self.pages = pages
        self.items = items
        super().__init__(url, f"Pagination cap exceeded after {pages} pages / {items} items at {url}")
