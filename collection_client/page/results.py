"""Tagged results of a single page fetch."""

from dataclasses import dataclass

from collection_client.page.schemas import PageSchema


@dataclass(frozen=True)
class Ok:
    """Page fetched and parsed."""

    url: str
    page: PageSchema


@dataclass(frozen=True)
class AuthRequired:
    """Upstream answered 401: the collection needs visitor credentials."""

    url: str


@dataclass(frozen=True)
class Transient:
    """Retryable failure that outlived the retry budget."""

    url: str
    status: int | None = None


@dataclass(frozen=True)
class Fatal:
    """Non-retryable failure: unexpected status or malformed payload."""

    url: str
    status: int | None = None
    reason: str = ""


PageResult = Ok | AuthRequired | Transient | Fatal
