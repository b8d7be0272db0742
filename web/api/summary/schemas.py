"""Summary API response schemas."""

from typing import Any

from pydantic import BaseModel


class SummaryResponse(BaseModel):
    """Aggregated collection items."""

    items: list[dict[str, Any]]


class PurgeRequest(BaseModel):
    """Purge request body."""

    domain: str | None = None


class PurgeResponse(BaseModel):
    """Purge result."""

    ok: bool = True
    purged: str
