"""Summary domain entities."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from collection_client import CollectionItem


@dataclass
class CacheEntry:
    """Complete materialized item list for one query."""

    tenant: str
    key: str
    items: list[CollectionItem] = field(default_factory=list)
    created_at: float = 0.0

    def age(self, now: float) -> float:
        return now - self.created_at


class AuthorizedUser(BaseModel):
    """Licensed site on the allow-list."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    domain: str = ""
    access_key: str | None = Field(alias="accessKey", default=None)
    ss_domain: str | None = Field(alias="ssDomain", default=None)


def featured_only(items: list[CollectionItem]) -> list[CollectionItem]:
    """Keep starred items, preserving order."""
    return [item for item in items if item.get("starred") is True]
