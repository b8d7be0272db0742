"""Models package - DDL and entities."""

from app.models.common import CACHE_DDL
from app.models.summary import (
    AggregationQuery,
    AuthorizedUser,
    CacheEntry,
    CollectionItem,
    featured_only,
)

ALL_DDL = [
    CACHE_DDL,
]

__all__ = [
    # Common
    "CACHE_DDL",
    # Summary
    "AggregationQuery",
    "AuthorizedUser",
    "CacheEntry",
    "CollectionItem",
    "featured_only",
    # All DDL
    "ALL_DDL",
]
