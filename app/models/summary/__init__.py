"""Summary models - queries, cache entries, allow-list records."""

from app.models.summary.entities import AuthorizedUser, CacheEntry, CollectionItem, featured_only
from app.models.summary.query import AggregationQuery, is_valid_tenant, normalize_base_path, normalize_domain

__all__ = [
    "AggregationQuery",
    "AuthorizedUser",
    "CacheEntry",
    "CollectionItem",
    "featured_only",
    "is_valid_tenant",
    "normalize_base_path",
    "normalize_domain",
]
