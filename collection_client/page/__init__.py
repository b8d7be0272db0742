"""Collection page client - single-page fetches."""

from collection_client.page.schemas import CollectionItem, PageSchema, PaginationSchema
from collection_client.page.results import AuthRequired, Fatal, Ok, PageResult, Transient
from collection_client.page.client import PageClient

__all__ = [
    "PageClient",
    # Schemas
    "CollectionItem",
    "PageSchema",
    "PaginationSchema",
    # Results
    "Ok",
    "AuthRequired",
    "Transient",
    "Fatal",
    "PageResult",
]
