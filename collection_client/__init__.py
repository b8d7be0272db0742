"""Hosted-CMS collection client package."""

from collection_client.base import BaseClient, set_client_config
from collection_client.errors import (
    PaginationLoopError,
    UpstreamAuthRequired,
    UpstreamError,
    UpstreamFatal,
    UpstreamTransient,
)
from collection_client.page import CollectionItem, PageClient
from collection_client.pager import Pager, ensure_json_format

__all__ = [
    # Base
    "BaseClient",
    "set_client_config",
    # Clients
    "PageClient",
    "Pager",
    "ensure_json_format",
    "CollectionItem",
    # Errors
    "UpstreamError",
    "UpstreamAuthRequired",
    "UpstreamTransient",
    "UpstreamFatal",
    "PaginationLoopError",
]
