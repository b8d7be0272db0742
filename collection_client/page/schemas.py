"""Collection page schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CollectionItem = dict[str, Any]


class PaginationSchema(BaseModel):
    """Pagination block of a collection page."""

    model_config = ConfigDict(populate_by_name=True)

    next_page: bool = Field(alias="nextPage", default=False)
    next_page_url: str | None = Field(alias="nextPageUrl", default=None)


class PageSchema(BaseModel):
    """One page of a collection in its ``format=json`` representation."""

    items: list[CollectionItem] = Field(default_factory=list)
    pagination: PaginationSchema | None = None

    @property
    def next_url(self) -> str | None:
        """Next page URL, or None when this is the last page."""
        if self.pagination and self.pagination.next_page and self.pagination.next_page_url:
            return self.pagination.next_page_url
        return None
