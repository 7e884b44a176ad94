"""Pagination data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import SchemaVariant
from .work import WorkItem


class PageWindow(BaseModel):
    """Computed slice of an ordered collection.

    ``start_index``/``end_index`` are 1-based and inclusive for "showing
    X-Y of Z" labels; both are 0 when the collection is empty.
    """

    current_page: int = Field(..., ge=1)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    has_previous_page: bool
    has_next_page: bool
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @property
    def offset(self) -> int:
        """Zero-based index of the first item on this page."""
        return (self.current_page - 1) * self.page_size


class WorksPage(BaseModel):
    """One upstream page of the works connection."""

    items: list[WorkItem] = Field(default_factory=list)
    has_next_page: bool = False
    end_cursor: str | None = None

    model_config = ConfigDict(frozen=True)


class CatalogPage(BaseModel):
    """Payload handed to a listing route."""

    items: list[WorkItem] = Field(default_factory=list)
    window: PageWindow
    variant: SchemaVariant = SchemaVariant.NESTED

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.items
