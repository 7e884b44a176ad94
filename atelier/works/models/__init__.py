"""Data models for the works catalog.

Architecture:
    All models are Pydantic v2 and frozen so that ordering keys and page
    windows cannot change once an aggregation pass has produced them.

Model Categories:
    - Catalog: WorkItem, Category, MediaRef
    - Pagination: WorksPage (upstream page), PageWindow, CatalogPage
"""

from .page import CatalogPage, PageWindow, WorksPage
from .work import Category, MediaRef, SkillValue, WorkItem

__all__ = [
    "CatalogPage",
    "Category",
    "MediaRef",
    "PageWindow",
    "SkillValue",
    "WorkItem",
    "WorksPage",
]
