"""Atelier Works - content aggregation and navigation for a portfolio site."""

from .api import WorksCatalog
from .core import (
    CatalogSettings,
    ConfigurationError,
    ContentAPIError,
    NavigationState,
    NavigationTrigger,
    QueryError,
    SchemaError,
    SchemaVariant,
    WorksError,
)
from .models import (
    CatalogPage,
    Category,
    MediaRef,
    PageWindow,
    WorkItem,
    WorksPage,
)
from .runtime import (
    ClickEvent,
    CollectionAggregator,
    CollectionPolicy,
    GraphQLTransport,
    NavigationTransitionController,
    SchemaResolver,
    Telemetry,
    enumerate_static_pages,
    order,
    page_sequence,
    page_url,
    paginate,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "WorksCatalog",
    # Configuration
    "CatalogSettings",
    # Enums
    "SchemaVariant",
    "NavigationState",
    "NavigationTrigger",
    # Models
    "CatalogPage",
    "Category",
    "MediaRef",
    "PageWindow",
    "WorkItem",
    "WorksPage",
    # Pipeline
    "SchemaResolver",
    "CollectionAggregator",
    "CollectionPolicy",
    "GraphQLTransport",
    "Telemetry",
    "order",
    "paginate",
    "enumerate_static_pages",
    "page_sequence",
    "page_url",
    # Navigation
    "ClickEvent",
    "NavigationTransitionController",
    # Exceptions
    "WorksError",
    "ContentAPIError",
    "QueryError",
    "SchemaError",
    "ConfigurationError",
]
