"""Core components."""

from .config import DEFAULT_API_URL, CatalogSettings
from .enums import NavigationState, NavigationTrigger, SchemaVariant
from .exceptions import (
    ConfigurationError,
    ContentAPIError,
    QueryError,
    SchemaError,
    WorksError,
)

__all__ = [
    "CatalogSettings",
    "DEFAULT_API_URL",
    "SchemaVariant",
    "NavigationState",
    "NavigationTrigger",
    "WorksError",
    "ContentAPIError",
    "QueryError",
    "SchemaError",
    "ConfigurationError",
]
