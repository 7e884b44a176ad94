"""Catalog settings.

All tunables of the aggregation pipeline and the navigation controller live
in one frozen dataclass so a single instance can be shared between the
catalog facade, the page routes and the card components.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_API_URL = "https://your-wordpress-site.com/graphql"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CatalogSettings:
    """Configuration for the works catalog.

    Attributes:
        api_url: GraphQL endpoint of the content API
        fetch_size: Items requested per upstream page
        max_items: Aggregation cap
        page_size: Items shown per listing page
        navigation_timeout_ms: Fallback delay before a card click forces navigation
        request_timeout: Total HTTP timeout in seconds
        verbose: Emit debug diagnostics
        base_path: Route of the first listing page
    """

    api_url: str = DEFAULT_API_URL
    fetch_size: int = 100
    max_items: int = 1000
    page_size: int = 9
    navigation_timeout_ms: int = 1500
    request_timeout: float = 30.0
    verbose: bool = False
    base_path: str = "/all-works"

    def __post_init__(self) -> None:
        """Validate settings."""
        if not self.api_url:
            raise ConfigurationError("api_url must be a non-empty string")
        if self.fetch_size < 1:
            raise ConfigurationError("fetch_size must be >= 1")
        if self.max_items < 1:
            raise ConfigurationError("max_items must be >= 1")
        if self.page_size < 1:
            raise ConfigurationError("page_size must be >= 1")
        if self.navigation_timeout_ms < 0:
            raise ConfigurationError("navigation_timeout_ms must be >= 0")
        if self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be > 0")

    @property
    def navigation_timeout(self) -> float:
        """Fallback delay in seconds."""
        return self.navigation_timeout_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CatalogSettings:
        """Build settings from ``WORKS_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _int(name: str, default: int) -> int:
            raw = env.get(name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e

        def _float(name: str, default: float) -> float:
            raw = env.get(name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e

        return cls(
            api_url=env.get("WORKS_API_URL") or defaults.api_url,
            fetch_size=_int("WORKS_FETCH_SIZE", defaults.fetch_size),
            max_items=_int("WORKS_MAX_ITEMS", defaults.max_items),
            page_size=_int("WORKS_PAGE_SIZE", defaults.page_size),
            navigation_timeout_ms=_int(
                "WORKS_NAVIGATION_TIMEOUT_MS", defaults.navigation_timeout_ms
            ),
            request_timeout=_float("WORKS_REQUEST_TIMEOUT", defaults.request_timeout),
            verbose=env.get("WORKS_VERBOSE", "").strip().lower() in _TRUTHY,
            base_path=env.get("WORKS_BASE_PATH") or defaults.base_path,
        )
