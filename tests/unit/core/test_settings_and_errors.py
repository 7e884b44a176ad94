"""Unit tests for settings, enums and the exception hierarchy."""

from __future__ import annotations

import pytest

from atelier.works.core import (
    DEFAULT_API_URL,
    CatalogSettings,
    ConfigurationError,
    ContentAPIError,
    QueryError,
    SchemaError,
    SchemaVariant,
    WorksError,
)


class TestCatalogSettings:
    def test_defaults(self):
        settings = CatalogSettings()
        assert settings.api_url == DEFAULT_API_URL
        assert settings.fetch_size == 100
        assert settings.max_items == 1000
        assert settings.page_size == 9
        assert settings.navigation_timeout_ms == 1500
        assert settings.navigation_timeout == 1.5
        assert settings.verbose is False

    def test_from_env_empty_uses_defaults(self):
        assert CatalogSettings.from_env({}) == CatalogSettings()

    def test_from_env_overrides(self):
        settings = CatalogSettings.from_env(
            {
                "WORKS_API_URL": "https://cms.example.com/graphql",
                "WORKS_FETCH_SIZE": "50",
                "WORKS_MAX_ITEMS": "200",
                "WORKS_PAGE_SIZE": "12",
                "WORKS_NAVIGATION_TIMEOUT_MS": "800",
                "WORKS_REQUEST_TIMEOUT": "5.5",
                "WORKS_VERBOSE": "true",
                "WORKS_BASE_PATH": "/works",
            }
        )
        assert settings.api_url == "https://cms.example.com/graphql"
        assert settings.fetch_size == 50
        assert settings.max_items == 200
        assert settings.page_size == 12
        assert settings.navigation_timeout_ms == 800
        assert settings.request_timeout == 5.5
        assert settings.verbose is True
        assert settings.base_path == "/works"

    def test_from_env_invalid_number(self):
        with pytest.raises(ConfigurationError):
            CatalogSettings.from_env({"WORKS_PAGE_SIZE": "nine"})

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"fetch_size": 0},
            {"max_items": 0},
            {"page_size": 0},
            {"navigation_timeout_ms": -1},
            {"request_timeout": 0},
            {"api_url": ""},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ConfigurationError):
            CatalogSettings(**kwargs)


class TestSchemaVariant:
    def test_probe_order(self):
        assert SchemaVariant.probe_order() == (
            SchemaVariant.NESTED,
            SchemaVariant.DIRECT,
            SchemaVariant.META,
        )

    def test_effective(self):
        assert SchemaVariant.UNKNOWN.effective is SchemaVariant.NESTED
        assert SchemaVariant.META.effective is SchemaVariant.META


def test_query_error_carries_errors():
    """QueryError keeps the GraphQL errors payload."""
    error = QueryError("bad field", errors=[{"message": "Cannot query field skill"}], status_code=200)
    assert error.errors[0]["message"] == "Cannot query field skill"
    assert error.status_code == 200
    assert isinstance(error, ContentAPIError)
    assert isinstance(error, WorksError)


def test_content_api_error_status():
    error = ContentAPIError("oops", status_code=502)
    assert str(error) == "oops"
    assert error.status_code == 502


def test_schema_and_configuration_errors_are_works_errors():
    assert issubclass(SchemaError, WorksError)
    assert issubclass(ConfigurationError, WorksError)
