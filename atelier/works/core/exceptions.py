"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class WorksError(Exception):
    """Base exception for all library errors."""

    pass


class ContentAPIError(WorksError):
    """Error from the upstream content API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class QueryError(ContentAPIError):
    """GraphQL response carried an ``errors`` payload.

    Raised for queries that reference fields the upstream schema does not
    expose, which is how an unsupported schema variant usually surfaces.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.errors = errors or []


class SchemaError(WorksError):
    """Response does not have the expected connection shape."""

    pass


class ConfigurationError(WorksError):
    """Invalid catalog settings."""

    pass
