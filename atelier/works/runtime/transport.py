"""GraphQL transport over the async HTTP client."""

from __future__ import annotations

from typing import Any, Protocol

from ..core.exceptions import QueryError, SchemaError
from ..utils.http import HTTPClient


class ContentTransport(Protocol):
    """Executes a GraphQL document and returns its ``data`` payload.

    Implementations raise on transport failures and on GraphQL ``errors``;
    callers decide whether a failure is recoverable.
    """

    async def query(self, document: str, variables: dict[str, Any] | None = None) -> dict:
        ...

    async def close(self) -> None:
        ...


class GraphQLTransport:
    """ContentTransport backed by :class:`HTTPClient`."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            endpoint: Absolute GraphQL endpoint URL
            timeout: Total request timeout in seconds
            headers: Extra headers sent with every request
            http: Optional pre-built client (injected in tests)
        """
        self.endpoint = endpoint
        self._headers = headers or {}
        self._http = http or HTTPClient(timeout=timeout)

    async def query(self, document: str, variables: dict[str, Any] | None = None) -> dict:
        """Run ``document`` and return the ``data`` object.

        Raises:
            ContentAPIError: On HTTP failure
            QueryError: If the response carries GraphQL errors
            SchemaError: If the response has no ``data`` object
        """
        payload = await self._http.post(
            self.endpoint,
            json_body={"query": document, "variables": variables or {}},
            headers=self._headers or None,
        )
        if not isinstance(payload, dict):
            raise SchemaError(f"Expected a JSON object, got {type(payload).__name__}")

        errors = payload.get("errors")
        if errors:
            first = errors[0].get("message", "unknown error") if isinstance(errors[0], dict) else errors[0]
            raise QueryError(f"GraphQL error: {first}", errors=list(errors))

        data = payload.get("data")
        if not isinstance(data, dict):
            raise SchemaError("GraphQL response has no data object")
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> GraphQLTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
