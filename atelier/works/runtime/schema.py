"""Runtime detection of the skill field's schema variant.

Architecture:
    The content API may expose a work's skill descriptor in one of several
    shapes depending on how the CMS fields were registered. SchemaResolver
    issues one single-item probe per candidate variant, in fixed priority
    order, and accepts the first whose sample node defines the skill at the
    expected location.

    A probe that raises (HTTP error, GraphQL error for an unknown field,
    malformed payload) is a negative result for that variant only. The
    resolved variant is cached for the lifetime of the resolver so every
    item in an aggregation session is read through the same accessor.
"""

from __future__ import annotations

import asyncio

from ..core.enums import SchemaVariant
from .accessors import has_skill
from .queries import WORKS_CONNECTION, QuerySpec, connection_nodes
from .telemetry import Telemetry
from .transport import ContentTransport


class SchemaResolver:
    """Resolves and caches the SchemaVariant in effect upstream."""

    def __init__(
        self,
        transport: ContentTransport,
        *,
        telemetry: Telemetry | None = None,
        probe_spec: QuerySpec = WORKS_CONNECTION,
    ) -> None:
        self._transport = transport
        self._telemetry = telemetry or Telemetry.quiet()
        self._probe_spec = probe_spec
        self._resolved: SchemaVariant | None = None
        self._lock = asyncio.Lock()

    @property
    def resolved(self) -> SchemaVariant | None:
        """Cached variant, or None before the first ``resolve()``."""
        return self._resolved

    async def resolve(self) -> SchemaVariant:
        """Return the schema variant, probing on first call only.

        Returns:
            The first accepted variant, or SchemaVariant.UNKNOWN if no probe
            succeeded. Callers query with ``variant.effective`` in that case.
        """
        if self._resolved is not None:
            return self._resolved

        # Concurrent callers wait for the first probe sequence
        async with self._lock:
            if self._resolved is not None:
                return self._resolved

            variant = SchemaVariant.UNKNOWN
            for candidate in SchemaVariant.probe_order():
                if await self._probe(candidate):
                    variant = candidate
                    break

            if variant is SchemaVariant.UNKNOWN:
                self._telemetry.debug("schema_unresolved", fallback=SchemaVariant.NESTED.value)
            else:
                self._telemetry.debug("schema_resolved", variant=variant.value)

            self._resolved = variant
            return variant

    def reset(self) -> None:
        """Forget the cached variant so the next ``resolve()`` probes again."""
        self._resolved = None

    async def _probe(self, candidate: SchemaVariant) -> bool:
        document, variables = self._probe_spec.render(candidate, {"first": 1, "after": None})
        try:
            data = await self._transport.query(document, variables)
            nodes = connection_nodes(data)
        except Exception as e:
            self._telemetry.probe_failed(variant=candidate.value, error=e)
            return False

        accepted = bool(nodes) and isinstance(nodes[0], dict) and has_skill(nodes[0], candidate)
        self._telemetry.probe_result(variant=candidate.value, accepted=accepted)
        return accepted
