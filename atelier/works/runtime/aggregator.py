"""Cursor-driven aggregation of the works collection.

Architecture:
    ``iter_pages`` is an async generator over upstream pages: it issues one
    request at a time and only requests page N+1 after page N's cursor is
    known. ``aggregate_all`` drains it into one list, bounded by a cap.

    Failures never reach the caller: a page request that raises ends the
    pass and whatever was accumulated so far is returned (partial result
    on failure, no automatic retry).
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterable
from dataclasses import dataclass, field
from time import perf_counter

from ..core.config import CatalogSettings
from ..core.enums import SchemaVariant
from ..models import WorkItem, WorksPage
from .queries import WORKS_CONNECTION, QuerySpec, WorksPageAdapter
from .telemetry import Telemetry
from .transport import ContentTransport


@dataclass(frozen=True)
class CollectionPolicy:
    """Per-route post-processing of an aggregated collection.

    Attributes:
        exclude_ids: Item ids removed from the result (e.g. the work currently shown)
        predicate: Optional filter, items for which it returns False are dropped
        limit: Maximum number of items kept after filtering (None = all)
    """

    exclude_ids: frozenset[str] = field(default_factory=frozenset)
    predicate: Callable[[WorkItem], bool] | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0")

    @classmethod
    def excluding(cls, ids: Iterable[str | None], limit: int | None = None) -> CollectionPolicy:
        return cls(exclude_ids=frozenset(i for i in ids if i), limit=limit)

    def apply(self, items: list[WorkItem]) -> list[WorkItem]:
        kept = [
            item
            for item in items
            if item.id not in self.exclude_ids and (self.predicate is None or self.predicate(item))
        ]
        if self.limit is not None:
            kept = kept[: self.limit]
        return kept


class CollectionAggregator:
    """Materializes the full works collection by following cursors."""

    def __init__(
        self,
        transport: ContentTransport,
        *,
        settings: CatalogSettings | None = None,
        telemetry: Telemetry | None = None,
        spec: QuerySpec = WORKS_CONNECTION,
        adapter: WorksPageAdapter | None = None,
    ) -> None:
        self._transport = transport
        self._settings = settings or CatalogSettings()
        self._telemetry = telemetry or Telemetry.quiet()
        self._spec = spec
        self._adapter = adapter or WorksPageAdapter()

    async def fetch_page(
        self, variant: SchemaVariant, *, first: int, after: str | None = None
    ) -> WorksPage:
        """Fetch and parse a single page. Errors propagate."""
        document, variables = self._spec.render(variant.effective, {"first": first, "after": after})
        data = await self._transport.query(document, variables)
        return self._adapter.parse(data, variant)

    async def iter_pages(
        self, variant: SchemaVariant, fetch_size: int | None = None
    ) -> AsyncIterator[WorksPage]:
        """Yield upstream pages in order until the last page.

        The sequence is finite and not restartable; each request waits for
        the previous page's cursor.
        """
        size = fetch_size or self._settings.fetch_size
        cursor: str | None = None
        while True:
            page = await self.fetch_page(variant, first=size, after=cursor)
            yield page
            if not (page.has_next_page and page.end_cursor):
                return
            if page.end_cursor == cursor:
                self._telemetry.warning("pagination_cursor_stalled", cursor=cursor)
                return
            cursor = page.end_cursor

    async def aggregate_all(
        self,
        variant: SchemaVariant,
        cap: int | None = None,
        fetch_size: int | None = None,
        *,
        policy: CollectionPolicy | None = None,
    ) -> list[WorkItem]:
        """Collect every item up to ``cap`` in arrival order.

        Args:
            variant: Resolved schema variant
            cap: Maximum items kept (defaults to settings.max_items)
            fetch_size: Items per request (defaults to settings.fetch_size)
            policy: Optional post-aggregation policy

        Returns:
            Items in arrival order, possibly partial if a request failed
        """
        limit = cap if cap is not None else self._settings.max_items
        if limit < 1:
            raise ValueError("cap must be >= 1")
        if fetch_size is not None and fetch_size < 1:
            raise ValueError("fetch_size must be >= 1")

        collected: list[WorkItem] = []
        pages = 0
        truncated = False
        partial = False

        pages_iter = self.iter_pages(variant, fetch_size)
        try:
            while True:
                started = perf_counter()
                try:
                    page = await anext(pages_iter)
                except StopAsyncIteration:
                    break
                except Exception as e:
                    self._telemetry.page_error(page_index=pages, accumulated=len(collected), error=e)
                    partial = True
                    break

                pages += 1
                collected.extend(page.items)
                self._telemetry.page_fetched(
                    page_index=pages - 1,
                    rows=len(page.items),
                    accumulated=len(collected),
                    has_next_page=page.has_next_page,
                    latency_ms=(perf_counter() - started) * 1000.0,
                )

                if len(collected) >= limit:
                    truncated = len(collected) > limit
                    collected = collected[:limit]
                    break
        finally:
            await pages_iter.aclose()

        self._telemetry.aggregation_complete(
            variant=variant.value,
            pages=pages,
            total=len(collected),
            truncated=truncated,
            partial=partial,
        )

        if policy is not None:
            collected = policy.apply(collected)
        return collected
