"""WorksCatalog facade used by page routes.

The WorksCatalog wires the pipeline (SchemaResolver -> CollectionAggregator
-> ordering/paging) behind the handful of calls a site needs: the first
listing page, numbered listing pages, static route parameters, detail
lookup, related works and the gallery strip.

Architecture:
    This module implements the Facade pattern over the runtime components.
    The resolver instance lives as long as the catalog, so the schema
    variant is probed once per catalog session and reused by every call.

Design Decisions:
    - Transport injection allows testing with fake GraphQL transports
    - Route divergences (current-item exclusion, gallery filtering) are
      explicit CollectionPolicy values, not hidden branches
    - Upstream failures surface as partial or empty pages, never as raised
      errors; routes render the empty state from ``window.is_empty``
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.config import CatalogSettings
from ..core.enums import SchemaVariant
from ..models import CatalogPage, WorkItem
from ..runtime.aggregator import CollectionAggregator, CollectionPolicy
from ..runtime.paging import enumerate_static_pages, order, paginate
from ..runtime.queries import GALLERY_WORKS, RELATED_WORKS, WorksPageAdapter
from ..runtime.schema import SchemaResolver
from ..runtime.telemetry import Telemetry
from ..runtime.transport import ContentTransport, GraphQLTransport


class WorksCatalog:
    """High-level access to the works collection."""

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        transport: ContentTransport | None = None,
        telemetry: Telemetry | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            settings: Catalog settings (defaults to ``CatalogSettings.from_env()``)
            transport: GraphQL transport (defaults to GraphQLTransport on settings.api_url)
            telemetry: Logger capability (defaults to verbose/quiet per settings.verbose)
        """
        self.settings = settings or CatalogSettings.from_env()
        self._transport = transport or GraphQLTransport(
            self.settings.api_url, timeout=self.settings.request_timeout
        )
        self._telemetry = telemetry or Telemetry(verbose=self.settings.verbose)
        self._resolver = SchemaResolver(self._transport, telemetry=self._telemetry)
        self._aggregator = CollectionAggregator(
            self._transport, settings=self.settings, telemetry=self._telemetry
        )
        self._adapter = WorksPageAdapter()

    @property
    def resolver(self) -> SchemaResolver:
        return self._resolver

    async def resolve_variant(self) -> SchemaVariant:
        return await self._resolver.resolve()

    async def fetch_all(self, policy: CollectionPolicy | None = None) -> list[WorkItem]:
        """Full ordered collection, optionally post-processed by ``policy``."""
        variant = await self._resolver.resolve()
        items = order(await self._aggregator.aggregate_all(variant))
        if policy is not None:
            items = policy.apply(items)
        if self._telemetry.is_verbose:
            for index, item in enumerate(items[:10], start=1):
                self._telemetry.debug(
                    "works_order_check",
                    position=index,
                    title=item.plain_title,
                    menu_order=item.menu_order,
                )
        return items

    async def page(self, requested_page: int | None = 1) -> CatalogPage:
        """Listing payload for one page.

        An empty collection is not an error: the page has no items and
        ``window.is_empty`` is True.
        """
        variant = await self._resolver.resolve()
        items = await self.fetch_all()
        page_items, window = paginate(items, requested_page, self.settings.page_size)
        return CatalogPage(items=page_items, window=window, variant=variant)

    async def static_page_params(self) -> list[dict[str, str]]:
        """Route params for listing pages 2..N."""
        items = await self.fetch_all()
        pages = enumerate_static_pages(len(items), self.settings.page_size)
        self._telemetry.debug("static_pages_generated", count=len(pages))
        return [{"page": str(p)} for p in pages]

    async def static_detail_params(self) -> list[dict[str, str]]:
        """Route params for every work detail page, in catalog order."""
        items = await self.fetch_all()
        return [{"slug": item.slug} for item in items if item.slug]

    async def find_by_slug(self, slug: str) -> WorkItem | None:
        if not slug:
            return None
        for item in await self.fetch_all():
            if item.slug == slug:
                return item
        self._telemetry.debug("work_not_found", slug=slug)
        return None

    async def related(self, current_id: str | None, limit: int = 6) -> list[WorkItem]:
        """Other works to show below a detail page, excluding ``current_id``.

        Request failures are logged and yield an empty list.
        """
        variant = await self._resolver.resolve()
        document, variables = RELATED_WORKS.render(
            variant.effective, {"first": limit, "exclude": [current_id] if current_id else []}
        )
        try:
            data = await self._transport.query(document, variables)
            page = self._adapter.parse(data, variant)
        except Exception as e:
            self._telemetry.error(
                "related_works_error", error_type=type(e).__name__, error_message=str(e)
            )
            return []

        policy = CollectionPolicy.excluding([current_id], limit=limit)
        if current_id and any(item.id == current_id for item in page.items):
            self._telemetry.warning("related_works_included_current", current_id=current_id)
        return policy.apply(order(page.items))

    async def gallery(
        self, limit: int = 15, predicate: Callable[[WorkItem], bool] | None = None
    ) -> list[WorkItem]:
        """First ``limit`` works in upstream default order for the gallery strip."""
        variant = await self._resolver.resolve()
        document, variables = GALLERY_WORKS.render(variant.effective, {"first": limit})
        try:
            data = await self._transport.query(document, variables)
            page = self._adapter.parse(data, variant)
        except Exception as e:
            self._telemetry.error(
                "gallery_error", error_type=type(e).__name__, error_message=str(e)
            )
            return []
        return CollectionPolicy(predicate=predicate, limit=limit).apply(page.items)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> WorksCatalog:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
