"""Runtime pipeline: schema resolution, aggregation, paging and navigation."""

from .accessors import extract_skill, get_accessor, has_skill
from .aggregator import CollectionAggregator, CollectionPolicy
from .navigation import (
    AnimatedElement,
    CardView,
    ClickEvent,
    NavigationTransitionController,
)
from .paging import (
    build_window,
    enumerate_static_pages,
    order,
    page_sequence,
    page_url,
    paginate,
    parse_page_number,
    total_pages_for,
)
from .queries import GALLERY_WORKS, RELATED_WORKS, WORKS_CONNECTION, QuerySpec, WorksPageAdapter
from .schema import SchemaResolver
from .telemetry import Telemetry
from .transport import ContentTransport, GraphQLTransport

__all__ = [
    "AnimatedElement",
    "CardView",
    "ClickEvent",
    "CollectionAggregator",
    "CollectionPolicy",
    "ContentTransport",
    "GALLERY_WORKS",
    "GraphQLTransport",
    "NavigationTransitionController",
    "QuerySpec",
    "RELATED_WORKS",
    "SchemaResolver",
    "Telemetry",
    "WORKS_CONNECTION",
    "WorksPageAdapter",
    "build_window",
    "enumerate_static_pages",
    "extract_skill",
    "get_accessor",
    "has_skill",
    "order",
    "page_sequence",
    "page_url",
    "paginate",
    "parse_page_number",
    "total_pages_for",
]
