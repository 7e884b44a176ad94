"""Deterministic ordering and page windows for the works collection.

All functions here are pure. ``order`` imposes the total order used by every
listing; ``paginate`` slices it into stable windows; the remaining helpers
produce the static-route page list, route paths and the compact numbered
navigation shown under a listing.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from ..models import PageWindow, WorkItem

T = TypeVar("T")


def _ordering_key(item: Any) -> int:
    return getattr(item, "menu_order", None) or 0


def order(items: Iterable[WorkItem]) -> list[WorkItem]:
    """Stable ascending sort by ``menu_order`` (missing treated as 0).

    Ties keep their arrival order, so the function is idempotent.
    """
    return sorted(items, key=_ordering_key)


def total_pages_for(total_items: int, page_size: int) -> int:
    """``ceil(total_items / page_size)``, never less than 1."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if total_items < 0:
        raise ValueError("total_items must be >= 0")
    return max(1, math.ceil(total_items / page_size))


def clamp_page(requested_page: int | None, total_pages: int) -> int:
    """Clamp a requested page number into ``[1, total_pages]``."""
    if requested_page is None:
        return 1
    return max(1, min(int(requested_page), total_pages))


def build_window(total_items: int, requested_page: int | None, page_size: int) -> PageWindow:
    """Compute the PageWindow for a collection size and requested page."""
    total_pages = total_pages_for(total_items, page_size)
    current = clamp_page(requested_page, total_pages)
    start = (current - 1) * page_size
    end = min(start + page_size, total_items)
    return PageWindow(
        current_page=current,
        total_items=total_items,
        total_pages=total_pages,
        page_size=page_size,
        has_previous_page=current > 1,
        has_next_page=current < total_pages,
        start_index=start + 1 if total_items > 0 else 0,
        end_index=end if total_items > 0 else 0,
    )


def paginate(
    items: Sequence[T], requested_page: int | None, page_size: int
) -> tuple[list[T], PageWindow]:
    """Slice an ordered collection into one page.

    Out-of-range pages are clamped, never rejected. An empty collection
    yields an empty slice and a window with ``total_pages == 1``.

    Args:
        items: Ordered collection
        requested_page: 1-based page number
        page_size: Items per page (>= 1)

    Returns:
        Tuple of (page items, PageWindow)
    """
    window = build_window(len(items), requested_page, page_size)
    start = window.offset
    return list(items[start : start + page_size]), window


def enumerate_static_pages(total_items: int, page_size: int) -> list[int]:
    """Page numbers needing a generated route (page 1 uses the default route)."""
    return list(range(2, total_pages_for(total_items, page_size) + 1))


def parse_page_number(raw: Any, default: int = 2) -> int:
    """Convert a route parameter to a page number, falling back to ``default``."""
    if raw is None:
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def page_url(page: int, base_path: str = "/all-works") -> str:
    """Route for a listing page; page 1 is the base path."""
    if page <= 1:
        return base_path
    return f"{base_path.rstrip('/')}/page/{page}"


def page_sequence(current_page: int, total_pages: int) -> list[int | None]:
    """Compact numbered navigation; ``None`` marks a gap.

    - one page: nothing to show
    - up to three pages: every page
    - otherwise ``1 2 3``, the current page after a gap when it lies
      strictly between 3 and the last page, and the last page (after a
      gap unless there are exactly four pages)
    """
    if total_pages <= 1:
        return []
    if total_pages <= 3:
        return list(range(1, total_pages + 1))

    pages: list[int | None] = [1, 2, 3]
    if 3 < current_page < total_pages:
        pages.extend([None, current_page])
    if total_pages == 4:
        pages.append(total_pages)
    else:
        pages.extend([None, total_pages])
    return pages
