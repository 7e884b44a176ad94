#!/usr/bin/env python3
"""Inspect the works catalog against a live content API.

Runs the full pipeline (schema probe, cursor aggregation, ordering, paging)
and prints what the listing routes would render.

Usage:
    # First listing page
    python scripts/dump_catalog.py --api-url https://example.com/graphql

    # A specific page with debug diagnostics
    python scripts/dump_catalog.py --page 3 --verbose

    # Static route parameters for build-time generation
    python scripts/dump_catalog.py --static-routes

    # Machine-readable output
    python scripts/dump_catalog.py --json
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from atelier.works import CatalogSettings, WorksCatalog, page_sequence, page_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump the works catalog")
    parser.add_argument("--api-url", help="GraphQL endpoint (default: $WORKS_API_URL)")
    parser.add_argument("--page", type=int, default=1, help="Listing page to render")
    parser.add_argument("--page-size", type=int, help="Items per listing page")
    parser.add_argument("--max-items", type=int, help="Aggregation cap")
    parser.add_argument("--static-routes", action="store_true", help="Print static route params")
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("--verbose", action="store_true", help="Debug diagnostics")
    return parser


def settings_from_args(args: argparse.Namespace) -> CatalogSettings:
    settings = CatalogSettings.from_env()
    overrides: dict[str, Any] = {}
    if args.api_url:
        overrides["api_url"] = args.api_url
    if args.page_size:
        overrides["page_size"] = args.page_size
    if args.max_items:
        overrides["max_items"] = args.max_items
    if args.verbose:
        overrides["verbose"] = True
    return replace(settings, **overrides) if overrides else settings


async def run(args: argparse.Namespace) -> int:
    settings = settings_from_args(args)
    async with WorksCatalog(settings) as catalog:
        if args.static_routes:
            routes = {
                "pages": await catalog.static_page_params(),
                "details": await catalog.static_detail_params(),
            }
            print(json.dumps(routes, indent=2, ensure_ascii=False))
            return 0

        result = await catalog.page(args.page)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return 0

    window = result.window
    print(f"Schema variant: {result.variant.value}")
    if result.is_empty:
        print("No works found.")
        return 0

    print(
        f"Page {window.current_page}/{window.total_pages} - "
        f"showing {window.start_index}-{window.end_index} of {window.total_items}"
    )
    for item in result.items:
        label = " | ".join(p for p in (item.category_name, item.skill_label) if p)
        print(f"  [{item.menu_order:>3}] {item.display_title()}  {label}  -> {settings.base_path}/{item.slug}")

    links = [
        "..." if p is None else (f"[{p}]" if p == window.current_page else str(p))
        for p in page_sequence(window.current_page, window.total_pages)
    ]
    if links:
        print("Pages: " + " ".join(links))
    if window.has_next_page:
        print(f"Next: {page_url(window.current_page + 1, settings.base_path)}")
    return 0


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
