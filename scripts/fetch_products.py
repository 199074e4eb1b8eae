#!/usr/bin/env python3
"""
Fetch the product list from the Catalog service through the Storefront cache.

Handy for checking a running catalog service from a developer workstation:
``--repeat`` issues several reads so cache hits show up in the log output.
"""

import argparse
import asyncio
import json
from pathlib import Path
import os

from shared.config import BaseConfig
from shared.logging import configure_logging
from storefront.adapters.catalog_client import CatalogClient
from storefront.services.product_service import ProductService


async def fetch(*, catalog_url: str, timeout: float, cache_minutes: float, repeat: int, refresh: bool) -> dict:
    """Read the product list ``repeat`` times and return the last outcome."""
    service = ProductService(CatalogClient(catalog_url, timeout_seconds=timeout), cache_minutes * 60)

    result = None
    for attempt in range(repeat):
        result = await service.fetch_products(force_refresh=refresh and attempt == 0)

    if not result.ok:
        return {"ok": False, "kind": result.error.kind.value, "message": result.error.message}
    return {
        "ok": True,
        "from_cache": result.from_cache,
        "products": [product.model_dump() for product in result.value],
    }


def _parse_args() -> argparse.Namespace:
    defaults = BaseConfig()
    parser = argparse.ArgumentParser(description="Fetch the product list via the client-side cache.")
    parser.add_argument("--catalog-url", default=defaults.catalog_service_url, help="Catalog service URL")
    parser.add_argument("--timeout", type=float, default=defaults.request_timeout_seconds, help="Request timeout in seconds")
    parser.add_argument("--cache-minutes", type=float, default=defaults.client_cache_minutes, help="Client cache freshness")
    parser.add_argument("--repeat", type=int, default=1, help="Number of reads to issue")
    parser.add_argument("--refresh", action="store_true", help="Bypass the cache on the first read")
    parser.add_argument("--log-level", default=os.getenv("CATALOG_LOG_LEVEL", "info"), help="Log level")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write JSON result")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    configure_logging("storefront", args.log_level)
    try:
        summary = asyncio.run(
            fetch(
                catalog_url=args.catalog_url,
                timeout=args.timeout,
                cache_minutes=args.cache_minutes,
                repeat=max(1, args.repeat),
                refresh=args.refresh,
            )
        )
    except KeyboardInterrupt:
        return 130

    print(json.dumps(summary, indent=2))

    if args.output:
        args.output.write_text(json.dumps(summary, indent=2))

    return 0 if summary["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
