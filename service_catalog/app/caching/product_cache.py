"""
Server-side product list cache for the Catalog Service.
"""

import asyncio
import time
from typing import Any, Callable, Dict, List

from shared.fetch_cache import FetchResult, TimeBoxedFetchCache, DEFAULT_FETCH_TIMEOUT_SECONDS
from shared.logging import get_logger
from shared.models import Product

from ..catalog.products import generate_product_list


DEFAULT_SLIDING_TTL = 5 * 60
DEFAULT_ABSOLUTE_TTL = 30 * 60


class ProductListCache:
    """Product list cache with sliding expiration and an absolute ceiling."""

    def __init__(
        self,
        source: Callable[[], List[Product]] = generate_product_list,
        *,
        sliding_ttl_seconds: float = DEFAULT_SLIDING_TTL,
        absolute_ttl_seconds: float = DEFAULT_ABSOLUTE_TTL,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.source = source
        self.logger = get_logger("catalog.product_cache")
        self._cache: TimeBoxedFetchCache[Product] = TimeBoxedFetchCache(
            self._load,
            sliding_ttl_seconds,
            absolute_ttl_seconds=absolute_ttl_seconds,
            timeout_seconds=timeout_seconds,
            clock=clock,
            name="catalog",
        )

    async def _load(self) -> List[Product]:
        # The source is synchronous; keep it off the event loop
        products = await asyncio.to_thread(self.source)
        self.logger.info("Product list generated", count=len(products))
        return products

    async def get_products(self, force_refresh: bool = False) -> FetchResult[Product]:
        """Get the product list, generating it on a miss."""
        return await self._cache.get(force_refresh)

    def invalidate(self) -> None:
        """Clear the cached product list."""
        self._cache.invalidate()

    def stats(self) -> Dict[str, Any]:
        """Describe the current cache state."""
        entry = self._cache.entry
        return {
            "populated": entry is not None,
            "fresh": self._cache.is_fresh(),
            "records": len(entry.value) if entry is not None else 0,
            "sliding_ttl_seconds": self._cache.ttl_seconds,
            "absolute_ttl_seconds": self._cache.absolute_ttl_seconds,
        }

    @property
    def cache(self) -> TimeBoxedFetchCache[Product]:
        return self._cache


def build_product_cache(settings, clock: Callable[[], float] = time.monotonic) -> ProductListCache:
    """Build the product cache from service settings."""
    return ProductListCache(
        sliding_ttl_seconds=settings.server_cache_sliding_minutes * 60,
        absolute_ttl_seconds=settings.server_cache_absolute_minutes * 60,
        timeout_seconds=settings.request_timeout_seconds,
        clock=clock
    )
