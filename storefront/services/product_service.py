"""
Product service for the Storefront.

Wraps the catalog client in a client-side time-boxed cache. Callers get a
``FetchResult`` back and decide for themselves whether to retry, typically by
calling ``fetch_products(force_refresh=True)`` from a refresh action.
"""

import time
from typing import Callable, Optional

from shared.config import BaseConfig
from shared.fetch_cache import FetchResult, TimeBoxedFetchCache
from shared.models import Product

from ..adapters.catalog_client import CatalogClient


DEFAULT_CACHE_MINUTES = 5


class ProductService:
    """Client-side product list access with a fixed freshness window."""

    def __init__(
        self,
        client: CatalogClient,
        cache_duration_seconds: float = DEFAULT_CACHE_MINUTES * 60,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self._cache: TimeBoxedFetchCache[Product] = TimeBoxedFetchCache(
            client.get_product_list,
            cache_duration_seconds,
            timeout_seconds=client.timeout_seconds,
            clock=clock,
            name="storefront",
        )

    @classmethod
    def from_settings(cls, settings: Optional[BaseConfig] = None, **kwargs) -> "ProductService":
        """Build a service from settings (environment by default)."""
        settings = settings or BaseConfig()
        client = CatalogClient(
            settings.catalog_service_url,
            timeout_seconds=settings.request_timeout_seconds
        )
        return cls(client, settings.client_cache_minutes * 60, **kwargs)

    async def fetch_products(self, force_refresh: bool = False) -> FetchResult[Product]:
        """Get products, from the cache when fresh."""
        return await self._cache.get(force_refresh)

    def clear_cache(self) -> None:
        """Drop cached products."""
        self._cache.invalidate()

    @property
    def cache(self) -> TimeBoxedFetchCache[Product]:
        return self._cache
