"""
Catalog service for the Product Catalog Access Layer.
"""

from typing import Dict, List

from fastapi import Query, Response

from shared.base_service import BaseService
from shared.models import Product

from .caching.product_cache import build_product_cache


class CatalogService(BaseService):
    """Catalog service implementation."""

    def __init__(self):
        super().__init__("catalog", 5000)

        self.product_cache = build_product_cache(self.config)
        self.cache_control = f"public, max-age={self.config.response_cache_seconds}"

        self._setup_catalog_routes()

    def _setup_catalog_routes(self):
        """Set up catalog-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "catalog",
                "message": "Product Catalog Access Layer - Catalog Service",
                "version": "1.0.0"
            }

        @self.app.get("/api/productlist", response_model=List[Product])
        async def get_product_list(
            response: Response,
            refresh: bool = Query(False, description="Bypass the server cache")
        ):
            """Get the product list."""
            result = await self.product_cache.get_products(force_refresh=refresh)
            # FetchError propagates to the shared exception handler
            products = result.unwrap()

            response.headers["Cache-Control"] = self.cache_control
            response.headers["X-Cache"] = "HIT" if result.from_cache else "MISS"
            return products

        @self.app.delete("/api/productlist/cache")
        async def clear_product_cache():
            """Invalidate the server-side product list cache."""
            self.product_cache.invalidate()
            return {"cleared": True}

        @self.app.get("/api/productlist/cache")
        async def product_cache_status():
            """Describe the server-side product list cache."""
            return self.product_cache.stats()

    async def _check_dependencies(self) -> Dict[str, str]:
        return {"product_cache": "fresh" if self.product_cache.cache.is_fresh() else "cold"}


def create_app():
    """Create FastAPI application."""
    service = CatalogService()
    return service.app


if __name__ == "__main__":
    service = CatalogService()
    service.run()
