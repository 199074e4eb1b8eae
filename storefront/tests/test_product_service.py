"""
Unit tests for Storefront Product Service.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from storefront.adapters.catalog_client import CatalogClient
from storefront.services.product_service import ProductService
from shared.config import BaseConfig
from shared.errors import FetchErrorKind, FetchTimeoutError
from shared.models import Category, Product


class FakeClock:
    """Manually advanced clock."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestProductService:
    """Test cases for ProductService."""

    @pytest.fixture
    def mock_products(self):
        return [
            Product(id=1, name="Laptop", price=1200.50, stock=25, category=Category(id=101, name="Electronics")),
            Product(id=2, name="Headphones", price=50.00, stock=100, category=Category(id=102, name="Accessories")),
        ]

    @pytest.fixture
    def catalog_client(self, mock_products):
        client = MagicMock(spec=CatalogClient)
        client.timeout_seconds = 10.0
        client.get_product_list = AsyncMock(return_value=mock_products)
        return client

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def product_service(self, catalog_client, clock):
        return ProductService(catalog_client, 5 * 60, clock=clock)

    @pytest.mark.asyncio
    async def test_fetch_products_miss_then_hit(self, product_service, catalog_client, mock_products):
        """Second read within the window is served from the cache."""
        first = await product_service.fetch_products()
        second = await product_service.fetch_products()

        assert first.value == mock_products
        assert first.from_cache is False
        assert second.value == mock_products
        assert second.from_cache is True
        catalog_client.get_product_list.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fetch_products_after_expiry(self, product_service, catalog_client, clock):
        """Reads after five minutes go back to the catalog."""
        await product_service.fetch_products()
        clock.now += 5 * 60 + 1

        result = await product_service.fetch_products()

        assert result.from_cache is False
        assert catalog_client.get_product_list.await_count == 2

    @pytest.mark.asyncio
    async def test_force_refresh(self, product_service, catalog_client):
        """force_refresh always reaches the catalog."""
        await product_service.fetch_products()
        await product_service.fetch_products(force_refresh=True)

        assert catalog_client.get_product_list.await_count == 2

    @pytest.mark.asyncio
    async def test_clear_cache(self, product_service, catalog_client):
        """clear_cache forces the next read upstream and is idempotent."""
        await product_service.fetch_products()

        product_service.clear_cache()
        product_service.clear_cache()

        assert product_service.cache.entry is None
        await product_service.fetch_products()
        assert catalog_client.get_product_list.await_count == 2

    @pytest.mark.asyncio
    async def test_error_is_returned_not_raised(self, product_service, catalog_client, clock, mock_products):
        """A failed refresh returns the error even when stale data exists."""
        await product_service.fetch_products()
        clock.now += 6 * 60
        catalog_client.get_product_list.side_effect = FetchTimeoutError(10)

        result = await product_service.fetch_products()

        assert not result.ok
        assert result.value is None
        assert result.error.kind is FetchErrorKind.TIMEOUT
        assert product_service.cache.entry.value == mock_products

    def test_uses_client_timeout(self, catalog_client):
        catalog_client.timeout_seconds = 2.5

        service = ProductService(catalog_client)

        assert service.cache.timeout_seconds == 2.5
        assert service.cache.ttl_seconds == 300

    def test_from_settings(self):
        settings = BaseConfig(
            catalog_service_url="http://catalog:8080",
            request_timeout_seconds=4,
            client_cache_minutes=2
        )

        service = ProductService.from_settings(settings)

        assert service.client.base_url == "http://catalog:8080"
        assert service.client.timeout_seconds == 4
        assert service.cache.ttl_seconds == 120
        assert service.cache.sliding is False
