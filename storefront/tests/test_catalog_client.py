"""
Unit tests for Storefront Catalog Client.
"""

import pytest
import httpx
import json
from unittest.mock import AsyncMock, patch

from storefront.adapters.catalog_client import CatalogClient
from shared.errors import (
    FetchConnectionError,
    FetchDecodeError,
    FetchTimeoutError,
    UpstreamServerError,
)
from shared.models import Product


PRODUCT_LIST_URL = "http://localhost:5000/api/productlist"


def _response(status_code: int, content: str) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=content,
        request=httpx.Request("GET", PRODUCT_LIST_URL)
    )


class TestCatalogClient:
    """Test cases for CatalogClient."""

    @pytest.fixture
    def catalog_client(self):
        """Create CatalogClient instance."""
        return CatalogClient("http://localhost:5000/")

    @pytest.fixture
    def mock_products(self):
        """Mock product list payload."""
        return [
            {
                "id": 1,
                "name": "Laptop",
                "price": 1200.50,
                "stock": 25,
                "category": {"id": 101, "name": "Electronics"}
            },
            {
                "id": 2,
                "name": "Headphones",
                "price": 50.00,
                "stock": 100
            }
        ]

    @pytest.mark.asyncio
    async def test_get_product_list_success(self, catalog_client, mock_products):
        """Test successful product list fetch."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_get = AsyncMock(return_value=_response(200, json.dumps(mock_products)))
            mock_client.return_value.__aenter__.return_value.get = mock_get

            result = await catalog_client.get_product_list()

            mock_get.assert_awaited_once_with(PRODUCT_LIST_URL)
            assert len(result) == 2
            assert all(isinstance(product, Product) for product in result)
            assert result[0].category.name == "Electronics"
            assert result[1].category is None

    @pytest.mark.asyncio
    async def test_client_uses_configured_timeout(self, mock_products):
        """Test the request timeout is passed to httpx."""
        client = CatalogClient("http://localhost:5000", timeout_seconds=3.5)

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, json.dumps(mock_products))
            )

            await client.get_product_list()

            assert mock_client.call_args.kwargs["timeout"] == 3.5

    @pytest.mark.asyncio
    async def test_timeout_maps_to_fetch_timeout(self, catalog_client):
        """Test httpx timeouts become FetchTimeoutError."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(FetchTimeoutError) as exc_info:
                await catalog_client.get_product_list()

            assert exc_info.value.timeout_seconds == 10.0

    @pytest.mark.asyncio
    async def test_connect_error_maps_to_connection_error(self, catalog_client):
        """Test transport failures become FetchConnectionError."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("Connection refused")
            )

            with pytest.raises(FetchConnectionError) as exc_info:
                await catalog_client.get_product_list()

            assert "Connection refused" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_server_error_status(self, catalog_client):
        """Test non-success status becomes UpstreamServerError."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(503, "unavailable")
            )

            with pytest.raises(UpstreamServerError) as exc_info:
                await catalog_client.get_product_list()

            assert exc_info.value.status_code == 503
            assert exc_info.value.reason == "Service Unavailable"

    @pytest.mark.asyncio
    async def test_invalid_json_is_decode_error(self, catalog_client):
        """Test malformed JSON becomes FetchDecodeError."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, "not json")
            )

            with pytest.raises(FetchDecodeError):
                await catalog_client.get_product_list()

    @pytest.mark.asyncio
    async def test_null_payload_is_decode_error(self, catalog_client):
        """Test a null body becomes FetchDecodeError without detail."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, "null")
            )

            with pytest.raises(FetchDecodeError) as exc_info:
                await catalog_client.get_product_list()

            assert exc_info.value.message == "Received invalid data from the server."

    @pytest.mark.asyncio
    async def test_schema_mismatch_is_decode_error(self, catalog_client):
        """Test records missing required fields become FetchDecodeError."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, json.dumps([{"id": 1, "name": "Laptop"}]))
            )

            with pytest.raises(FetchDecodeError):
                await catalog_client.get_product_list()
