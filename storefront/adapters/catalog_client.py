"""
Catalog service client for the Storefront.
"""

from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from shared.errors import (
    FetchConnectionError,
    FetchDecodeError,
    FetchTimeoutError,
    UpstreamServerError,
)
from shared.fetch_cache import DEFAULT_FETCH_TIMEOUT_SECONDS
from shared.logging import get_logger
from shared.models import Product


PRODUCT_LIST_PATH = "/api/productlist"

_product_list_adapter = TypeAdapter(List[Product])


class CatalogClient:
    """Client for retrieving the product list from the Catalog service."""

    def __init__(
        self,
        catalog_service_url: str,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = catalog_service_url.rstrip('/')
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self.logger = get_logger("storefront.catalog_client")

    async def get_product_list(self) -> List[Product]:
        """Fetch the product list. Raises a FetchError subclass on failure."""
        url = f"{self.base_url}{PRODUCT_LIST_PATH}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.TimeoutException as exc:
            self.logger.warning("Catalog request timed out", url=url, error=str(exc))
            raise FetchTimeoutError(self.timeout_seconds) from exc
        except httpx.HTTPError as exc:
            self.logger.error("Catalog service unreachable", url=url, error=str(exc))
            raise FetchConnectionError(str(exc)) from exc

        if not response.is_success:
            self.logger.error(
                "Catalog request failed",
                url=url,
                status_code=response.status_code,
                response=response.text
            )
            raise UpstreamServerError(response.status_code, response.reason_phrase)

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> List[Product]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchDecodeError(str(exc)) from exc

        if payload is None:
            raise FetchDecodeError()

        try:
            products = _product_list_adapter.validate_python(payload)
        except ValidationError as exc:
            raise FetchDecodeError(str(exc)) from exc

        self.logger.debug("Product list retrieved", count=len(products))
        return products
