"""
Adapters package for the Storefront.

Contains the HTTP client for the Catalog service. Transport failures,
non-success statuses, and malformed payloads are mapped onto the shared
fetch error taxonomy here, so nothing above this layer sees httpx errors.
"""

from .catalog_client import CatalogClient

__all__ = ["CatalogClient"]
