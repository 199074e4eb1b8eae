"""
Catalog caching package.

Server-side cache for the product list: sliding expiration bounded by an
absolute ceiling, with explicit invalidation.
"""

from .product_cache import ProductListCache

__all__ = ["ProductListCache"]
