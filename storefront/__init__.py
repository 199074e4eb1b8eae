"""
Storefront client package for the Product Catalog Access Layer.

Structure:
- adapters: HTTP client for the Catalog service.
- services: Product service with the client-side time-boxed cache.
"""
