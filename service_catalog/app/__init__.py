"""
Catalog Service package for the Product Catalog Access Layer.

Serves the product list over HTTP from a server-side time-boxed cache.

Structure:
- app.main: FastAPI app, routes, and middleware wiring.
- app.catalog: Product list source.
- app.caching: Server-side product list cache.
"""
