"""
Shared utilities for the Product Catalog Access Layer.

This package aggregates common building blocks consumed by the catalog
service and the storefront client:

- config: Settings via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus HTTP metrics helpers
- errors: Canonical error types, including the upstream fetch taxonomy
- fetch_cache: Time-boxed single-entry fetch cache
- base_service: FastAPI service scaffold

Do not import from service packages into shared/.
"""
