"""
Shared configuration management for the Product Catalog Access Layer.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Upstream catalog service (client tier)
    catalog_service_url: str = "http://localhost:5000"
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    # Cache freshness
    client_cache_minutes: float = Field(default=5, gt=0)
    server_cache_sliding_minutes: float = Field(default=5, gt=0)
    server_cache_absolute_minutes: float = Field(default=30, gt=0)

    # HTTP response caching
    response_cache_seconds: int = Field(default=300, ge=0)

    # CORS
    cors_allow_origins: List[str] = ["*"]


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port)
