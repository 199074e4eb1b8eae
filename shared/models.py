"""
Product catalog records exchanged between the catalog service and its clients.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """Product category."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class Product(BaseModel):
    """Catalog product. ``category`` may be absent."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float
    stock: int
    category: Optional[Category] = None
