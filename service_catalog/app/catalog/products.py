"""
Hardcoded product list served by the Catalog Service.
"""

from typing import List

from shared.models import Category, Product


def generate_product_list() -> List[Product]:
    """Build the product list."""
    return [
        Product(
            id=1,
            name="Laptop",
            price=1200.50,
            stock=25,
            category=Category(id=101, name="Electronics")
        ),
        Product(
            id=2,
            name="Headphones",
            price=50.00,
            stock=100,
            category=Category(id=102, name="Accessories")
        ),
    ]
