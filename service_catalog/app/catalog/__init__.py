"""
Product list source for the Catalog Service.
"""

from .products import generate_product_list

__all__ = ["generate_product_list"]
