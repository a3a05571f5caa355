"""
Catalog models module.

All models are exported from this module so callers can import them from
``apps.catalog.models`` directly.
"""
from .category import Category
from .tag import Tag
from .product import Product, ProductStatus
from .product_tag import ProductTag

__all__ = [
    'Category',
    'Tag',
    'Product',
    'ProductStatus',
    'ProductTag',
]
