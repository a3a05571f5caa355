"""
Catalog serializers module.

All serializers are exported from this module to maintain a single import path.
"""
from .product_serializers import (
    ProductFormSerializer, ProductFilterSerializer, ProductTableRowSerializer,
    ProductInfolistSerializer, ProductSearchResultSerializer, BulkDeleteSerializer,
)
from .relation_serializers import CategorySerializer, TagSerializer, TagAttachSerializer

__all__ = [
    'ProductFormSerializer',
    'ProductFilterSerializer',
    'ProductTableRowSerializer',
    'ProductInfolistSerializer',
    'ProductSearchResultSerializer',
    'BulkDeleteSerializer',
    'CategorySerializer',
    'TagSerializer',
    'TagAttachSerializer',
]
