"""
Catalog views module.

All views are exported from this module so urls.py has a single import path.
"""
from .product_views import (
    ProductIndexView, ProductCreateView, ProductWizardStepView,
    ProductEditView, ProductDetailView,
)
from .product_action_views import ProductColumnUpdateView, ProductBulkDeleteView, product_search
from .relation_views import (
    ProductTagsView, ProductTagDetachView,
    CategoryListView, CategoryDetailView, TagListView, TagDetailView,
)

__all__ = [
    'ProductIndexView',
    'ProductCreateView',
    'ProductWizardStepView',
    'ProductEditView',
    'ProductDetailView',
    'ProductColumnUpdateView',
    'ProductBulkDeleteView',
    'product_search',
    'ProductTagsView',
    'ProductTagDetachView',
    'CategoryListView',
    'CategoryDetailView',
    'TagListView',
    'TagDetailView',
]
