from django.urls import path
from . import views
from .resources import ProductResource

app_name = 'catalog'

# Resource pages, bound from the resource route map
page_views = {
    'index': views.ProductIndexView,
    'create': views.ProductCreateView,
    'edit': views.ProductEditView,
    'view': views.ProductDetailView,
}

prefix = f'{ProductResource.slug}/'

urlpatterns = [
    path(f'{prefix}search/', views.product_search, name='product-search'),
    path(f'{prefix}bulk-delete/', views.ProductBulkDeleteView.as_view(), name='product-bulk-delete'),
    path(f'{prefix}create/steps/<int:step>/', views.ProductWizardStepView.as_view(), name='product-wizard-step'),
    path(f'{prefix}<int:record>/columns/<str:column>/', views.ProductColumnUpdateView.as_view(), name='product-column'),

    # Tags relation manager
    path(f'{prefix}<int:record>/tags/', views.ProductTagsView.as_view(), name='product-tags'),
    path(f'{prefix}<int:record>/tags/<int:tag_id>/', views.ProductTagDetachView.as_view(), name='product-tag-detach'),

    # Select options
    path('categories/', views.CategoryListView.as_view(), name='category-list'),
    path('categories/<int:pk>/', views.CategoryDetailView.as_view(), name='category-detail'),
    path('tags/', views.TagListView.as_view(), name='tag-list'),
    path('tags/<int:pk>/', views.TagDetailView.as_view(), name='tag-detail'),
]

urlpatterns += [
    path(f'{prefix}{page.pattern}', page_views[name].as_view(), name=f'product-{name}')
    for name, page in ProductResource.get_pages().items()
]
