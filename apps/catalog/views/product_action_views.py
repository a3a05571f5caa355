"""
Table row, bulk and global search actions for products.
"""
from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..resources import ProductResource
from ..serializers import BulkDeleteSerializer, ProductSearchResultSerializer, ProductTableRowSerializer
from ..services import ProductService
from .product_views import get_product


class ProductColumnUpdateView(APIView):
    """Inline table edit - PATCH /api/products/{id}/columns/{column}/ with {"value": ...}"""

    def patch(self, request, record, column):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        if 'value' not in request.data:
            return error_response('Validation error', errors={'value': ['This field is required.']})

        try:
            ProductService.update_column(product, column, request.data['value'])
        except KeyError:
            return error_response(f'Unknown column {column}', status_code=status.HTTP_404_NOT_FOUND)
        except ValidationError as e:
            return error_response('Validation error', errors=e.message_dict)

        return success_response(ProductTableRowSerializer(product).data, 'Column updated')


class ProductBulkDeleteView(APIView):
    """Bulk delete action - POST /api/products/bulk-delete/ with {"ids": [...]}"""

    def post(self, request):
        if 'delete' not in [action for group in ProductResource.table().bulk_actions for action in group]:
            return error_response('Bulk delete is not available', status_code=status.HTTP_403_FORBIDDEN)

        serializer = BulkDeleteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        deleted = ProductService.bulk_delete(serializer.validated_data['ids'])
        return success_response({'deleted': deleted}, f'{deleted} products deleted')


@api_view(['GET'])
def product_search(request):
    """Global search by record title, limited to a few results"""
    query = request.GET.get('q', '').strip()
    if not query:
        return error_response('Search term must not be empty')

    products = ProductService.global_search(query)
    return success_response(ProductSearchResultSerializer(products, many=True).data)
