"""
Product resource pages: index, create, edit and view.
"""
import logging

from rest_framework import status
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..models import Product
from ..resources import CREATE, EDIT, ProductResource
from ..serializers import (
    ProductFormSerializer, ProductFilterSerializer,
    ProductTableRowSerializer, ProductInfolistSerializer,
)
from ..services import ProductService

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100


def get_product(record):
    try:
        return ProductService.base_queryset().get(pk=record)
    except Product.DoesNotExist:
        return None


def page_params(request):
    try:
        page = max(int(request.GET.get('page', 1)), 1)
        page_size = int(request.GET.get('pageSize', DEFAULT_PAGE_SIZE))
    except ValueError:
        return 1, DEFAULT_PAGE_SIZE
    return page, min(max(page_size, 1), MAX_PAGE_SIZE)


class ProductIndexView(APIView):
    """Product table - GET /api/products/"""

    def get(self, request):
        filter_serializer = ProductFilterSerializer(data=request.query_params)
        if not filter_serializer.is_valid():
            return error_response('Invalid filters', errors=filter_serializer.errors)

        params = filter_serializer.validated_data
        products = ProductService.list_products(
            filters=filter_serializer.get_filters(),
            sort=params.get('sort'),
            search=params.get('search'),
        )

        page, page_size = page_params(request)
        total = products.count()
        start_index = (page - 1) * page_size
        page_products = products[start_index:start_index + page_size]

        table = ProductResource.table()
        response_data = {
            'navigation': ProductResource.navigation(),
            'table': table.to_dict(),
            'list': ProductTableRowSerializer(page_products, many=True).data,
            'page': {
                'pageNum': page,
                'pageSize': page_size,
                'total': total,
                'totalPages': (total + page_size - 1) // page_size,
            },
        }
        if total == 0:
            response_data['empty_state'] = {
                'actions': [
                    {'name': action, 'url': ProductResource.get_url(action)}
                    for action in table.empty_state_actions
                ],
            }
        return success_response(response_data, 'Products loaded')


class ProductCreateView(APIView):
    """Create page - GET form schema, POST store a product"""

    def get(self, request):
        return success_response({'form': ProductResource.form().to_dict(CREATE)})

    def post(self, request):
        serializer = ProductFormSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        product = serializer.save()
        return success_response({
            'id': product.pk,
            'slug': product.slug,
            'url': ProductResource.get_url('view', product),
        }, 'Product created', status_code=status.HTTP_201_CREATED)


class ProductWizardStepView(APIView):
    """
    Validate a single wizard step - POST /api/products/create/steps/{step}/

    The response carries the values of fields that depend on the submitted
    ones (the slug derived from the name), as the form would after blur.
    """

    def post(self, request, step):
        form = ProductResource.form()
        try:
            form_step = form.step(step)
        except IndexError:
            return error_response(f'Unknown step {step}', status_code=status.HTTP_404_NOT_FOUND)

        fills = {}
        for form_field in form_step.visible_fields(CREATE):
            if form_field.name in request.data:
                fills.update(form_field.updated_state(request.data.get(form_field.name)))

        data = request.data.copy()
        for name, value in fills.items():
            if not data.get(name):
                data[name] = value

        serializer = ProductFormSerializer(data=data, step=step)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        return success_response({
            'step': step,
            'label': form_step.label,
            'fills': fills,
            'is_last': step == len(form.steps),
        }, 'Step is valid')


class ProductEditView(APIView):
    """Edit page - GET form schema with values, PUT/PATCH update"""

    def get(self, request, record):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        return success_response({
            'form': ProductResource.form().to_dict(EDIT),
            'values': ProductFormSerializer(product).data,
        })

    def put(self, request, record):
        return self._update(request, record, partial=False)

    def patch(self, request, record):
        return self._update(request, record, partial=True)

    def _update(self, request, record, partial):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = ProductFormSerializer(product, data=request.data, partial=partial)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        serializer.save()
        return success_response(ProductFormSerializer(product).data, 'Product updated')


class ProductDetailView(APIView):
    """View page - GET infolist, DELETE removes the product"""

    def get(self, request, record):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        return success_response(ProductInfolistSerializer(product).data)

    def delete(self, request, record):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        ProductService.delete_product(product)
        return success_response(None, 'Product deleted')
