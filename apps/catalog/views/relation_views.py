"""
Tags relation manager for a product, plus category and tag records used as
select options.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..models import Category, Tag
from ..serializers import CategorySerializer, TagSerializer, TagAttachSerializer
from ..services import ProductService
from .product_views import get_product


class ProductTagsView(APIView):
    """GET attached tags, POST {"tag_ids": [...]} to attach"""

    def get(self, request, record):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        tags = ProductService.tags_for(product)
        return success_response(TagSerializer(tags, many=True).data)

    def post(self, request, record):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = TagAttachSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        ProductService.attach_tags(product, serializer.validated_data['tag_ids'])
        tags = ProductService.tags_for(product)
        return success_response(TagSerializer(tags, many=True).data, 'Tags attached')


class ProductTagDetachView(APIView):

    def delete(self, request, record, tag_id):
        product = get_product(record)
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        try:
            tag = Tag.objects.get(pk=tag_id)
        except Tag.DoesNotExist:
            return error_response('Tag not found', status_code=status.HTTP_404_NOT_FOUND)

        if not ProductService.detach_tag(product, tag):
            return error_response('Tag is not attached to this product', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(None, 'Tag detached')


class NamedRecordListView(APIView):
    """List and create records that only carry a name"""
    model = None
    serializer_class = None

    def get(self, request):
        records = self.model.objects.order_by('name')
        return success_response(self.serializer_class(records, many=True).data)

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Created', status_code=status.HTTP_201_CREATED)


class NamedRecordDetailView(APIView):
    """Rename or delete a record; deleting one still in use answers 409"""
    model = None
    serializer_class = None

    def _get(self, pk):
        try:
            return self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            return None

    def put(self, request, pk):
        record = self._get(pk)
        if record is None:
            return error_response('Record not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = self.serializer_class(record, data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Updated')

    def delete(self, request, pk):
        record = self._get(pk)
        if record is None:
            return error_response('Record not found', status_code=status.HTTP_404_NOT_FOUND)

        # ProtectedError is turned into a 409 by the API exception handler
        record.delete()
        return success_response(None, 'Deleted')


class CategoryListView(NamedRecordListView):
    model = Category
    serializer_class = CategorySerializer


class CategoryDetailView(NamedRecordDetailView):
    model = Category
    serializer_class = CategorySerializer


class TagListView(NamedRecordListView):
    model = Tag
    serializer_class = TagSerializer


class TagDetailView(NamedRecordDetailView):
    model = Tag
    serializer_class = TagSerializer
