"""
Product serializers for the wizard form, table rows, infolist and filters.
"""
from rest_framework import serializers

from ..models import Category, Product
from ..resources import CREATE, EDIT, ProductResource
from ..services import ProductService


class ProductFormSerializer(serializers.ModelSerializer):
    """
    Create/edit form behind the two-step wizard.

    Pass ``step`` to validate a single wizard step; the serializer then only
    carries that step's visible fields.
    """
    slug = serializers.SlugField(max_length=255, required=False, allow_blank=True)
    price = serializers.IntegerField(min_value=0, help_text="Price in cents")
    status = serializers.ChoiceField(choices=list(ProductResource.statuses.items()), required=False)
    category_id = serializers.PrimaryKeyRelatedField(
        source='category',
        queryset=Category.objects.all(),
        allow_null=True,
        required=False,
    )

    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'price', 'status', 'category_id']
        read_only_fields = ['id']

    def __init__(self, *args, step=None, **kwargs):
        self.step = step
        super().__init__(*args, **kwargs)

    @property
    def operation(self):
        return EDIT if self.instance is not None else CREATE

    def get_fields(self):
        fields = super().get_fields()
        form = ProductResource.form()
        if self.step is not None:
            visible = form.step(self.step).visible_fields(self.operation)
        else:
            visible = form.fields(self.operation)
        allowed = {form_field.name for form_field in visible} | {'id'}
        return {name: field for name, field in fields.items() if name in allowed}

    def create(self, validated_data):
        return ProductService.create_product(validated_data)

    def update(self, instance, validated_data):
        return ProductService.update_product(instance, validated_data)


class ProductFilterSerializer(serializers.Serializer):
    """Query parameters of the product table"""
    status = serializers.ChoiceField(choices=list(ProductResource.statuses.items()), required=False)
    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all(), required=False)
    created_from = serializers.DateField(required=False)
    created_until = serializers.DateField(required=False)
    sort = serializers.CharField(required=False)
    search = serializers.CharField(required=False, allow_blank=True)

    def validate_sort(self, value):
        sortable = [column.name for column in ProductResource.table().sortable_columns()]
        if (value[1:] if value.startswith('-') else value) not in sortable:
            raise serializers.ValidationError(f"Sort must be one of: {', '.join(sortable)}")
        return value

    def validate_category(self, value):
        return value.pk

    def get_filters(self):
        table = ProductResource.table()
        return {
            table_filter.name: self.validated_data[table_filter.name]
            for table_filter in table.filters
            if table_filter.name in self.validated_data
        }


class ProductTableRowSerializer(serializers.BaseSerializer):
    """One table row: raw column state, formatted display values and row action URLs"""

    def to_representation(self, instance):
        row = ProductResource.table().row(instance)
        row['urls'] = {
            'view': ProductResource.get_url('view', instance),
            'edit': ProductResource.get_url('edit', instance),
        }
        return row


class ProductInfolistSerializer(serializers.BaseSerializer):

    def to_representation(self, instance):
        data = {
            'id': instance.pk,
            'title': ProductResource.get_record_title(instance),
        }
        data.update(ProductResource.infolist().to_dict(instance))
        return data


class ProductSearchResultSerializer(serializers.BaseSerializer):
    """Global search hit linking to the record's view page"""

    def to_representation(self, instance):
        return {
            'id': instance.pk,
            'title': ProductResource.get_record_title(instance),
            'url': ProductResource.get_global_search_result_url(instance),
        }


class BulkDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)
