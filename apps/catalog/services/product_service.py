"""
Product service for create, update, listing and bulk operations.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.utils.text import slugify

from ..models import Product, ProductTag
from ..resources import ProductResource

logger = logging.getLogger(__name__)

# Slug is fixed once the product exists
IMMUTABLE_FIELDS = ('slug',)


class ProductService:
    """Service for product operations behind the admin resource"""

    @staticmethod
    def base_queryset():
        return Product.objects.select_related('category').prefetch_related('tags')

    @staticmethod
    @transaction.atomic
    def create_product(validated_data, tags=None):
        """
        Create a product, deriving its slug from the name when none is given.

        Args:
            validated_data: Validated product field values
            tags: Optional iterable of Tag instances to attach

        Returns:
            Product: Created product instance
        """
        data = dict(validated_data)
        if not data.get('slug'):
            data['slug'] = slugify(data['name'])

        product = Product.objects.create(**data)
        if tags:
            ProductService.attach_tags(product, tags)

        logger.info("Created product %s (slug=%s)", product.pk, product.slug)
        return product

    @staticmethod
    def update_product(instance, validated_data):
        """
        Update product fields. The slug is never changed, even when the name is.

        Args:
            instance: Product instance to update
            validated_data: Validated product field values

        Returns:
            Product: Updated product instance
        """
        changed = []
        for attr, value in validated_data.items():
            if attr in IMMUTABLE_FIELDS:
                continue
            setattr(instance, attr, value)
            changed.append(attr)

        if changed:
            instance.save(update_fields=changed + ['updated_at'])
            logger.info("Updated product %s fields %s", instance.pk, ', '.join(changed))
        return instance

    @staticmethod
    def update_column(instance, column_name, value):
        """
        Inline table edit of a single editable column.

        Raises:
            KeyError: If the table has no such column
            ValidationError: If the column is not editable or the value
                breaks the column's rules
        """
        column = ProductResource.table().column(column_name)
        if not column.editable:
            raise ValidationError({column_name: 'This column cannot be edited.'})

        if column.kind == 'toggle':
            if not isinstance(value, bool):
                raise ValidationError({column_name: 'Must be true or false.'})
        elif column.kind == 'select':
            if not isinstance(value, str) or value not in column.options:
                raise ValidationError({column_name: f'"{value}" is not a valid choice.'})
        else:
            if value is not None and not isinstance(value, str):
                raise ValidationError({column_name: 'Not a valid string.'})
            ProductService.check_rules(column, value)
            try:
                value = Product._meta.get_field(column_name).clean(value, instance)
            except ValidationError as e:
                raise ValidationError({column_name: e.messages})
            if column_name == 'name':
                clash = Product.objects.filter(name=value).exclude(pk=instance.pk).exists()
                if clash:
                    raise ValidationError({column_name: 'Product with this name already exists.'})

        return ProductService.update_product(instance, {column_name: value})

    @staticmethod
    def check_rules(column, value):
        """Validate a value against rules like ``required`` and ``min:3``"""
        for rule in column.rules:
            rule_name, _, argument = rule.partition(':')
            if rule_name == 'required' and (value is None or str(value).strip() == ''):
                raise ValidationError({column.name: 'This field is required.'})
            if rule_name == 'min' and len(str(value or '')) < int(argument):
                raise ValidationError({column.name: f'Ensure this value has at least {argument} characters.'})

    @staticmethod
    def list_products(filters=None, sort=None, search=None):
        """
        Products for the table view.

        Args:
            filters: Mapping of table filter name to value
            sort: Optional column name, prefixed with ``-`` for descending
            search: Optional search term matched against searchable columns

        Returns:
            QuerySet: Filtered and ordered products (default: price descending)
        """
        table = ProductResource.table()
        queryset = table.apply_filters(ProductService.base_queryset(), filters or {})

        if search:
            query = Q()
            for column in table.searchable_columns():
                query |= Q(**{f"{column.name}__icontains": search})
            queryset = queryset.filter(query)

        return queryset.order_by(*table.ordering(sort))

    @staticmethod
    def global_search(term):
        """Up to ``global_search_results_limit`` products whose title matches ``term``"""
        attribute = ProductResource.record_title_attribute
        return list(
            Product.objects.filter(**{f"{attribute}__icontains": term})
            .order_by(attribute)[:ProductResource.global_search_results_limit]
        )

    @staticmethod
    def delete_product(instance):
        pk = instance.pk
        instance.delete()
        logger.info("Deleted product %s", pk)

    @staticmethod
    @transaction.atomic
    def bulk_delete(ids):
        """Delete the given products; returns the number of products removed"""
        queryset = Product.objects.filter(pk__in=ids)
        count = queryset.count()
        queryset.delete()
        logger.info("Bulk deleted %s products", count)
        return count

    @staticmethod
    def attach_tags(product, tags):
        """Attach tags, skipping ones already attached"""
        existing = set(product.product_tags.values_list('tag_id', flat=True))
        new_links = [ProductTag(product=product, tag=tag) for tag in tags if tag.pk not in existing]
        ProductTag.objects.bulk_create(new_links)
        if new_links:
            logger.info("Attached %s tags to product %s", len(new_links), product.pk)
        return product

    @staticmethod
    def detach_tag(product, tag):
        """Detach a tag; returns False when it was not attached"""
        deleted, _ = ProductTag.objects.filter(product=product, tag=tag).delete()
        if deleted:
            logger.info("Detached tag %s from product %s", tag.pk, product.pk)
        return bool(deleted)

    @staticmethod
    def tags_for(product):
        return product.tags.order_by('name')
