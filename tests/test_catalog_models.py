"""
Tests for catalog models and their relational constraints.
"""
from decimal import Decimal

import pytest
from django.db import IntegrityError
from django.db.models import ProtectedError

from apps.catalog.models import Category, Product, ProductStatus, ProductTag, Tag
from tests.factories import CategoryFactory, ProductFactory, TagFactory

pytestmark = pytest.mark.django_db


def test_slug_is_derived_from_name_on_create():
    product = Product.objects.create(name='Widget', price=1999)

    assert product.slug == 'widget'


def test_slug_is_not_rederived_when_name_changes():
    product = Product.objects.create(name='Widget', price=1999)

    product.name = 'Super Widget'
    product.save()
    product.refresh_from_db()

    assert product.slug == 'widget'


def test_price_amount_is_cents_divided_by_100():
    product = ProductFactory(price=1999)

    assert product.price_amount == Decimal('19.99')


def test_product_defaults():
    product = Product.objects.create(name='Plain', price=100)

    assert product.status == ProductStatus.IN_STOCK
    assert product.is_active is True
    assert product.category is None


def test_name_is_unique():
    Product.objects.create(name='Widget', price=100)

    with pytest.raises(IntegrityError):
        Product.objects.create(name='Widget', price=200)


def test_deleting_product_removes_product_tag_rows():
    tag = TagFactory(name='new')
    product = ProductFactory(tags=[tag])
    assert ProductTag.objects.filter(product=product).count() == 1

    product.delete()

    assert ProductTag.objects.count() == 0
    assert Tag.objects.filter(pk=tag.pk).exists()


def test_category_in_use_cannot_be_deleted():
    category = CategoryFactory()
    ProductFactory(category=category)

    with pytest.raises(ProtectedError):
        category.delete()
    assert Category.objects.filter(pk=category.pk).exists()


def test_attached_tag_cannot_be_deleted():
    tag = TagFactory()
    ProductFactory(tags=[tag])

    with pytest.raises(ProtectedError):
        tag.delete()


def test_category_has_many_products():
    category = CategoryFactory()
    ProductFactory.create_batch(3, category=category)

    assert category.products.count() == 3
