"""
Tests for ProductService: slug handling, table listing and inline edits.
"""
from datetime import datetime

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.catalog.models import Product, ProductStatus, ProductTag
from apps.catalog.services import ProductService
from tests.factories import CategoryFactory, ProductFactory, TagFactory, set_created_at

pytestmark = pytest.mark.django_db


def aware(year, month, day, hour=12):
    return timezone.make_aware(datetime(year, month, day, hour))


class TestCreateAndUpdate:

    def test_create_derives_slug(self):
        product = ProductService.create_product({'name': 'Widget', 'price': 1999})

        assert product.slug == 'widget'
        assert product.price == 1999

    def test_create_keeps_given_slug(self):
        product = ProductService.create_product({'name': 'Widget', 'slug': 'custom-widget', 'price': 1})

        assert product.slug == 'custom-widget'

    def test_create_attaches_tags(self):
        tags = [TagFactory(name='new'), TagFactory(name='sale')]

        product = ProductService.create_product({'name': 'Widget', 'price': 1}, tags=tags)

        assert sorted(t.name for t in product.tags.all()) == ['new', 'sale']

    def test_update_never_changes_slug(self):
        product = ProductService.create_product({'name': 'Widget', 'price': 1999})

        ProductService.update_product(product, {'name': 'Gizmo', 'slug': 'gizmo', 'price': 2500})
        product.refresh_from_db()

        assert product.name == 'Gizmo'
        assert product.price == 2500
        assert product.slug == 'widget'

    def test_uncategorized_product_is_valid(self):
        product = ProductService.create_product({'name': 'Loose', 'price': 10, 'category': None})

        assert product.category is None


class TestListProducts:

    def test_default_sort_is_price_descending(self):
        for price in (500, 1999, 100, 7500):
            ProductFactory(price=price)

        products = ProductService.list_products()

        assert [p.price for p in products] == [7500, 1999, 500, 100]

    def test_no_filters_returns_all_products(self):
        ProductFactory.create_batch(4)

        assert ProductService.list_products({}).count() == 4

    def test_explicit_sort(self):
        ProductFactory(name='Bravo', price=1)
        ProductFactory(name='Alpha', price=2)

        products = ProductService.list_products(sort='name')

        assert [p.name for p in products] == ['Alpha', 'Bravo']

    def test_unsortable_column_falls_back_to_default(self):
        ProductFactory(price=1)
        ProductFactory(price=2)

        products = ProductService.list_products(sort='status')

        assert [p.price for p in products] == [2, 1]

    def test_created_from_is_inclusive_lower_bound(self):
        early = set_created_at(ProductFactory(), aware(2024, 1, 5))
        on_day = set_created_at(ProductFactory(), aware(2024, 1, 10, 23))
        late = set_created_at(ProductFactory(), aware(2024, 1, 20))

        products = ProductService.list_products({'created_from': '2024-01-10'})

        assert set(products) == {on_day, late}
        assert early not in products

    def test_created_range_is_inclusive(self):
        set_created_at(ProductFactory(), aware(2024, 1, 5))
        first = set_created_at(ProductFactory(), aware(2024, 1, 10, 0))
        middle = set_created_at(ProductFactory(), aware(2024, 1, 15))
        last = set_created_at(ProductFactory(), aware(2024, 1, 20, 23))
        set_created_at(ProductFactory(), aware(2024, 1, 21))

        products = ProductService.list_products({
            'created_from': '2024-01-10',
            'created_until': '2024-01-20',
        })

        assert set(products) == {first, middle, last}

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            list(ProductService.list_products({'created_from': 'not-a-date'}))

    def test_status_filter(self):
        sold_out = ProductFactory(status=ProductStatus.SOLD_OUT)
        ProductFactory(status=ProductStatus.IN_STOCK)

        products = ProductService.list_products({'status': 'sold out'})

        assert list(products) == [sold_out]

    def test_category_filter(self):
        hardware = CategoryFactory(name='Hardware')
        in_hardware = ProductFactory(category=hardware)
        ProductFactory(category=CategoryFactory(name='Software'))

        products = ProductService.list_products({'category': hardware.pk})

        assert list(products) == [in_hardware]

    def test_search_matches_name(self):
        widget = ProductFactory(name='Blue Widget')
        ProductFactory(name='Gadget')

        assert list(ProductService.list_products(search='widget')) == [widget]


class TestUpdateColumn:

    def test_name_shorter_than_three_characters_is_rejected(self):
        product = ProductFactory(name='Widget')

        with pytest.raises(ValidationError) as exc_info:
            ProductService.update_column(product, 'name', 'ab')

        assert 'name' in exc_info.value.message_dict
        product.refresh_from_db()
        assert product.name == 'Widget'

    def test_empty_name_is_rejected(self):
        product = ProductFactory()

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'name', '')

    def test_duplicate_name_is_rejected(self):
        ProductFactory(name='Taken')
        product = ProductFactory(name='Widget')

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'name', 'Taken')

    def test_name_edit_keeps_slug(self):
        product = ProductFactory(name='Widget')

        ProductService.update_column(product, 'name', 'Gizmo')
        product.refresh_from_db()

        assert product.name == 'Gizmo'
        assert product.slug == 'widget'

    def test_toggle_is_active(self):
        product = ProductFactory(is_active=True)

        ProductService.update_column(product, 'is_active', False)
        product.refresh_from_db()

        assert product.is_active is False

    def test_toggle_requires_boolean(self):
        product = ProductFactory()

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'is_active', 'yes')

    def test_select_status(self):
        product = ProductFactory()

        ProductService.update_column(product, 'status', 'coming soon')
        product.refresh_from_db()

        assert product.status == ProductStatus.COMING_SOON

    def test_select_rejects_unknown_status(self):
        product = ProductFactory()

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'status', 'discontinued')

    def test_select_rejects_non_string_value(self):
        product = ProductFactory()

        with pytest.raises(ValidationError) as exc_info:
            ProductService.update_column(product, 'status', ['sold out'])

        assert 'status' in exc_info.value.message_dict

    def test_name_longer_than_column_is_rejected(self):
        product = ProductFactory(name='Widget')

        with pytest.raises(ValidationError) as exc_info:
            ProductService.update_column(product, 'name', 'x' * 256)

        assert 'name' in exc_info.value.message_dict
        product.refresh_from_db()
        assert product.name == 'Widget'

    def test_name_must_be_a_string(self):
        product = ProductFactory(name='Widget')

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'name', 12345)

    def test_read_only_column_is_rejected(self):
        product = ProductFactory()

        with pytest.raises(ValidationError):
            ProductService.update_column(product, 'price', 1)

    def test_unknown_column_raises_key_error(self):
        product = ProductFactory()

        with pytest.raises(KeyError):
            ProductService.update_column(product, 'colour', 'red')


class TestBulkAndRelations:

    def test_bulk_delete(self):
        keep = ProductFactory()
        doomed = ProductFactory.create_batch(3)

        deleted = ProductService.bulk_delete([p.pk for p in doomed])

        assert deleted == 3
        assert list(Product.objects.all()) == [keep]

    def test_global_search_is_limited_to_three_results(self):
        for i in range(5):
            ProductFactory(name=f'Widget {i}')

        results = ProductService.global_search('widget')

        assert len(results) == 3

    def test_attach_tags_skips_attached(self):
        tag = TagFactory()
        product = ProductFactory(tags=[tag])

        ProductService.attach_tags(product, [tag])

        assert ProductTag.objects.filter(product=product).count() == 1

    def test_detach_tag(self):
        tag = TagFactory()
        product = ProductFactory(tags=[tag])

        assert ProductService.detach_tag(product, tag) is True
        assert ProductService.detach_tag(product, tag) is False
        assert product.tags.count() == 0
