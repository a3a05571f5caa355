"""
Property-based tests for price display.
"""
from decimal import Decimal

from hypothesis import given, strategies as st

from apps.catalog.models import Product
from apps.catalog.resources import ProductResource


@given(cents=st.integers(min_value=0, max_value=10 ** 12))
def test_displayed_price_is_stored_cents_divided_by_100(cents):
    product = Product(name='Any', price=cents)
    state = ProductResource.table().column('price').get_state(product)

    assert state == Decimal(cents) / 100
    assert state * 100 == cents


@given(cents=st.integers(min_value=0, max_value=10 ** 9))
def test_price_display_keeps_two_decimals(cents):
    product = Product(name='Any', price=cents)
    display = ProductResource.table().column('price').display(product)

    assert display.startswith('$')
    assert display.replace('$', '').replace(',', '') == f"{cents // 100}.{cents % 100:02d}"
