"""
Test configuration for the catalog admin.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client(admin_user):
    """API client authenticated as a staff user."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def anonymous_client():
    return APIClient()


@pytest.fixture
def category():
    from tests.factories import CategoryFactory
    return CategoryFactory(name='Hardware')


@pytest.fixture
def tags():
    from tests.factories import TagFactory
    return [TagFactory(name='new'), TagFactory(name='sale')]


@pytest.fixture
def product(category):
    from tests.factories import ProductFactory
    return ProductFactory(name='Widget', price=1999, category=category)
