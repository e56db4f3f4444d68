import pytest
from django.utils import translation
from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _reset_language():
    """LocaleMiddleware leaves the request language active on the thread."""
    yield
    translation.deactivate()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def product_payload():
    """A valid create/update request body."""
    return {
        "name": "Mechanical Keyboard",
        "manager": "Kim",
        "description": "Tenkeyless, brown switches",
        "password": "open-sesame",
    }


@pytest.fixture()
def sample_product():
    """A persisted Product instance."""
    product = Product(
        name="Widget Alpha",
        description="A fine widget",
        manager="Lee",
        password="widget-pass",
    )
    product.save()
    return product
