from __future__ import annotations

from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


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
def make_product():
    """Factory persisting a Product straight through the ORM."""

    def _make(**overrides) -> Product:
        defaults = {
            "code": "ABC123",
            "name": "Widget",
            "price": Decimal("9.99"),
            "quantity": 5,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
