from datetime import date
from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer

VALID_CPF = "28475934625"


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
def make_customer():
    """Factory for customers; pass ``save=False`` for an unsaved instance."""

    def _make(save: bool = True, **overrides) -> Customer:
        defaults = {
            "first_name": "Cami",
            "last_name": "Cavalcante",
            "cpf": VALID_CPF,
            "email": "cami@example.com",
            "income": Decimal("1000.00"),
            "password": "1234",
            "zip_code": "000000",
            "street": "Rua da Cami, 123",
        }
        defaults.update(overrides)
        customer = Customer(**defaults)
        if save:
            customer.save()
        return customer

    return _make


@pytest.fixture()
def today() -> date:
    from django.utils import timezone

    return timezone.localdate()
