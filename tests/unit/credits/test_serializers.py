"""Unit tests for Credit serializers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from modules.credits.models import Credit
from modules.credits.serializers import (
    CreditListSerializer,
    CreditSerializer,
    CustomerIdQuerySerializer,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def credit(make_customer):
    return Credit.objects.create(
        customer=make_customer(),
        credit_value=Decimal("500.00"),
        number_of_installments=10,
        day_first_installment=date(2025, 2, 1),
    )


class TestCreditSerializer:
    def test_renders_customer_email_and_income(self, credit):
        data = CreditSerializer(credit).data
        assert data["credit_code"] == str(credit.credit_code)
        assert data["credit_value"] == "500.00"
        assert data["number_of_installments"] == 10
        assert data["day_first_installment"] == "2025-02-01"
        assert data["status"] == "IN_PROGRESS"
        assert data["customer_id"] == credit.customer_id
        assert data["email_customer"] == "cami@example.com"
        assert data["income_customer"] == "1000.00"


class TestCreditListSerializer:
    def test_compact_fields(self, credit):
        data = CreditListSerializer(credit).data
        assert set(data) == {"credit_code", "credit_value", "number_of_installments"}


class TestCustomerIdQuerySerializer:
    def test_accepts_integer(self):
        query = CustomerIdQuerySerializer(data={"customer_id": "7"})
        assert query.is_valid()
        assert query.validated_data["customer_id"] == 7

    @pytest.mark.parametrize("params", [{}, {"customer_id": ""}, {"customer_id": "abc"}])
    def test_rejects_missing_or_non_numeric(self, params):
        query = CustomerIdQuerySerializer(data=params)
        assert not query.is_valid()
        assert "customer_id" in query.errors
