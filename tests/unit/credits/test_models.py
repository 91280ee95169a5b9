from datetime import date
from decimal import Decimal

import pytest

from modules.credits.constants import CreditStatus
from modules.credits.models import Credit

pytestmark = pytest.mark.unit


def _credit(customer, **overrides):
    defaults = {
        "customer": customer,
        "credit_value": Decimal("100.00"),
        "number_of_installments": 2,
        "day_first_installment": date(2025, 2, 1),
    }
    defaults.update(overrides)
    return Credit.objects.create(**defaults)


class TestCreditModel:
    def test_defaults(self, make_customer):
        credit = _credit(make_customer())
        assert credit.status == CreditStatus.IN_PROGRESS
        assert credit.credit_code is not None

    def test_credit_codes_are_unique_and_time_ordered(self, make_customer):
        customer = make_customer()
        first = _credit(customer)
        second = _credit(customer)
        assert first.credit_code != second.credit_code
        assert str(first.credit_code) < str(second.credit_code)

    @pytest.mark.parametrize("status", [CreditStatus.APPROVED, CreditStatus.REJECT])
    def test_stores_other_statuses(self, make_customer, status):
        credit = _credit(make_customer(), status=status)
        credit.refresh_from_db()
        assert credit.status == status

    def test_str(self, make_customer):
        credit = _credit(make_customer())
        assert str(credit) == f"{credit.credit_code} (IN_PROGRESS)"
