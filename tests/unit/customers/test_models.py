import pytest
from django.core.exceptions import ValidationError

from modules.customers.models import Address

pytestmark = pytest.mark.unit


class TestCustomerModel:
    def test_cpf_sanitized_on_save(self, make_customer):
        customer = make_customer(cpf="284.759.346-25")
        customer.refresh_from_db()
        assert customer.cpf == "28475934625"

    def test_clean_rejects_invalid_cpf(self, make_customer):
        customer = make_customer(save=False, cpf="11111111111")
        with pytest.raises(ValidationError) as exc_info:
            customer.clean()
        assert "cpf" in exc_info.value.message_dict

    def test_clean_accepts_formatted_cpf(self, make_customer):
        customer = make_customer(save=False, cpf="284.759.346-25")
        customer.clean()
        assert customer.cpf == "28475934625"

    def test_address_setter_updates_columns(self, make_customer):
        customer = make_customer(save=False)
        customer.address = Address(zip_code="11111", street="Rua Nova")
        assert customer.zip_code == "11111"
        assert customer.street == "Rua Nova"

    def test_str_masks_cpf(self, make_customer):
        customer = make_customer(save=False)
        assert str(customer) == "Cami Cavalcante (CPF: ***4625)"
        assert "28475934625" not in str(customer)
