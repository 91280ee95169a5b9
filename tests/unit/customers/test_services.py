"""Unit tests for CustomerService.

Covers:
- save: happy path, duplicate CPF surfaced unchanged from the store.
- find_by_id: happy path, not found message.
- update: only names, income and address change; persisted through the
  same repository save as creation; not found.
- delete: happy path, not found.
- list: delegates filters to the repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import DuplicateKeyFailure, NotFound
from modules.customers.dtos import UpdateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return CustomerService(repository=mock_repo)


def _update_dto(**overrides) -> UpdateCustomerDTO:
    defaults = {
        "first_name": "CamiUpdate",
        "last_name": "CavalcanteUpdate",
        "income": Decimal("5000.0"),
        "zip_code": "45656",
        "street": "Rua Updated",
    }
    defaults.update(overrides)
    return UpdateCustomerDTO(**defaults)


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_success(self, service, mock_repo, make_customer):
        customer = make_customer(save=False)
        mock_repo.save.return_value = customer

        result = service.save(customer)

        assert result is customer
        mock_repo.save.assert_called_once_with(customer)

    def test_does_not_pre_check_uniqueness(self, service, mock_repo, make_customer):
        customer = make_customer(save=False)
        mock_repo.save.return_value = customer

        service.save(customer)

        mock_repo.get_by_cpf.assert_not_called()
        mock_repo.exists_by_cpf.assert_not_called()

    def test_duplicate_cpf_propagates(self, service, mock_repo, make_customer):
        mock_repo.save.side_effect = CustomerAlreadyExists("already registered")

        with pytest.raises(DuplicateKeyFailure, match="already registered"):
            service.save(make_customer(save=False))


# ===========================================================================
# find_by_id
# ===========================================================================


class TestFindById:
    def test_success(self, service, mock_repo, make_customer):
        customer = make_customer(save=False, id=7)
        mock_repo.get_by_id.return_value = customer

        assert service.find_by_id(7) is customer
        mock_repo.get_by_id.assert_called_once_with(7)

    def test_not_found_message(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound) as exc_info:
            service.find_by_id(9876)

        assert str(exc_info.value) == "Id 9876 not found"
        assert isinstance(exc_info.value, NotFound)

    def test_is_side_effect_free(self, service, mock_repo, make_customer):
        mock_repo.get_by_id.return_value = make_customer(save=False, id=1)

        service.find_by_id(1)
        service.find_by_id(1)

        mock_repo.save.assert_not_called()
        mock_repo.delete.assert_not_called()


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_replaces_updatable_fields(self, service, mock_repo, make_customer):
        existing = make_customer(save=False, id=1)
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda c: c

        customer = service.update(1, _update_dto())

        assert customer.first_name == "CamiUpdate"
        assert customer.last_name == "CavalcanteUpdate"
        assert customer.income == Decimal("5000.0")
        assert customer.zip_code == "45656"
        assert customer.street == "Rua Updated"
        mock_repo.save.assert_called_once_with(existing)

    def test_keeps_cpf_email_and_password(self, service, mock_repo, make_customer):
        existing = make_customer(save=False, id=1)
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda c: c

        customer = service.update(1, _update_dto())

        assert customer.cpf == "28475934625"
        assert customer.email == "cami@example.com"
        assert customer.password == "1234"

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound, match="Id 1 not found"):
            service.update(1, _update_dto())

        mock_repo.save.assert_not_called()

    def test_store_uniqueness_failure_propagates(self, service, mock_repo, make_customer):
        mock_repo.get_by_id.return_value = make_customer(save=False, id=1)
        mock_repo.save.side_effect = CustomerAlreadyExists("duplicate")

        with pytest.raises(CustomerAlreadyExists):
            service.update(1, _update_dto())


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_success(self, service, mock_repo, make_customer):
        existing = make_customer(save=False, id=3)
        mock_repo.get_by_id.return_value = existing

        service.delete(3)

        mock_repo.get_by_id.assert_called_once_with(3)
        mock_repo.delete.assert_called_once_with(existing)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound, match="Id 3 not found"):
            service.delete(3)

        mock_repo.delete.assert_not_called()


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_delegates_to_repository(self, service, mock_repo, make_customer):
        customers = [make_customer(save=False, id=1), make_customer(save=False, id=2)]
        mock_repo.list.return_value = customers

        result = service.list()

        assert result == customers
        mock_repo.list.assert_called_once_with(None)

    def test_passes_filters_through(self, service, mock_repo):
        mock_repo.list.return_value = []

        service.list({"first_name__icontains": "cami"})

        mock_repo.list.assert_called_once_with({"first_name__icontains": "cami"})
