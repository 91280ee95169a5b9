"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- CPF uniqueness is left to the store: ``save`` performs no pre-check,
  so the repository's ``CustomerAlreadyExists`` propagates unchanged.
- ``update`` only touches names, income and address.
- ``delete`` is unconditional once the customer is found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerNotFound

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.customers.dtos import UpdateCustomerDTO
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, customer: Customer) -> Customer:
        """Persist a customer and return it with its assigned id.

        Raises:
            CustomerAlreadyExists: the CPF is already registered.
        """
        customer = self._persist(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Replace names, income and address of an existing customer.

        Persists through the same step as ``save``, so a store-level
        uniqueness failure surfaces the same way.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self.find_by_id(id)
        dto.apply_to(customer)
        customer = self._persist(customer)
        logger.info("customer.updated", customer_id=customer.id)
        return customer

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Permanently remove a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self.find_by_id(id)
        self._repo.delete(customer)
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: ``"Id {id} not found"``.
        """
        customer = self._repo.get_by_id(id)
        if customer is None:
            logger.info("customer.not_found", customer_id=id)
            raise CustomerNotFound(id)
        return customer

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "QuerySet[Customer]":
        """Return every customer, optionally filtered."""
        return self._repo.list(filters)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _persist(self, customer: Customer) -> Customer:
        return self._repo.save(customer)
