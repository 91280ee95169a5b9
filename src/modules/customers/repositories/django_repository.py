"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead
of raising, and the Service Layer decides how to translate a missing
entity into a domain error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, models, transaction

from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        """List customers with optional Django ORM look-ups.

        Returns a lazy QuerySet.

        Examples of valid filters::

            {"first_name__icontains": "cami"}
            {"email__iexact": "cami@example.com"}
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        Raises:
            CustomerAlreadyExists: the unique CPF constraint rejected the row.
        """
        is_new = entity._state.adding
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            if not self._cpf_taken(entity):
                raise
            logger.warning(
                "customer.duplicate_cpf",
                cpf_suffix=entity.cpf[-4:] if entity.cpf else "",
            )
            raise CustomerAlreadyExists(
                f"Customer with CPF ***{entity.cpf[-4:]} already registered."
            ) from exc
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        """Hard-delete a customer (its credits are removed by CASCADE)."""
        customer_id = entity.id
        entity.delete()
        logger.info("customer.deleted", customer_id=customer_id)

    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (digits only)."""
        return Customer.objects.filter(cpf=cpf).first()

    def exists_by_cpf(self, cpf: str) -> bool:
        """Return ``True`` when a customer with this CPF is stored."""
        return Customer.objects.filter(cpf=cpf).exists()

    @staticmethod
    def _cpf_taken(entity: Customer) -> bool:
        """Return ``True`` when another row already holds *entity*'s CPF."""
        if not entity.cpf:
            return False
        others = Customer.objects.filter(cpf=entity.cpf)
        if entity.pk is not None:
            others = others.exclude(pk=entity.pk)
        return others.exists()
