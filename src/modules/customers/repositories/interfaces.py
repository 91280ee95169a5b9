"""Customer repository interface.

Extends ``IRepository[Customer]`` with the operations the Customer
use-cases need.  ``save`` must raise ``CustomerAlreadyExists`` when the
store's unique CPF constraint rejects the write.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db import models

    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        """List customers with optional filters, as a lazy QuerySet."""

    @abstractmethod
    def delete(self, entity: Customer) -> None:
        """Remove a customer permanently."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (digits only)."""

    @abstractmethod
    def exists_by_cpf(self, cpf: str) -> bool:
        """Return ``True`` when a customer with this CPF is stored."""
