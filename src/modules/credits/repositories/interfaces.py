"""Credit repository interface.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.credits.models import Credit


class ICreditRepository(IRepository["Credit"]):
    """Repository contract for the Credit aggregate."""

    @abstractmethod
    def get_by_credit_code(self, credit_code: UUID | str) -> Optional[Credit]:
        """Retrieve a credit by its external credit code."""

    @abstractmethod
    def list_by_customer_id(self, customer_id: int) -> List[Credit]:
        """Return the credits of a customer in insertion order.

        Unknown customers yield an empty list.
        """
