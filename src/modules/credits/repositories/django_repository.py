"""Django ORM implementation of the Credit repository.

Look-ups return ``None`` (or an empty list) instead of raising; the
Service Layer decides what a missing credit means.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.credits.models import Credit
from modules.credits.repositories.interfaces import ICreditRepository

logger = structlog.get_logger(__name__)


class CreditDjangoRepository(ICreditRepository):
    """Concrete Credit repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Credit]:
        try:
            return Credit.objects.select_related("customer").filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def get_by_credit_code(self, credit_code: UUID | str) -> Optional[Credit]:
        """Retrieve a credit by code.

        Returns ``None`` for unknown or malformed codes (e.g. not a UUID).
        """
        try:
            return (
                Credit.objects.select_related("customer")
                .filter(credit_code=credit_code)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list_by_customer_id(self, customer_id: int) -> List[Credit]:
        try:
            return list(Credit.objects.filter(customer_id=customer_id).order_by("id"))
        except (ValueError, TypeError, ValidationError):
            return []

    @transaction.atomic
    def save(self, entity: Credit) -> Credit:
        """Persist (create or update) a credit."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "credit.saved",
            credit_code=str(entity.credit_code),
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity
