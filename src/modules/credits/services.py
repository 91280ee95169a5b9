"""Credit service layer (Use Cases).

Business rules enforced:
- The owning customer must exist (resolved through ``CustomerService``).
- Eligibility window: the first installment may be at most
  ``CREDIT_MAX_FIRST_INSTALLMENT_MONTHS`` (default 3) calendar months
  after today, boundary included.  Rejected credits are never persisted.
- Ownership check: a credit is only returned to the customer it
  belongs to.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List
from uuid import UUID

import structlog
import uuid6
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from modules.core.dates import add_months
from modules.credits.constants import INITIAL_STATUS
from modules.credits.exceptions import (
    CreditNotFound,
    CreditOwnershipMismatch,
    InvalidInstallmentDate,
)

if TYPE_CHECKING:
    from modules.credits.models import Credit
    from modules.credits.repositories.interfaces import ICreditRepository
    from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)


class CreditService:
    """Application service for Credit use-cases.

    Receives its repository and the ``CustomerService`` via constructor
    injection (DIP).
    """

    def __init__(
        self,
        repository: ICreditRepository,
        customer_service: CustomerService,
    ) -> None:
        self._repo = repository
        self._customer_service = customer_service

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, credit: Credit) -> Credit:
        """Validate and persist a new credit.

        Raises:
            CustomerNotFound: the owning customer does not exist.
            InvalidInstallmentDate: the first installment is beyond the
                eligibility window.
        """
        log = logger.bind(customer_id=credit.customer_id)

        credit.customer = self._customer_service.find_by_id(credit.customer_id)

        latest = self.latest_first_installment()
        if credit.day_first_installment > latest:
            log.warning(
                "credit.invalid_first_installment",
                day_first_installment=credit.day_first_installment.isoformat(),
                latest_allowed=latest.isoformat(),
            )
            raise InvalidInstallmentDate()

        if not credit.credit_code:
            credit.credit_code = uuid6.uuid7()
        if not credit.status:
            credit.status = INITIAL_STATUS

        credit = self._repo.save(credit)
        log.info("credit.created", credit_code=str(credit.credit_code))
        return credit

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_credit_code(self, credit_code: UUID | str, customer_id: int) -> Credit:
        """Return the credit identified by *credit_code* if it belongs to
        *customer_id*.

        Raises:
            CreditNotFound: no credit has this code.
            CreditOwnershipMismatch: the credit belongs to someone else.
        """
        credit = self._repo.get_by_credit_code(credit_code)
        if credit is None:
            raise CreditNotFound(credit_code)
        if credit.customer_id != customer_id:
            logger.error(
                "credit.ownership_mismatch",
                credit_code=str(credit_code),
                requested_customer_id=customer_id,
            )
            raise CreditOwnershipMismatch()
        return credit

    def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """Return every credit of *customer_id* (empty for unknown ids)."""
        return self._repo.list_by_customer_id(customer_id)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @staticmethod
    def latest_first_installment(today: date | None = None) -> date:
        """Last date accepted as first installment, counted from *today*."""
        today = today or timezone.localdate()
        return add_months(today, settings.CREDIT_MAX_FIRST_INSTALLMENT_MONTHS)
