"""Credit DTOs for the Service Layer.

Framework-agnostic, immutable Pydantic v2 models parsed from API input.
The eligibility window (first installment at most N months ahead) is a
business rule and is checked by ``CreditService``, not here; the DTO
only enforces the shape of a request.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.conf import settings
from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.credits.models import Credit


class CreateCreditDTO(BaseModel):
    """Immutable DTO for credit requests."""

    model_config = ConfigDict(frozen=True)

    credit_value: Decimal = Field(gt=0)
    day_first_installment: date
    number_of_installments: int = Field(ge=1)
    customer_id: int

    @field_validator("day_first_installment")
    @classmethod
    def must_be_in_future(cls, v: date) -> date:
        if v <= timezone.localdate():
            raise ValueError("First installment date must be in the future.")
        return v

    @field_validator("number_of_installments")
    @classmethod
    def within_installment_limit(cls, v: int) -> int:
        limit = settings.CREDIT_MAX_INSTALLMENTS
        if v > limit:
            raise ValueError(f"Number of installments must be at most {limit}.")
        return v

    def to_entity(self) -> Credit:
        """Build an unsaved ``Credit`` bound to ``customer_id``."""
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )
