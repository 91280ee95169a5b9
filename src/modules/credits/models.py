"""Credit model.

Business rules implemented:
- ``credit_code`` is a generated UUIDv7, unique, and is the external
  lookup key; the integer ``id`` is never exposed by the API.
- A credit starts ``IN_PROGRESS``; other statuses are set elsewhere.
- ``day_first_installment`` must fall within the eligibility window
  (enforced at service layer, see ``CreditService.save``).
- Deleting a customer deletes its credits (``on_delete=CASCADE``).
"""

from __future__ import annotations

from decimal import Decimal

import uuid6
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.credits.constants import INITIAL_STATUS, CreditStatus


class Credit(BaseModel):
    """Credit line issued to a customer."""

    credit_code: models.UUIDField = models.UUIDField(
        default=uuid6.uuid7,
        unique=True,
        editable=False,
    )
    credit_value: models.DecimalField = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    day_first_installment: models.DateField = models.DateField()
    number_of_installments: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=CreditStatus.choices,
        default=INITIAL_STATUS,
    )
    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="+",
    )

    class Meta:
        db_table = "credits"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["customer", "id"], name="credits_customer_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.credit_code} ({self.status})"
