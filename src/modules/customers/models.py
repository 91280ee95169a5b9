"""Customer model.

Business rules implemented:
- The CPF (natural-person identifier) is unique in the system; the
  database constraint is authoritative, no pre-check is done in Python.
- ``cpf`` and ``email`` are immutable after creation
  (enforced by ``CustomerService.update``, which never touches them).
- ``password`` is stored as received; it is never rendered in responses.
- The CPF is masked in ``__str__`` so it never leaks into logs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from validate_docbr import CPF

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Address:
    """Address value object embedded in the customer row."""

    zip_code: str
    street: str


class Customer(BaseModel):
    """Customer aggregate root.

    ``cpf`` stores only digits (sanitised on save).  The address is kept as
    two flat columns and exposed through the ``address`` property.
    """

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11, unique=True)
    email = models.EmailField(max_length=254)
    income = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    password = models.CharField(max_length=255)
    zip_code = models.CharField(max_length=20)
    street = models.CharField(max_length=255)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Embedded address
    # ------------------------------------------------------------------

    @property
    def address(self) -> Address:
        return Address(zip_code=self.zip_code, street=self.street)

    @address.setter
    def address(self, value: Address) -> None:
        self.zip_code = value.zip_code
        self.street = value.street

    # ------------------------------------------------------------------
    # Sanitisation / validation
    # ------------------------------------------------------------------

    @staticmethod
    def _sanitize_cpf(value: str) -> str:
        """Strip all non-digit characters from a CPF string."""
        return re.sub(r"\D", "", value)

    def clean(self) -> None:
        super().clean()
        if self.cpf:
            self.cpf = self._sanitize_cpf(self.cpf)
        if not CPF().validate(self.cpf):
            logger.warning(
                "customer.invalid_cpf",
                cpf_suffix=self.cpf[-4:] if self.cpf else "",
            )
            raise ValidationError({"cpf": "Invalid CPF number."})

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.cpf:
            self.cpf = self._sanitize_cpf(self.cpf)
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        suffix = self.cpf[-4:] if self.cpf else "????"
        return f"{self.full_name} (CPF: ***{suffix})"
