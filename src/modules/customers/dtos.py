"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer registration.
- ``UpdateCustomerDTO``: the fields a customer may change after
  registration (CPF and email are immutable).
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from validate_docbr import CPF

from modules.customers.models import Customer

NonEmptyStr = Annotated[str, Field(min_length=1)]


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``cpf`` is sanitised (non-digits stripped) and checked via
      *validate-docbr*.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    - ``income`` is not negative.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    first_name: NonEmptyStr
    last_name: NonEmptyStr
    cpf: str
    email: EmailStr
    income: Decimal = Field(ge=0)
    password: NonEmptyStr
    zip_code: NonEmptyStr
    street: NonEmptyStr

    @field_validator("cpf", mode="before")
    @classmethod
    def sanitize_cpf(cls, v: str) -> str:
        """Strip non-digit characters (accept formatted or raw input)."""
        if not isinstance(v, str):
            return v
        return re.sub(r"\D", "", v)

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        if not CPF().validate(v):
            raise ValueError("Invalid CPF number.")
        return v

    def to_entity(self) -> Customer:
        """Build an unsaved ``Customer`` from this request."""
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            email=self.email,
            income=self.income,
            password=self.password,
            zip_code=self.zip_code,
            street=self.street,
        )


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    Every field is required: an update replaces the names, the income
    and the address as a whole.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    first_name: NonEmptyStr
    last_name: NonEmptyStr
    income: Decimal = Field(ge=0)
    zip_code: NonEmptyStr
    street: NonEmptyStr

    def apply_to(self, customer: Customer) -> Customer:
        """Copy the updatable fields onto *customer* and return it."""
        customer.first_name = self.first_name
        customer.last_name = self.last_name
        customer.income = self.income
        customer.zip_code = self.zip_code
        customer.street = self.street
        return customer
