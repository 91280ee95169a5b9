"""Credit domain exceptions.

Raised by the Service Layer when business rules are violated.  The
messages are part of the API contract and travel to the caller as-is.
"""

from __future__ import annotations

from modules.core.exceptions import BusinessError, InvariantViolation


class InvalidInstallmentDate(BusinessError):
    """The first installment falls outside the eligibility window."""

    def __init__(self) -> None:
        super().__init__("Invalid Date")


class CreditNotFound(BusinessError):
    """No credit exists with the requested credit code."""

    def __init__(self, credit_code) -> None:
        self.credit_code = credit_code
        super().__init__(f"Creditcode {credit_code} not found")


class CreditOwnershipMismatch(InvariantViolation):
    """The credit exists but belongs to another customer.

    The message is deliberately generic so no ownership detail leaks.
    """

    def __init__(self) -> None:
        super().__init__("Contact admin")
