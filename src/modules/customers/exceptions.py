"""Customer domain exceptions.

Raised by the Service Layer (and the repository, for store constraint
violations).  They specialise the shared taxonomy so the central API
exception handler can map them to HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import DuplicateKeyFailure, NotFound


class CustomerAlreadyExists(DuplicateKeyFailure):
    """The store rejected a customer whose CPF is already registered."""


class CustomerNotFound(NotFound):
    """No customer exists with the requested id."""

    def __init__(self, customer_id) -> None:
        self.customer_id = customer_id
        super().__init__(f"Id {customer_id} not found")
