"""Domain error taxonomy shared by every module.

Services raise subclasses of these; the API layer maps each family to
an HTTP status in ``modules.core.exception_handler``.  The exception
message is returned to the caller verbatim.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for failures raised by the Service Layer."""


class NotFound(DomainError):
    """The requested identifier has no matching record."""


class BusinessError(DomainError):
    """A business rule was violated; nothing was persisted."""


class InvariantViolation(DomainError):
    """Stored data contradicts the ownership stated by the caller."""


class DuplicateKeyFailure(DomainError):
    """A uniqueness constraint of the store rejected the write."""
