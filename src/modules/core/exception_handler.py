"""Central DRF exception handler.

Translates the domain taxonomy from ``modules.core.exceptions`` (and
request validation failures) into a uniform error body::

    {
        "title": "Bad Request! Consult the documentation",
        "timestamp": "2024-05-01T10:00:00-03:00",
        "status": 400,
        "exception": "CreditNotFound",
        "details": {"message": "Creditcode ... not found"}
    }

Mapping:
- ``NotFound`` / ``BusinessError`` / ``InvariantViolation`` -> 400
- ``DuplicateKeyFailure`` -> 409
- DRF ``ValidationError`` / Pydantic ``ValidationError`` -> 400
- any other DRF ``APIException`` keeps its own status code.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError, DuplicateKeyFailure, InvariantViolation

logger = structlog.get_logger(__name__)

TITLES: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Bad Request! Consult the documentation",
    status.HTTP_409_CONFLICT: "Conflict! Consult the documentation",
}


def error_body(exc: Exception, status_code: int, details: Dict[str, Any]) -> Dict[str, Any]:
    """Build the standard error payload for *exc*."""
    return {
        "title": TITLES.get(status_code, "Consult the documentation"),
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "exception": type(exc).__name__,
        "details": details,
    }


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, DuplicateKeyFailure):
        return status.HTTP_409_CONFLICT
    # NotFound, BusinessError and InvariantViolation all surface as 400
    return status.HTTP_400_BAD_REQUEST


def _validation_details(detail: Any) -> Dict[str, Any]:
    """Flatten DRF error detail into ``{field: first message}``."""
    if isinstance(detail, dict):
        flat: Dict[str, Any] = {}
        for field, messages in detail.items():
            if isinstance(messages, (list, tuple)) and messages:
                flat[field] = str(messages[0])
            else:
                flat[field] = str(messages)
        return flat
    if isinstance(detail, (list, tuple)):
        return {"message": "; ".join(str(item) for item in detail)}
    return {"message": str(detail)}


def _pydantic_details(exc: PydanticValidationError) -> Dict[str, Any]:
    details: Dict[str, Any] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "message"
        details.setdefault(field, error.get("msg", "Invalid input"))
    return details


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` entry point.

    Returns ``None`` for exceptions it does not know, letting Django
    treat them as server errors.
    """
    view = context.get("view")
    log = logger.bind(
        view=type(view).__name__ if view is not None else None,
        exception=type(exc).__name__,
    )

    if isinstance(exc, DomainError):
        status_code = _status_for(exc)
        if isinstance(exc, InvariantViolation):
            log.error("api.invariant_violation", status_code=status_code)
        else:
            log.warning("api.domain_error", status_code=status_code, message=str(exc))
        return Response(
            error_body(exc, status_code, {"message": str(exc)}),
            status=status_code,
        )

    if isinstance(exc, PydanticValidationError):
        log.info("api.invalid_payload")
        return Response(
            error_body(exc, status.HTTP_400_BAD_REQUEST, _pydantic_details(exc)),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, DRFValidationError):
        details = _validation_details(exc.detail)
    elif isinstance(exc, APIException):
        details = {"message": str(exc.detail)}
    else:
        details = _validation_details(response.data)

    response.data = error_body(exc, response.status_code, details)
    return response
