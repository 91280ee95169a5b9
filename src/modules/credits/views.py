"""Credit API views.

Exposes ``CreditService`` via HTTP.  Every lookup is scoped to the
``customer_id`` query parameter; a missing or non-numeric value is a
validation error (400).  Domain exceptions propagate to the central
exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.credits.dtos import CreateCreditDTO
from modules.credits.repositories.django_repository import CreditDjangoRepository
from modules.credits.serializers import (
    CreditListSerializer,
    CreditSerializer,
    CustomerIdQuerySerializer,
)
from modules.credits.services import CreditService
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService

CUSTOMER_ID_PARAM = OpenApiParameter(
    name="customer_id", type=int, location=OpenApiParameter.QUERY, required=True
)

CREATE_FIELDS = (
    "credit_value",
    "day_first_installment",
    "number_of_installments",
    "customer_id",
)


class CreditViewSet(ViewSet):
    """ViewSet for credit requests and credit look-ups."""

    lookup_field = "credit_code"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CreditService(
            repository=CreditDjangoRepository(),
            customer_service=CustomerService(repository=CustomerDjangoRepository()),
        )

    @staticmethod
    def _customer_id(request: Request) -> int:
        query = CustomerIdQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return query.validated_data["customer_id"]

    @extend_schema(responses=CreditSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/credits/"""
        data = {field: request.data[field] for field in CREATE_FIELDS if field in request.data}
        dto = CreateCreditDTO(**data)
        credit = self._service.save(dto.to_entity())
        return Response(CreditSerializer(credit).data, status=status.HTTP_201_CREATED)

    @extend_schema(parameters=[CUSTOMER_ID_PARAM], responses=CreditListSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/credits/?customer_id={id}"""
        credits = self._service.find_all_by_customer(self._customer_id(request))
        return Response(CreditListSerializer(credits, many=True).data)

    @extend_schema(parameters=[CUSTOMER_ID_PARAM], responses=CreditSerializer)
    def retrieve(self, request: Request, credit_code: str | None = None) -> Response:
        """GET /api/credits/{credit_code}/?customer_id={id}"""
        credit = self._service.find_by_credit_code(credit_code, self._customer_id(request))
        return Response(CreditSerializer(credit).data)
