"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions propagate to the central exception handler
(``modules.core.exception_handler``), which renders them as
400 / 409 responses; the view never catches them itself.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

CREATE_FIELDS = (
    "first_name",
    "last_name",
    "cpf",
    "email",
    "income",
    "password",
    "zip_code",
    "street",
)
UPDATE_FIELDS = ("first_name", "last_name", "income", "zip_code", "street")


def _pick(data, fields):
    """Keep only the *fields* present in the request body."""
    return {field: data[field] for field in fields if field in data}


class CustomerViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    filterset_class = CustomerFilter
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["id", "first_name", "created_at"]
    ordering = ["id"]
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/customers/{pk}/"""
        customer = self._service.find_by_id(pk)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/customers/"""
        dto = CreateCustomerDTO(**_pick(request.data, CREATE_FIELDS))
        customer = self._service.save(dto.to_entity())
        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/customers/{pk}/"""
        dto = UpdateCustomerDTO(**_pick(request.data, UPDATE_FIELDS))
        customer = self._service.update(pk, dto)
        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/customers/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/customers/{pk}/"""
        self._service.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
