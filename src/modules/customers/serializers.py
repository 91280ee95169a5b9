"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Request payloads are parsed into the Pydantic DTOs
from ``dtos.py`` before reaching the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource (password never rendered)."""

    class Meta:
        model = Customer
        fields = [
            "id",
            "first_name",
            "last_name",
            "cpf",
            "email",
            "income",
            "zip_code",
            "street",
        ]
        read_only_fields = fields
