"""Credit DRF serializers.

``CreditSerializer`` renders a single credit together with the owning
customer's email and income; ``CreditListSerializer`` is the compact
form used when listing a customer's credits.  ``CustomerIdQuerySerializer``
validates the mandatory ``customer_id`` query parameter.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.credits.models import Credit


class CreditSerializer(serializers.ModelSerializer):
    customer_id = serializers.IntegerField(read_only=True)
    email_customer = serializers.EmailField(source="customer.email", read_only=True)
    income_customer = serializers.DecimalField(
        source="customer.income",
        max_digits=12,
        decimal_places=2,
        read_only=True,
    )

    class Meta:
        model = Credit
        fields = [
            "credit_code",
            "credit_value",
            "number_of_installments",
            "day_first_installment",
            "status",
            "customer_id",
            "email_customer",
            "income_customer",
        ]
        read_only_fields = fields


class CreditListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Credit
        fields = ["credit_code", "credit_value", "number_of_installments"]
        read_only_fields = fields


class CustomerIdQuerySerializer(serializers.Serializer):
    customer_id = serializers.IntegerField()
