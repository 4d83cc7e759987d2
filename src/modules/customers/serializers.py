"""Customer DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).  They own
the wire format (camelCase keys, ``MM/dd/yyyy`` dates) and hand
snake_case data to the Pydantic DTOs in ``dtos.py``.  Business
validation lives in the Service Layer, so every request field is
optional and nullable here.
"""

from __future__ import annotations

from rest_framework import serializers

DATE_FORMAT = "%m/%d/%Y"


def _text(source: str | None = None) -> serializers.CharField:
    kwargs = {"source": source} if source else {}
    return serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
        **kwargs,
    )


class AddressSerializer(serializers.Serializer):
    street = _text()
    city = _text()
    state = _text()


class CustomerRequestSerializer(serializers.Serializer):
    """Create/update payload."""

    firstName = _text("first_name")
    lastName = _text("last_name")
    email = _text()
    phone = _text()
    address = AddressSerializer(required=False, allow_null=True)
    dateOfBirth = serializers.DateField(
        source="date_of_birth",
        format=DATE_FORMAT,
        input_formats=[DATE_FORMAT],
        required=False,
        allow_null=True,
    )
    income = serializers.FloatField(required=False, allow_null=True)


class CustomerSummarySerializer(serializers.Serializer):
    """Read-only projection of a customer."""

    customerId = serializers.CharField(source="customer_id", read_only=True)
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    phone = serializers.CharField(read_only=True)
