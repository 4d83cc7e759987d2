"""Unit tests for the Customer document model."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from bson import ObjectId

from modules.customers.models import Address, Customer

pytestmark = pytest.mark.unit

OID = ObjectId("5f9f1b9b9c9d440000a1b2c3")


def _document(**overrides) -> dict:
    document = {
        "_id": OID,
        "firstName": "John",
        "lastName": "Doe",
        "email": "test@test.com",
        "phone": "testPhone",
        "address": {"street": "123 Main St", "city": "Springfield", "state": "IL"},
        "dateOfBirth": datetime(1980, 11, 11),
        "income": 10000.0,
    }
    document.update(overrides)
    return document


class TestFromDocument:
    def test_maps_camel_case_keys(self):
        customer = Customer.from_document(_document())

        assert customer.first_name == "John"
        assert customer.last_name == "Doe"
        assert customer.address == Address(
            street="123 Main St", city="Springfield", state="IL"
        )
        assert customer.income == 10000.0

    def test_object_id_becomes_string(self):
        customer = Customer.from_document(_document())
        assert customer.customer_id == "5f9f1b9b9c9d440000a1b2c3"

    def test_midnight_datetime_becomes_date(self):
        customer = Customer.from_document(_document())
        assert customer.date_of_birth == date(1980, 11, 11)

    def test_missing_fields_are_none(self):
        customer = Customer.from_document({"_id": OID, "firstName": "Solo"})
        assert customer.email is None
        assert customer.address is None
        assert customer.date_of_birth is None

    def test_ignores_unknown_keys(self):
        customer = Customer.from_document(
            _document(_class="com.example.Customer")
        )
        assert customer.customer_id == str(OID)


class TestToDocument:
    def test_excludes_id(self):
        customer = Customer(customer_id="abc", first_name="John")
        assert "_id" not in customer.to_document()

    def test_uses_camel_case_keys(self):
        document = Customer(
            first_name="John",
            last_name="Doe",
            date_of_birth=date(1980, 11, 11),
            address=Address(street="1 Main St"),
        ).to_document()

        assert document["firstName"] == "John"
        assert document["lastName"] == "Doe"
        assert document["address"] == {
            "street": "1 Main St",
            "city": None,
            "state": None,
        }

    def test_date_is_stored_as_midnight_datetime(self):
        document = Customer(date_of_birth=date(1980, 11, 11)).to_document()
        assert document["dateOfBirth"] == datetime(1980, 11, 11, 0, 0)

    def test_document_round_trips(self):
        original = Customer.from_document(_document())
        restored = Customer.from_document({"_id": OID, **original.to_document()})
        assert restored == original
