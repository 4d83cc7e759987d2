"""Unit tests for Customer DTOs.

Covers:
- CustomerRequestDTO: entity construction, full-replace update, frozen.
- CustomerSummaryDTO: narrowed projection via from_entity.
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from modules.customers.dtos import (
    AddressDTO,
    CreateCustomerDTO,
    CustomerSummaryDTO,
    UpdateCustomerDTO,
)
from modules.customers.models import Address, Customer

pytestmark = pytest.mark.unit


def _full_dto(cls=CreateCustomerDTO, **overrides):
    defaults = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "test@test.com",
        "phone": "testPhone",
        "address": AddressDTO(street="123 Main St", city="Springfield", state="IL"),
        "date_of_birth": date(1980, 11, 11),
        "income": 10000.0,
    }
    defaults.update(overrides)
    return cls(**defaults)


class TestToEntity:
    def test_copies_every_field(self):
        customer = _full_dto().to_entity()

        assert customer.customer_id is None
        assert customer.first_name == "John"
        assert customer.last_name == "Doe"
        assert customer.email == "test@test.com"
        assert customer.phone == "testPhone"
        assert customer.address == Address(
            street="123 Main St", city="Springfield", state="IL"
        )
        assert customer.date_of_birth == date(1980, 11, 11)
        assert customer.income == 10000.0

    def test_without_address(self):
        customer = _full_dto(address=None).to_entity()
        assert customer.address is None


class TestApplyTo:
    def test_overwrites_all_mutable_fields_and_keeps_id(self):
        existing = Customer(
            customer_id="testId",
            first_name="Old",
            last_name="Name",
            email="old@test.com",
            phone="oldPhone",
            address=Address(city="Old Town"),
            date_of_birth=date(1970, 1, 1),
            income=1.0,
        )

        updated = _full_dto(UpdateCustomerDTO).apply_to(existing)

        assert updated.customer_id == "testId"
        assert updated.model_dump(exclude={"customer_id"}) == (
            _full_dto().to_entity().model_dump(exclude={"customer_id"})
        )

    def test_is_a_full_replace_not_a_patch(self):
        existing = Customer(customer_id="testId", email="keep@test.com", income=5.0)

        updated = UpdateCustomerDTO(first_name="John").apply_to(existing)

        assert updated.email is None
        assert updated.income is None


class TestRequestDTOFrozen:
    def test_is_immutable(self):
        dto = _full_dto()
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"

    def test_all_fields_optional(self):
        dto = CreateCustomerDTO()
        assert dto.first_name is None
        assert dto.date_of_birth is None


class TestCustomerSummaryDTO:
    def test_from_entity_projects_public_fields(self):
        customer = Customer(
            customer_id="testId",
            first_name="John",
            last_name="Doe",
            email="test@test.com",
            phone="testPhone",
            income=10000.0,
        )

        summary = CustomerSummaryDTO.from_entity(customer)

        assert summary.model_dump() == {
            "customer_id": "testId",
            "first_name": "John",
            "last_name": "Doe",
            "phone": "testPhone",
        }

    def test_is_immutable(self):
        summary = CustomerSummaryDTO.from_entity(Customer(customer_id="x"))
        with pytest.raises(ValidationError):
            summary.phone = "Changed"
