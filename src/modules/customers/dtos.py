"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO`` / ``UpdateCustomerDTO``: request shapes.
- ``CustomerSummaryDTO``: the narrowed projection returned to clients
  (no email, address, date of birth or income).
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.customers.models import Address, Customer


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class AddressDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    def to_value(self) -> Address:
        return Address(street=self.street, city=self.city, state=self.state)


class CustomerRequestDTO(BaseModel):
    """Immutable customer payload shared by create and update requests.

    Every field is optional; the service decides which ones an operation
    requires.
    """

    model_config = ConfigDict(frozen=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[AddressDTO] = None
    date_of_birth: Optional[date] = None
    income: Optional[float] = None

    def _address_value(self) -> Optional[Address]:
        return self.address.to_value() if self.address is not None else None

    def to_entity(self) -> Customer:
        """New, not yet persisted customer (no identifier)."""
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self._address_value(),
            date_of_birth=self.date_of_birth,
            income=self.income,
        )

    def apply_to(self, customer: Customer) -> Customer:
        """Overwrite every mutable field of ``customer`` (full replace)."""
        customer.first_name = self.first_name
        customer.last_name = self.last_name
        customer.phone = self.phone
        customer.email = self.email
        customer.address = self._address_value()
        customer.date_of_birth = self.date_of_birth
        customer.income = self.income
        return customer


class CreateCustomerDTO(CustomerRequestDTO):
    """Payload of a customer creation request."""


class UpdateCustomerDTO(CustomerRequestDTO):
    """Payload of a customer update request.

    Not a patch: fields left out are stored as ``None``.
    """


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    phone: Optional[str]

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerSummaryDTO:
        """Build a summary from a Customer entity."""
        return cls(
            customer_id=customer.customer_id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            phone=customer.phone,
        )
