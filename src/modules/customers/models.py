"""Customer document model.

Customers are stored in MongoDB, one document per customer, with
camelCase keys::

    {
        "_id": ObjectId("..."),
        "firstName": "John",
        "lastName": "Doe",
        "email": "test@test.com",
        "phone": "testPhone",
        "address": {"street": "...", "city": "...", "state": "..."},
        "dateOfBirth": ISODate("1980-11-11T00:00:00Z"),
        "income": 10000.0
    }

The fields marked mandatory in the original schema (first/last name,
phone, income) are not validated here; the service layer applies the
checks each operation actually needs.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Address(BaseModel):
    """Embedded value object, no identity of its own."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


class Customer(BaseModel):
    """Customer aggregate root.

    ``customer_id`` is ``None`` until the store assigns one on insert and
    never changes afterwards.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_id: Optional[str] = Field(default=None, alias="_id")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    date_of_birth: Optional[date] = None
    income: Optional[float] = None

    @field_validator("customer_id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """Accept BSON ``ObjectId`` values as read from the store."""
        return str(v) if v is not None else None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def strip_time(cls, v: Any) -> Any:
        """BSON has no date type: dates come back as midnight datetimes."""
        if isinstance(v, datetime):
            return v.date()
        return v

    # ------------------------------------------------------------------
    # Document mapping
    # ------------------------------------------------------------------

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Customer:
        """Build a customer from a raw MongoDB document."""
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """Document body for insert/replace, without ``_id``."""
        document = self.model_dump(by_alias=True, exclude={"customer_id"})
        if self.date_of_birth is not None:
            document["dateOfBirth"] = datetime.combine(self.date_of_birth, time.min)
        return document

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.customer_id})"
