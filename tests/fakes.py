"""In-memory test double for ``ICustomerRepository``.

Behaves like the MongoDB repository: the store assigns IDs on insert,
email look-ups ignore case, iteration follows insertion order and
entities are copied in and out so callers never share state with the
store.
"""

from __future__ import annotations

from typing import AsyncIterator, Optional

from bson import ObjectId

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


def _same_email(stored: Optional[str], wanted: Optional[str]) -> bool:
    if stored is None or wanted is None:
        return stored is wanted
    return stored.lower() == wanted.lower()


class InMemoryCustomerRepository(ICustomerRepository):
    def __init__(self) -> None:
        self.customers: dict[str, Customer] = {}
        self.failure: Optional[Exception] = None

    def fail_with(self, exc: Exception) -> None:
        """Make every subsequent call raise ``exc``."""
        self.failure = exc

    def _check(self) -> None:
        if self.failure is not None:
            raise self.failure

    async def get_by_id(self, id: str) -> Optional[Customer]:
        self._check()
        customer = self.customers.get(id)
        return customer.model_copy(deep=True) if customer else None

    async def get_by_email(self, email: str) -> Optional[Customer]:
        self._check()
        for customer in self.customers.values():
            if _same_email(customer.email, email):
                return customer.model_copy(deep=True)
        return None

    async def exists_by_email(self, email: Optional[str]) -> bool:
        self._check()
        return any(_same_email(c.email, email) for c in self.customers.values())

    async def list(self) -> AsyncIterator[Customer]:
        self._check()
        for customer in list(self.customers.values()):
            yield customer.model_copy(deep=True)

    async def save(self, entity: Customer) -> Customer:
        self._check()
        if entity.customer_id is None:
            entity.customer_id = str(ObjectId())
        self.customers[entity.customer_id] = entity.model_copy(deep=True)
        return entity

    async def delete(self, entity: Customer) -> None:
        self._check()
        self.customers.pop(entity.customer_id, None)
