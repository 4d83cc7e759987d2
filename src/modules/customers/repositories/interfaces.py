"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-ups the service
needs for its uniqueness pre-check and for get-by-email.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate.

    Email comparisons are case-insensitive.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""

    @abstractmethod
    async def exists_by_email(self, email: Optional[str]) -> bool:
        """Whether any customer is stored with this email address."""
