"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on the storage driver directly.

Every method is a coroutine: implementations talk to a non-blocking
driver and the service layer awaits them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its identifier, ``None`` if absent."""

    @abstractmethod
    def list(self) -> AsyncIterator[T]:
        """Iterate over every stored entity, in storage order."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert the entity if it has no identifier, otherwise replace it."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Remove the entity permanently."""
