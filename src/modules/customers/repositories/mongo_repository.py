"""MongoDB implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using a Motor collection.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into an API response.  Driver errors propagate.
"""

from __future__ import annotations

from typing import AsyncIterator, Optional

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from django.conf import settings
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.collation import Collation

from modules.core import mongo
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

# Secondary strength: compares letters, ignores case.
EMAIL_COLLATION = Collation(locale="en", strength=2)


def _object_id(id: Optional[str]) -> Optional[ObjectId]:
    # ObjectId(None) would mint a fresh id.
    if not id:
        return None
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        return None


class CustomerMongoRepository(ICustomerRepository):
    """Concrete Customer repository backed by MongoDB (Motor)."""

    def __init__(self, collection: AsyncIOMotorCollection | None = None) -> None:
        self._collection = collection

    @property
    def collection(self) -> AsyncIOMotorCollection:
        if self._collection is None:
            return mongo.get_database()[settings.MONGODB_CUSTOMERS_COLLECTION]
        return self._collection

    async def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by identifier.

        Returns ``None`` for non-existent or malformed IDs.
        """
        oid = _object_id(id)
        if oid is None:
            return None
        document = await self.collection.find_one({"_id": oid})
        return Customer.from_document(document) if document else None

    async def get_by_email(self, email: str) -> Optional[Customer]:
        document = await self.collection.find_one(
            {"email": email}, collation=EMAIL_COLLATION
        )
        return Customer.from_document(document) if document else None

    async def exists_by_email(self, email: Optional[str]) -> bool:
        count = await self.collection.count_documents(
            {"email": email}, limit=1, collation=EMAIL_COLLATION
        )
        return count > 0

    async def list(self) -> AsyncIterator[Customer]:
        """Stream every customer in natural (storage) order."""
        async for document in self.collection.find({}):
            yield Customer.from_document(document)

    async def save(self, entity: Customer) -> Customer:
        """Insert a new customer or replace the stored one."""
        document = entity.to_document()
        if entity.customer_id is None:
            result = await self.collection.insert_one(document)
            entity.customer_id = str(result.inserted_id)
            is_new = True
        else:
            await self.collection.replace_one(
                {"_id": ObjectId(entity.customer_id)}, document, upsert=True
            )
            is_new = False
        logger.info("customer.saved", customer_id=entity.customer_id, is_new=is_new)
        return entity

    async def delete(self, entity: Customer) -> None:
        await self.collection.delete_one({"_id": ObjectId(entity.customer_id)})
        logger.info("customer.removed", customer_id=entity.customer_id)
