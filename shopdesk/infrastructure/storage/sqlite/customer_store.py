"""SQLite implementation of customer storage."""

from datetime import datetime

from shopdesk.config import get_logger
from shopdesk.core.entities import Customer
from shopdesk.core.interfaces.storage import ICustomerStore
from shopdesk.infrastructure.storage.sqlite.document_collection import (
    DocumentCollection,
    matches,
    paginate,
)

logger = get_logger(__name__)

SORT_KEYS = {
    "name": lambda c: c.name.lower(),
    "created_at": lambda c: c.created_at,
}


class SQLiteCustomerStore(ICustomerStore):
    """Customers as JSON documents."""

    def __init__(self) -> None:
        self._docs = DocumentCollection("customers", Customer)

    async def create(self, customer: Customer) -> Customer:
        customer = await self._docs.insert(customer)
        logger.info("customer_created", customer_id=customer.id, name=customer.name)
        return customer

    async def get(self, customer_id: str) -> Customer | None:
        return await self._docs.get(customer_id)

    async def update(self, customer: Customer) -> Customer:
        customer.updated_at = datetime.utcnow()
        customer = await self._docs.replace(customer)
        logger.info("customer_updated", customer_id=customer.id)
        return customer

    async def delete(self, customer_id: str) -> bool:
        deleted = await self._docs.delete(customer_id)
        if deleted:
            logger.info("customer_deleted", customer_id=customer_id)
        return deleted

    async def list_customers(
        self,
        search: str | None = None,
        sort_by: str = "name",
        descending: bool = False,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Customer]:
        key = SORT_KEYS.get(sort_by, SORT_KEYS["name"])
        customers = [
            c for c in await self._docs.all()
            if matches(search, c.name, c.phone, c.email)
        ]
        customers.sort(key=key, reverse=descending)
        return paginate(customers, limit, offset)

    async def count(self) -> int:
        return await self._docs.count()
