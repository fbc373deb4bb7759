"""
SQLite implementation of order storage.

Orders embed their items. Writes that move stock take the affected
products along and commit them with the order in a single transaction.
"""

from datetime import datetime

import aiosqlite

from shopdesk.config import get_logger
from shopdesk.core.entities import Order, OrderStatus, Product
from shopdesk.core.exceptions import DatabaseError
from shopdesk.core.interfaces.storage import IOrderStore
from shopdesk.infrastructure.storage.sqlite.connection import get_transaction
from shopdesk.infrastructure.storage.sqlite.document_collection import (
    DocumentCollection,
    matches,
    paginate,
)

logger = get_logger(__name__)


class SQLiteOrderStore(IOrderStore):
    """Orders as JSON documents; items are embedded."""

    def __init__(self) -> None:
        self._docs = DocumentCollection("orders", Order)
        self._products = DocumentCollection("products", Product)

    async def create(self, order: Order) -> Order:
        return await self.create_with_stock(order, [])

    async def get(self, order_id: str) -> Order | None:
        return await self._docs.get(order_id)

    async def update(self, order: Order) -> Order:
        return await self.update_with_stock(order, [])

    async def delete(self, order_id: str) -> bool:
        return await self.delete_with_stock(order_id, [])

    async def create_with_stock(self, order: Order, products: list[Product]) -> Order:
        _touch(products)
        try:
            async with get_transaction() as conn:
                await self._products.save_many_in(conn, products)
                order = await self._docs.insert_in(conn, order)
        except aiosqlite.Error as e:
            raise DatabaseError("create order", str(e)) from e
        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            items=len(order.items),
            total=order.total,
            products=len(products),
        )
        return order

    async def update_with_stock(self, order: Order, products: list[Product]) -> Order:
        order.updated_at = datetime.utcnow()
        _touch(products)
        try:
            async with get_transaction() as conn:
                await self._products.save_many_in(conn, products)
                order = await self._docs.replace_in(conn, order)
        except aiosqlite.Error as e:
            raise DatabaseError("update order", str(e)) from e
        logger.info(
            "order_updated",
            order_id=order.id,
            status=order.status.value,
            products=len(products),
        )
        return order

    async def delete_with_stock(self, order_id: str, products: list[Product]) -> bool:
        _touch(products)
        try:
            async with get_transaction() as conn:
                await self._products.save_many_in(conn, products)
                deleted = await self._docs.delete_in(conn, order_id)
        except aiosqlite.Error as e:
            raise DatabaseError("delete order", str(e)) from e
        if deleted:
            logger.info("order_deleted", order_id=order_id, products=len(products))
        return deleted

    async def list_orders(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
        search: str | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Order]:
        orders = [
            order for order in await self._docs.all()
            if (customer_id is None or order.customer_id == customer_id)
            and (status is None or order.status == status)
            and matches(search, order.customer_name, order.id, order.customer_phone)
        ]
        orders.sort(key=lambda order: order.created_at, reverse=True)
        return paginate(orders, limit, offset)


def _touch(products: list[Product]) -> None:
    now = datetime.utcnow()
    for product in products:
        product.updated_at = now
