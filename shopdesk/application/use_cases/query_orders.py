"""Order read use cases."""

from shopdesk.core.entities import Order, OrderStatus
from shopdesk.core.exceptions import OrderNotFoundError
from shopdesk.core.interfaces import IOrderStore


class _OrderQuery:
    def __init__(self, order_store: IOrderStore | None = None):
        self._order_store = order_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store


class GetOrderUseCase(_OrderQuery):
    async def execute(self, order_id: str) -> Order:
        order = await (await self._get_order_store()).get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order


class ListOrdersUseCase(_OrderQuery):
    """Orders newest first, optionally for one customer or status."""

    async def execute(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
        search: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Order]:
        store = await self._get_order_store()
        return await store.list_orders(
            customer_id=customer_id,
            status=status,
            search=search,
            limit=limit,
            offset=offset,
        )
