"""Update Order Status Use Case."""

from shopdesk.application.dto.requests import UpdateOrderStatusRequest
from shopdesk.application.dto.responses import OrderResponse, order_to_response
from shopdesk.config import get_logger
from shopdesk.core.entities import Order
from shopdesk.core.exceptions import OrderNotFoundError
from shopdesk.core.interfaces import IOrderStore

logger = get_logger(__name__)


class UpdateOrderStatusUseCase:
    """Set an order's fulfilment stage; any stage may be chosen."""

    def __init__(self, order_store: IOrderStore | None = None):
        self._order_store = order_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def execute(self, order_id: str, request: UpdateOrderStatusRequest) -> Order:
        store = await self._get_order_store()
        order = await store.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        previous = order.status
        order.status = request.status
        order = await store.update(order)

        logger.info(
            "order_status_changed",
            order_id=order_id,
            previous=previous.value,
            status=order.status.value,
        )
        return order

    def to_response(self, order: Order) -> OrderResponse:
        return order_to_response(order)
