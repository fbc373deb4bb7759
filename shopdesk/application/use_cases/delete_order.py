"""Delete Order Use Case: returns the order's units to stock."""

from dataclasses import dataclass

from shopdesk.config import get_logger
from shopdesk.core.exceptions import OrderHasInvoiceError, OrderNotFoundError
from shopdesk.core.interfaces import IInvoiceStore, IOrderStore, IProductStore
from shopdesk.core.services.order_reconciliation import quantities_by_product
from shopdesk.core.services.stock_planner import plan_stock_changes

logger = get_logger(__name__)


@dataclass
class DeleteOrderResult:
    """Result of deleting an order."""

    order_id: str
    restocked: dict[str, float]


class DeleteOrderUseCase:
    """Delete an order that has not been invoiced, restocking its items."""

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        product_store: IProductStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._order_store = order_store
        self._product_store = product_store
        self._invoice_store = invoice_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, order_id: str) -> DeleteOrderResult:
        """Execute delete order use case."""
        order_store = await self._get_order_store()
        product_store = await self._get_product_store()
        invoice_store = await self._get_invoice_store()

        order = await order_store.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        invoice = await invoice_store.find_by_order(order_id)
        if invoice is not None:
            raise OrderHasInvoiceError(order_id, invoice.id)  # type: ignore[arg-type]

        quantities = quantities_by_product(order.items)
        products = await product_store.get_many(list(quantities))
        restock = {pid: qty for pid, qty in quantities.items() if pid in products}
        missing = [pid for pid in quantities if pid not in products]
        if missing:
            logger.warning("restock_skipped_missing_product", product_ids=missing)

        plan = plan_stock_changes(products, {pid: -qty for pid, qty in restock.items()})
        await order_store.delete_with_stock(order_id, plan.products)

        logger.info("order_deleted_with_restock", order_id=order_id, products=len(restock))
        return DeleteOrderResult(order_id=order_id, restocked=restock)
