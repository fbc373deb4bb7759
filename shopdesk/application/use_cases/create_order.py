"""Create Order Use Case: draws stock FIFO and records the order."""

from dataclasses import dataclass
from datetime import datetime

from shopdesk.application.dto.requests import CreateOrderRequest, OrderItemRequest
from shopdesk.application.dto.responses import OrderResponse, order_to_response
from shopdesk.config import get_logger
from shopdesk.core.entities import Order, OrderItem, OrderStatus, Product
from shopdesk.core.exceptions import (
    CustomerNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from shopdesk.core.interfaces import (
    ICustomerStore,
    IInvoiceStore,
    IOrderStore,
    IProductStore,
)
from shopdesk.core.services.reporting import outstanding_balance
from shopdesk.core.services.stock_planner import plan_stock_changes

logger = get_logger(__name__)


def merge_item_requests(items: list[OrderItemRequest]) -> list[OrderItemRequest]:
    """Collapse repeated products into one line; the last custom price wins."""
    merged: dict[str, OrderItemRequest] = {}
    for item in items:
        existing = merged.get(item.product_id)
        if existing is None:
            merged[item.product_id] = item.model_copy()
            continue
        existing.quantity += item.quantity
        if item.custom_price is not None:
            existing.custom_price = item.custom_price
    return list(merged.values())


async def load_products(
    store: IProductStore, product_ids: list[str]
) -> dict[str, Product]:
    """Fetch products, failing on the first id that does not exist."""
    products = await store.get_many(product_ids)
    for product_id in product_ids:
        if product_id not in products:
            raise ProductNotFoundError(product_id)
    return products


async def customer_outstanding(store: IInvoiceStore, customer_id: str) -> float:
    invoices = await store.list_invoices(customer_id=customer_id, limit=None)
    return outstanding_balance(invoices)


@dataclass
class CreateOrderResult:
    """Result of placing an order."""

    order: Order


class CreateOrderUseCase:
    """Place an order: validate everything, deplete stock, save the order."""

    def __init__(
        self,
        customer_store: ICustomerStore | None = None,
        product_store: IProductStore | None = None,
        order_store: IOrderStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._customer_store = customer_store
        self._product_store = product_store
        self._order_store = order_store
        self._invoice_store = invoice_store

    async def _get_customer_store(self) -> ICustomerStore:
        if self._customer_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_customer_store

            self._customer_store = await get_customer_store()
        return self._customer_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, request: CreateOrderRequest) -> CreateOrderResult:
        """Execute create order use case."""
        logger.info(
            "create_order_started",
            customer_id=request.customer_id,
            items=len(request.items),
        )

        if not request.items:
            raise ValidationError("items", "at least one item is required")

        customer_store = await self._get_customer_store()
        product_store = await self._get_product_store()
        order_store = await self._get_order_store()

        customer = await customer_store.get(request.customer_id)
        if customer is None:
            raise CustomerNotFoundError(request.customer_id)

        lines = merge_item_requests(request.items)
        products = await load_products(product_store, [line.product_id for line in lines])

        # Nothing is written unless every product can cover its line.
        plan = plan_stock_changes(
            products, {line.product_id: line.quantity for line in lines}
        )

        items = [
            OrderItem(
                product_id=line.product_id,
                name=products[line.product_id].name,
                quantity=line.quantity,
                price=products[line.product_id].price,
                original_price=products[line.product_id].price,
                custom_price=line.custom_price,
                cost_basis=plan.drawn_cost.get(line.product_id, 0.0),
            )
            for line in lines
        ]

        outstanding = request.outstanding_amount
        if request.include_outstanding and outstanding is None:
            outstanding = await customer_outstanding(
                await self._get_invoice_store(), customer.id  # type: ignore[arg-type]
            )

        now = datetime.utcnow()
        order = Order(
            customer_id=customer.id,  # type: ignore[arg-type]
            customer_name=customer.name,
            customer_phone=customer.phone,
            delivery_address=customer.address,
            items=items,
            shipping_cost=request.shipping_cost,
            outstanding_amount=outstanding,
            include_outstanding=request.include_outstanding,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        order.total = order.compute_total()

        order = await order_store.create_with_stock(order, plan.products)

        logger.info(
            "create_order_complete",
            order_id=order.id,
            total=order.total,
            products=len(plan.updated),
        )
        return CreateOrderResult(order=order)

    def to_response(self, result: CreateOrderResult) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result.order)
