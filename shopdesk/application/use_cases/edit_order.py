"""Edit Order Use Case: reconciles stock against the edited item set."""

from dataclasses import dataclass

from shopdesk.application.dto.requests import EditOrderRequest
from shopdesk.application.dto.responses import OrderResponse, order_to_response
from shopdesk.application.use_cases.create_order import (
    customer_outstanding,
    merge_item_requests,
)
from shopdesk.config import get_logger
from shopdesk.core.entities import Order, OrderItem
from shopdesk.core.exceptions import (
    CustomerNotFoundError,
    OrderNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from shopdesk.core.interfaces import (
    ICustomerStore,
    IInvoiceStore,
    IOrderStore,
    IProductStore,
)
from shopdesk.core.services.order_reconciliation import (
    ReconciliationPlan,
    plan_reconciliation,
    quantities_by_product,
)
from shopdesk.core.services.stock_planner import plan_stock_changes

logger = get_logger(__name__)


@dataclass
class EditOrderResult:
    """Result of editing an order."""

    order: Order
    reconciliation: ReconciliationPlan


class EditOrderUseCase:
    """
    Edit an order's lines, customer and charges.

    Every affected product's batches are planned in memory first (removed
    lines restock, added lines deplete, changed lines move by the delta);
    only when all products can be satisfied are they saved together.
    """

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        product_store: IProductStore | None = None,
        customer_store: ICustomerStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._order_store = order_store
        self._product_store = product_store
        self._customer_store = customer_store
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

    async def _get_customer_store(self) -> ICustomerStore:
        if self._customer_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_customer_store

            self._customer_store = await get_customer_store()
        return self._customer_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, order_id: str, request: EditOrderRequest) -> EditOrderResult:
        """Execute edit order use case."""
        logger.info("edit_order_started", order_id=order_id, items=len(request.items))

        if not request.items:
            raise ValidationError("items", "at least one item is required")

        order_store = await self._get_order_store()
        product_store = await self._get_product_store()

        order = await order_store.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        if request.customer_id and request.customer_id != order.customer_id:
            customer = await (await self._get_customer_store()).get(request.customer_id)
            if customer is None:
                raise CustomerNotFoundError(request.customer_id)
            order.customer_id = customer.id  # type: ignore[assignment]
            order.customer_name = customer.name
            order.customer_phone = customer.phone
            order.delivery_address = customer.address

        lines = merge_item_requests(request.items)
        product_ids = list(
            dict.fromkeys(
                [item.product_id for item in order.items]
                + [line.product_id for line in lines]
            )
        )
        products = await product_store.get_many(product_ids)
        for line in lines:
            if line.product_id not in products:
                raise ProductNotFoundError(line.product_id)

        new_items = []
        for line in lines:
            product = products[line.product_id]
            previous = order.find_item(line.product_id)
            custom_price = line.custom_price
            if custom_price is None and previous is not None:
                custom_price = previous.custom_price
            new_items.append(
                OrderItem(
                    product_id=product.id,  # type: ignore[arg-type]
                    name=product.name,
                    quantity=line.quantity,
                    price=product.price,
                    original_price=product.price,
                    custom_price=custom_price,
                )
            )

        reconciliation = plan_reconciliation(order.items, new_items)
        deltas = reconciliation.stock_deltas()
        for product_id in [pid for pid in deltas if pid not in products]:
            # Product left the catalog; its returned units have nowhere to go.
            logger.warning("restock_skipped_missing_product", product_id=product_id)
            del deltas[product_id]

        stock_plan = plan_stock_changes(products, deltas)
        self._carry_cost_basis(order.items, new_items, deltas, stock_plan.drawn_cost)

        order.items = new_items
        fields = request.model_fields_set
        if "shipping_cost" in fields:
            order.shipping_cost = request.shipping_cost
        if "outstanding_amount" in fields:
            order.outstanding_amount = request.outstanding_amount
        if request.include_outstanding is not None:
            order.include_outstanding = request.include_outstanding
        if request.status is not None:
            order.status = request.status
        if order.include_outstanding and order.outstanding_amount is None:
            order.outstanding_amount = await customer_outstanding(
                await self._get_invoice_store(), order.customer_id
            )
        order.total = order.compute_total()

        order = await order_store.update_with_stock(order, stock_plan.products)

        logger.info(
            "edit_order_complete",
            order_id=order.id,
            removed=len(reconciliation.removed),
            changed=len(reconciliation.changed),
            added=len(reconciliation.added),
            total=order.total,
        )
        return EditOrderResult(order=order, reconciliation=reconciliation)

    @staticmethod
    def _carry_cost_basis(
        old_items: list[OrderItem],
        new_items: list[OrderItem],
        deltas: dict[str, float],
        drawn_cost: dict[str, float],
    ) -> None:
        """Keep each line's FIFO cost in step with its stock movement."""
        old_quantity = quantities_by_product(old_items)
        old_cost: dict[str, float] = {}
        for item in old_items:
            old_cost[item.product_id] = old_cost.get(item.product_id, 0.0) + item.cost_basis

        for item in new_items:
            pid = item.product_id
            delta = deltas.get(pid, 0.0)
            if pid not in old_quantity:
                item.cost_basis = drawn_cost.get(pid, 0.0)
            elif delta > 0:
                item.cost_basis = old_cost[pid] + drawn_cost.get(pid, 0.0)
            elif delta < 0:
                item.cost_basis = old_cost[pid] * item.quantity / old_quantity[pid]
            else:
                item.cost_basis = old_cost[pid]

    def to_response(self, result: EditOrderResult) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result.order)
