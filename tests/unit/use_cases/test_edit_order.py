"""Tests for EditOrderUseCase."""

import pytest

from shopdesk.application.dto.requests import EditOrderRequest, OrderItemRequest
from shopdesk.application.use_cases.edit_order import EditOrderUseCase
from shopdesk.core.entities import OrderStatus, Product, StockBatch
from shopdesk.core.exceptions import InsufficientStockError, OrderNotFoundError


@pytest.fixture
def oil() -> Product:
    return Product(
        id="prod-2",
        name="Mustard Oil",
        price=180.0,
        category="Oils",
        batches=[StockBatch(id="o1", quantity=4, cost_price=150)],
    )


@pytest.fixture
def use_case(order_store, product_store, customer_store, invoice_store):
    return EditOrderUseCase(
        order_store=order_store,
        product_store=product_store,
        customer_store=customer_store,
        invoice_store=invoice_store,
    )


def _saved(order_store) -> dict[str, Product]:
    return {p.id: p for p in order_store.update_with_stock.await_args.args[1]}


class TestEditOrder:
    async def test_increase_draws_only_the_difference(self, use_case, order_store):
        result = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=5)])
        )

        assert [b.quantity for b in _saved(order_store)["prod-1"].batches] == [2, 10]
        item = result.order.items[0]
        assert item.cost_basis == pytest.approx(80 + 3 * 40)
        assert result.order.total == pytest.approx(5 * 105 + 50)

    async def test_decrease_restocks_and_scales_cost(self, use_case, order_store):
        result = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=1)])
        )

        assert _saved(order_store)["prod-1"].total_stock == 16
        assert result.order.items[0].cost_basis == pytest.approx(40)
        assert [c.delta for c in result.reconciliation.changed] == [-1]

    async def test_swap_product(self, use_case, product_store, order_store, sample_product, oil):
        product_store.get_many.return_value = {sample_product.id: sample_product, oil.id: oil}

        result = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-2", quantity=1)])
        )

        saved = _saved(order_store)
        assert saved["prod-1"].total_stock == 17
        assert saved["prod-2"].total_stock == 3
        assert result.reconciliation.removed == {"prod-1": 2}
        assert result.reconciliation.added == {"prod-2": 1}
        assert result.order.items[0].cost_basis == pytest.approx(150)

    async def test_removed_product_missing_from_catalog_is_skipped(
        self, use_case, product_store, order_store, oil
    ):
        product_store.get_many.return_value = {oil.id: oil}

        result = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-2", quantity=1)])
        )

        assert set(_saved(order_store)) == {"prod-2"}
        assert result.order.items[0].product_id == "prod-2"

    async def test_custom_price_survives_edit(self, use_case, sample_order):
        sample_order.items[0].custom_price = 95.0
        sample_order.items[0].price = 95.0

        result = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=2)])
        )

        assert result.order.items[0].price == 95.0
        assert result.reconciliation.is_empty

    async def test_shipping_cleared_only_when_sent(self, use_case):
        kept = await use_case.execute(
            "order-1", EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=2)])
        )
        assert kept.order.shipping_cost == 50.0

        cleared = await use_case.execute(
            "order-1",
            EditOrderRequest(
                items=[OrderItemRequest(product_id="prod-1", quantity=2)], shipping_cost=None
            ),
        )
        assert cleared.order.shipping_cost is None
        assert cleared.order.total == 210.0

    async def test_status_change(self, use_case):
        result = await use_case.execute(
            "order-1",
            EditOrderRequest(
                items=[OrderItemRequest(product_id="prod-1", quantity=2)],
                status=OrderStatus.DELIVERED,
            ),
        )
        assert result.order.status == OrderStatus.DELIVERED

    async def test_shortfall_leaves_everything_untouched(self, use_case, order_store):
        with pytest.raises(InsufficientStockError):
            await use_case.execute(
                "order-1",
                EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=30)]),
            )
        order_store.update_with_stock.assert_not_awaited()

    async def test_unknown_order(self, use_case, order_store):
        order_store.get.return_value = None
        with pytest.raises(OrderNotFoundError):
            await use_case.execute(
                "missing",
                EditOrderRequest(items=[OrderItemRequest(product_id="prod-1", quantity=1)]),
            )
