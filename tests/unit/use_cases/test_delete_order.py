"""Tests for DeleteOrderUseCase."""

import pytest

from shopdesk.application.use_cases.delete_order import DeleteOrderUseCase
from shopdesk.core.exceptions import OrderHasInvoiceError, OrderNotFoundError


@pytest.fixture
def use_case(order_store, product_store, invoice_store):
    return DeleteOrderUseCase(
        order_store=order_store,
        product_store=product_store,
        invoice_store=invoice_store,
    )


async def test_restocks_then_deletes(use_case, order_store):
    result = await use_case.execute("order-1")

    assert result.restocked == {"prod-1": 2}
    order_id, saved = order_store.delete_with_stock.await_args.args
    assert order_id == "order-1"
    assert saved[0].total_stock == 17


async def test_invoiced_order_is_refused(use_case, invoice_store, order_store, sample_invoice):
    invoice_store.find_by_order.return_value = sample_invoice

    with pytest.raises(OrderHasInvoiceError):
        await use_case.execute("order-1")
    order_store.delete_with_stock.assert_not_awaited()


async def test_missing_product_is_not_restocked(use_case, product_store, order_store):
    product_store.get_many.return_value = {}

    result = await use_case.execute("order-1")

    assert result.restocked == {}
    order_store.delete_with_stock.assert_awaited_once_with("order-1", [])


async def test_unknown_order(use_case, order_store):
    order_store.get.return_value = None
    with pytest.raises(OrderNotFoundError):
        await use_case.execute("missing")
