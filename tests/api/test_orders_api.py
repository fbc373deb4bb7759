"""API tests for order endpoints."""

from unittest.mock import AsyncMock, Mock

import pytest
from httpx import ASGITransport, AsyncClient

from shopdesk.api.dependencies import (
    get_create_order_use_case,
    get_delete_order_use_case,
    get_list_orders_use_case,
)
from shopdesk.api.main import app
from shopdesk.application.dto.responses import order_to_response
from shopdesk.application.use_cases import (
    CreateOrderUseCase,
    DeleteOrderUseCase,
    ListOrdersUseCase,
)
from shopdesk.application.use_cases.create_order import CreateOrderResult
from shopdesk.application.use_cases.delete_order import DeleteOrderResult
from shopdesk.core.exceptions import InsufficientStockError, OrderHasInvoiceError


@pytest.fixture
def create_uc(sample_order):
    uc = Mock(spec=CreateOrderUseCase)
    result = CreateOrderResult(order=sample_order)
    uc.execute = AsyncMock(return_value=result)
    uc.to_response.return_value = order_to_response(sample_order)
    return uc


@pytest.fixture
def client_factory():
    async def make(overrides: dict):
        app.dependency_overrides.update(overrides)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    yield make
    app.dependency_overrides.clear()


ORDER_BODY = {
    "customer_id": "cust-1",
    "items": [{"product_id": "prod-1", "quantity": 2}],
    "shipping_cost": 50,
}


async def test_create_order(client_factory, create_uc):
    async with await client_factory({get_create_order_use_case: lambda: create_uc}) as ac:
        resp = await ac.post("/api/orders", json=ORDER_BODY)

    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == "order-1"
    assert data["total"] == 260.0
    assert data["items"][0]["line_total"] == 210.0
    create_uc.execute.assert_awaited_once()


async def test_create_order_insufficient_stock(client_factory):
    uc = Mock(spec=CreateOrderUseCase)
    uc.execute = AsyncMock(
        side_effect=InsufficientStockError("prod-1", "Basmati Rice", 20, 15)
    )
    async with await client_factory({get_create_order_use_case: lambda: uc}) as ac:
        resp = await ac.post("/api/orders", json=ORDER_BODY)

    assert resp.status_code == 409
    body = resp.json()
    assert body["error_code"] == "INSUFFICIENT_STOCK"
    assert "Basmati Rice" in body["message"]
    assert body["path"] == "/api/orders"
    assert "restock" in body["hint"]


async def test_create_order_rejects_non_positive_quantity(client_factory, create_uc):
    body = {"customer_id": "cust-1", "items": [{"product_id": "prod-1", "quantity": 0}]}
    async with await client_factory({get_create_order_use_case: lambda: create_uc}) as ac:
        resp = await ac.post("/api/orders", json=body)

    assert resp.status_code == 422
    assert resp.json()["error_code"] == "VALIDATION_ERROR"
    create_uc.execute.assert_not_called()


async def test_list_orders_passes_status_filter(client_factory, sample_order):
    uc = Mock(spec=ListOrdersUseCase)
    uc.execute = AsyncMock(return_value=[sample_order])
    async with await client_factory({get_list_orders_use_case: lambda: uc}) as ac:
        resp = await ac.get("/api/orders", params={"status": "out-for-delivery"})

    assert resp.status_code == 200
    assert len(resp.json()) == 1
    assert uc.execute.await_args.kwargs["status"].value == "out-for-delivery"


async def test_delete_order(client_factory):
    uc = Mock(spec=DeleteOrderUseCase)
    uc.execute = AsyncMock(
        return_value=DeleteOrderResult(order_id="order-1", restocked={"prod-1": 2.0})
    )
    async with await client_factory({get_delete_order_use_case: lambda: uc}) as ac:
        resp = await ac.delete("/api/orders/order-1")

    assert resp.status_code == 200
    assert resp.json() == {"id": "order-1", "deleted": True}


async def test_delete_invoiced_order_conflicts(client_factory):
    uc = Mock(spec=DeleteOrderUseCase)
    uc.execute = AsyncMock(side_effect=OrderHasInvoiceError("order-1", "inv-1"))
    async with await client_factory({get_delete_order_use_case: lambda: uc}) as ac:
        resp = await ac.delete("/api/orders/order-1")

    assert resp.status_code == 409
    assert resp.json()["error_code"] == "ORDER_HAS_INVOICE"
