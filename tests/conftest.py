"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import datetime

import pytest

from shopdesk.config import reset_settings
from shopdesk.core.entities import (
    CompanySettings,
    Customer,
    Invoice,
    Order,
    OrderItem,
    PaidStatus,
    Product,
    StockBatch,
)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Settings are cached per process; rebuild them for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_customer() -> Customer:
    return Customer(
        id="cust-1",
        name="Asha Rao",
        email="asha@example.com",
        phone="9876543210",
        address="12 MG Road, Pune",
    )


@pytest.fixture
def sample_product() -> Product:
    """Rice with two batches: 5 units at 40, then 10 units at 45."""
    return Product(
        id="prod-1",
        name="Basmati Rice",
        price=105.0,
        category="Grains",
        batches=[
            StockBatch(id="b1", quantity=5, cost_price=40, date_added=datetime(2025, 1, 1)),
            StockBatch(id="b2", quantity=10, cost_price=45, date_added=datetime(2025, 2, 1)),
        ],
    )


@pytest.fixture
def sample_order(sample_customer: Customer) -> Order:
    order = Order(
        id="order-1",
        customer_id=sample_customer.id,
        customer_name=sample_customer.name,
        customer_phone=sample_customer.phone,
        delivery_address=sample_customer.address,
        items=[
            OrderItem(
                product_id="prod-1",
                name="Basmati Rice",
                quantity=2,
                price=105.0,
                original_price=105.0,
                cost_basis=80.0,
            ),
        ],
        shipping_cost=50.0,
        created_at=datetime(2025, 6, 10, 9, 30),
        updated_at=datetime(2025, 6, 10, 9, 30),
    )
    order.total = order.compute_total()
    return order


@pytest.fixture
def sample_invoice(sample_order: Order) -> Invoice:
    return Invoice(
        id="inv-1",
        invoice_number=1,
        order_id=sample_order.id,
        customer_id=sample_order.customer_id,
        customer_name=sample_order.customer_name,
        customer_phone=sample_order.customer_phone,
        delivery_address=sample_order.delivery_address,
        items=[item.model_copy() for item in sample_order.items],
        shipping_cost=50.0,
        total=260.0,
        paid_status=PaidStatus.UNPAID,
        created_at=datetime(2025, 6, 10, 10, 0),
        updated_at=datetime(2025, 6, 10, 10, 0),
    )


@pytest.fixture
def company() -> CompanySettings:
    return CompanySettings(
        name="Green Grocers",
        owner="R. Mehta",
        address="4 Market Lane",
        city="Pune",
        email="hello@greengrocers.in",
        phone="020-5550101",
        tax_rate=5.0,
        gstin="27ABCDE1234F1Z5",
    )
