"""Core domain entities."""

from shopdesk.core.entities.company import CompanySettings
from shopdesk.core.entities.customer import Customer
from shopdesk.core.entities.invoice import (
    Invoice,
    PaidStatus,
    PaymentRecord,
    payment_problem,
)
from shopdesk.core.entities.order import Order, OrderItem, OrderStatus
from shopdesk.core.entities.product import Product, StockBatch

__all__ = [
    # Customer entities
    "Customer",
    # Product entities
    "Product",
    "StockBatch",
    # Order entities
    "Order",
    "OrderItem",
    "OrderStatus",
    # Invoice entities
    "Invoice",
    "PaidStatus",
    "PaymentRecord",
    "payment_problem",
    # Settings
    "CompanySettings",
]
