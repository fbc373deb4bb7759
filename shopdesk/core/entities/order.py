"""Order domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class OrderStatus(str, Enum):
    """Fulfilment stages of an order, in sequence."""

    PENDING = "pending"
    PROCESSING = "processing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


class OrderItem(BaseModel):
    """A single line of an order."""

    product_id: str
    name: str
    quantity: float = Field(..., gt=0)
    price: float = Field(..., ge=0)  # effective unit price charged
    original_price: float = Field(0.0, ge=0)  # catalog price when ordered
    custom_price: float | None = Field(default=None, ge=0)
    cost_basis: float = 0.0  # FIFO cost of the units drawn for this line

    @model_validator(mode="after")
    def apply_custom_price(self) -> "OrderItem":
        """A custom price always wins over the catalog price."""
        if self.custom_price is not None:
            self.price = self.custom_price
        return self

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Order(BaseModel):
    """A customer order with its line items and charges."""

    id: str | None = None
    customer_id: str
    customer_name: str = ""
    customer_phone: str = ""
    delivery_address: str = ""
    items: list[OrderItem] = Field(default_factory=list)
    shipping_cost: float | None = Field(default=None, ge=0)
    outstanding_amount: float | None = Field(default=None, ge=0)
    include_outstanding: bool = False
    status: OrderStatus = OrderStatus.PENDING
    total: float = 0.0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def compute_total(self) -> float:
        """Subtotal plus shipping, plus the carried balance when included."""
        total = self.subtotal
        if self.shipping_cost is not None:
            total += self.shipping_cost
        if self.include_outstanding and self.outstanding_amount is not None:
            total += self.outstanding_amount
        return total

    def find_item(self, product_id: str) -> OrderItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
