"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from shopdesk.core.entities import OrderStatus, PaidStatus


# --- Customers ---


class CreateCustomerRequest(BaseModel):
    """Request to register a customer."""

    name: str = Field(..., min_length=1, description="Customer name")
    email: str = Field(default="", description="Email address")
    phone: str = Field(default="", description="Phone number")
    address: str = Field(default="", description="Delivery address")


class UpdateCustomerRequest(BaseModel):
    """Partial customer update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    address: str | None = None


# --- Products ---


class StockBatchRequest(BaseModel):
    """A purchase lot added to a product."""

    quantity: float = Field(..., gt=0, description="Units received")
    cost_price: float = Field(..., gt=0, description="Unit purchase cost")
    date_added: datetime | None = Field(
        default=None, description="Purchase date (defaults to now)"
    )


class StockBatchEditRequest(BaseModel):
    """A batch in a product's edited batch list."""

    id: str | None = Field(default=None, description="Existing batch ID")
    quantity: float = Field(..., ge=0, description="Units on hand")
    cost_price: float = Field(..., gt=0, description="Unit purchase cost")
    date_added: datetime | None = None


class CreateProductRequest(BaseModel):
    """Request to add a product to the catalog."""

    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(default="")
    price: float = Field(..., ge=0, description="Selling price, tax included")
    category: str = Field(..., min_length=1, description="Product category")
    unit: str = Field(default="Kilogram", description="Unit of measure")
    image: str = Field(default="", description="Image URL or path")
    batches: list[StockBatchRequest] = Field(
        default_factory=list, description="Initial stock, oldest first"
    )


class UpdateProductRequest(BaseModel):
    """Partial product update.

    ``batches`` replaces the whole batch list (oldest first) when given.
    """

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: str | None = Field(default=None, min_length=1)
    unit: str | None = None
    image: str | None = None
    batches: list[StockBatchEditRequest] | None = None


class RestockProductRequest(BaseModel):
    """Request to append a new stock batch."""

    quantity: float = Field(..., gt=0, description="Units received")
    cost_price: float = Field(..., gt=0, description="Unit purchase cost")


# --- Orders ---


class OrderItemRequest(BaseModel):
    """One requested order line."""

    product_id: str = Field(..., description="Product ID")
    quantity: float = Field(..., gt=0, description="Quantity ordered")
    custom_price: float | None = Field(
        default=None, ge=0, description="Per-order unit price override"
    )


class CreateOrderRequest(BaseModel):
    """Request to place an order."""

    customer_id: str = Field(..., description="Customer ID")
    items: list[OrderItemRequest] = Field(default_factory=list)
    shipping_cost: float | None = Field(default=None, ge=0)
    outstanding_amount: float | None = Field(
        default=None,
        ge=0,
        description="Carried balance; computed from open invoices when omitted",
    )
    include_outstanding: bool = Field(default=False)


class EditOrderRequest(BaseModel):
    """Request to edit an order's items and charges."""

    items: list[OrderItemRequest] = Field(default_factory=list)
    customer_id: str | None = Field(default=None, description="Reassign customer")
    shipping_cost: float | None = Field(default=None, ge=0)
    outstanding_amount: float | None = Field(default=None, ge=0)
    include_outstanding: bool | None = None
    status: OrderStatus | None = None


class UpdateOrderStatusRequest(BaseModel):
    """Request to move an order to another fulfilment stage."""

    status: OrderStatus


# --- Invoices ---


class GenerateInvoiceRequest(BaseModel):
    """Request to issue the invoice for an order."""

    order_id: str = Field(..., description="Order ID")
    paid_status: PaidStatus = Field(default=PaidStatus.UNPAID)
    amount_paid: float | None = Field(
        default=None,
        ge=0,
        description="Required for partially_paid; implied otherwise",
    )
    payment_method: str | None = Field(default=None, examples=["cash", "upi"])
    due_date: date | None = Field(default=None, description="Defaults to today + due days")
    notes: str = Field(default="")


class UpdatePaymentRequest(BaseModel):
    """Request to record a payment status change."""

    paid_status: PaidStatus
    amount_paid: float | None = Field(
        default=None,
        ge=0,
        description="Required for partially_paid; implied otherwise",
    )
    payment_method: str | None = None
    payment_date: date | None = None
    reference: str | None = None
    notes: str | None = None


# --- Settings ---


class UpdateCompanySettingsRequest(BaseModel):
    """Full replacement of the company settings."""

    name: str = Field(..., min_length=1)
    owner: str = ""
    logo: str = ""
    address: str = ""
    city: str = ""
    country: str = "India"
    email: str = ""
    phone: str = ""
    tax_rate: float = Field(default=5.0, ge=0, le=100, description="Percent")
    gstin: str = ""
    payment_terms: str = "Immediate"
    notes: str = ""
    signature: str = ""
