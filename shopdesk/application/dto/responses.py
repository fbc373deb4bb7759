"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from shopdesk.core.entities import (
    CompanySettings,
    Customer,
    Invoice,
    Order,
    OrderStatus,
    PaidStatus,
    PaymentRecord,
    Product,
)
from shopdesk.core.services.amount_in_words import amount_in_words
from shopdesk.core.services.invoice_calculator import InvoiceBreakdown


# --- Customers ---


class CustomerResponse(BaseModel):
    """Customer response DTO."""

    id: str
    name: str
    email: str
    phone: str
    address: str
    outstanding_balance: float | None = Field(
        default=None, description="Unpaid invoice balance (detail view only)"
    )
    created_at: datetime
    updated_at: datetime


def customer_to_response(
    customer: Customer, outstanding_balance: float | None = None
) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,  # type: ignore[arg-type]
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
        outstanding_balance=outstanding_balance,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


# --- Products ---


class StockBatchResponse(BaseModel):
    id: str
    quantity: float
    cost_price: float
    date_added: datetime


class ProductResponse(BaseModel):
    """Product with derived stock figures."""

    id: str
    name: str
    description: str
    price: float
    category: str
    unit: str
    image: str
    batches: list[StockBatchResponse]
    total_stock: float = Field(..., description="Sum of batch quantities")
    average_cost: float = Field(..., description="Stock-weighted unit cost")
    created_at: datetime
    updated_at: datetime


def product_to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        unit=product.unit,
        image=product.image,
        batches=[
            StockBatchResponse(
                id=batch.id,
                quantity=batch.quantity,
                cost_price=batch.cost_price,
                date_added=batch.date_added,
            )
            for batch in product.batches
        ],
        total_stock=product.total_stock,
        average_cost=product.average_cost,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


# --- Orders ---


class OrderItemResponse(BaseModel):
    product_id: str
    name: str
    quantity: float
    price: float
    original_price: float
    custom_price: float | None
    line_total: float


class OrderResponse(BaseModel):
    """Order response DTO."""

    id: str
    customer_id: str
    customer_name: str
    customer_phone: str
    delivery_address: str
    items: list[OrderItemResponse]
    subtotal: float
    shipping_cost: float | None
    outstanding_amount: float | None
    include_outstanding: bool
    status: OrderStatus
    total: float
    created_at: datetime
    updated_at: datetime


def order_to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        delivery_address=order.delivery_address,
        items=[
            OrderItemResponse(
                product_id=item.product_id,
                name=item.name,
                quantity=item.quantity,
                price=item.price,
                original_price=item.original_price,
                custom_price=item.custom_price,
                line_total=item.line_total,
            )
            for item in order.items
        ],
        subtotal=order.subtotal,
        shipping_cost=order.shipping_cost,
        outstanding_amount=order.outstanding_amount,
        include_outstanding=order.include_outstanding,
        status=order.status,
        total=order.total,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


# --- Invoices ---


class InvoiceBreakdownResponse(BaseModel):
    """Tax and totals block of an invoice."""

    subtotal: float
    pretax_subtotal: float
    total_tax: float
    cgst: float
    sgst: float
    tax_rate_percent: float
    shipping: float
    order_total: float
    outstanding: float
    grand_total: float
    rounded_total: int
    amount_in_words: str
    amount_paid: float
    due_amount: float | None


def breakdown_to_response(breakdown: InvoiceBreakdown) -> InvoiceBreakdownResponse:
    return InvoiceBreakdownResponse(
        subtotal=breakdown.subtotal,
        pretax_subtotal=breakdown.pretax_subtotal,
        total_tax=breakdown.total_tax,
        cgst=breakdown.cgst,
        sgst=breakdown.sgst,
        tax_rate_percent=breakdown.tax_rate * 100,
        shipping=breakdown.shipping,
        order_total=breakdown.order_total,
        outstanding=breakdown.outstanding,
        grand_total=breakdown.grand_total,
        rounded_total=breakdown.rounded_total,
        amount_in_words=amount_in_words(breakdown.rounded_total),
        amount_paid=breakdown.amount_paid,
        due_amount=breakdown.due_amount,
    )


class PaymentRecordResponse(BaseModel):
    paid_status: PaidStatus
    amount_paid: float
    payment_method: str | None
    payment_date: date | None
    reference: str | None
    notes: str | None
    recorded_at: datetime


def payment_to_response(record: PaymentRecord) -> PaymentRecordResponse:
    return PaymentRecordResponse(**record.model_dump())


class InvoiceResponse(BaseModel):
    """Invoice response DTO."""

    id: str
    invoice_number: int
    formatted_number: str = Field(..., examples=["0001/2025-26"])
    order_id: str
    customer_id: str
    customer_name: str
    customer_phone: str
    delivery_address: str
    items: list[OrderItemResponse]
    shipping_cost: float
    outstanding_amount: float
    include_outstanding: bool
    total: float
    paid_status: PaidStatus
    amount_paid: float
    due_amount: float
    payment_method: str | None
    due_date: date | None
    notes: str
    payment_history: list[PaymentRecordResponse]
    breakdown: InvoiceBreakdownResponse | None = None
    created_at: datetime
    updated_at: datetime


def invoice_to_response(
    invoice: Invoice, breakdown: InvoiceBreakdown | None = None
) -> InvoiceResponse:
    return InvoiceResponse(
        id=invoice.id,  # type: ignore[arg-type]
        invoice_number=invoice.invoice_number,
        formatted_number=invoice.formatted_number,
        order_id=invoice.order_id,
        customer_id=invoice.customer_id,
        customer_name=invoice.customer_name,
        customer_phone=invoice.customer_phone,
        delivery_address=invoice.delivery_address,
        items=[
            OrderItemResponse(
                product_id=item.product_id,
                name=item.name,
                quantity=item.quantity,
                price=item.price,
                original_price=item.original_price,
                custom_price=item.custom_price,
                line_total=item.line_total,
            )
            for item in invoice.items
        ],
        shipping_cost=invoice.shipping_cost,
        outstanding_amount=invoice.outstanding_amount,
        include_outstanding=invoice.include_outstanding,
        total=invoice.total,
        paid_status=invoice.paid_status,
        amount_paid=invoice.amount_paid,
        due_amount=invoice.due_amount,
        payment_method=invoice.payment_method,
        due_date=invoice.due_date,
        notes=invoice.notes,
        payment_history=[payment_to_response(p) for p in invoice.payment_history],
        breakdown=breakdown_to_response(breakdown) if breakdown else None,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


# --- Reports ---


class ProfitLossRowResponse(BaseModel):
    invoice_id: str
    invoice_number: str
    customer_name: str
    created_at: datetime
    total: float
    cost: float
    profit: float
    margin: float = Field(..., description="Profit as percent of total")


class ProfitLossResponse(BaseModel):
    """Profit and loss report."""

    start: date
    end: date
    rows: list[ProfitLossRowResponse]
    total_revenue: float
    total_cost: float
    total_profit: float
    overall_margin: float


class WeeklySalesPoint(BaseModel):
    name: str = Field(..., examples=["Mon"])
    sales: float


class DashboardStatsResponse(BaseModel):
    """Dashboard headline numbers."""

    total_sales: float
    total_orders: int
    total_customers: int
    low_stock_count: int
    low_stock_products: list[ProductResponse]
    recent_orders: list[OrderResponse]
    weekly_sales: list[WeeklySalesPoint]
    total_outstanding: float


# --- Settings ---


class CompanySettingsResponse(BaseModel):
    name: str
    owner: str
    logo: str
    address: str
    city: str
    country: str
    email: str
    phone: str
    tax_rate: float
    gstin: str
    payment_terms: str
    notes: str
    signature: str


def settings_to_response(settings: CompanySettings) -> CompanySettingsResponse:
    return CompanySettingsResponse(**settings.model_dump())


# --- Common ---


class DeleteResponse(BaseModel):
    """Result of a delete request."""

    id: str
    deleted: bool = True


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy or unhealthy")
    version: str
    environment: str
    database: str = Field(..., description="ok or error")
    schema_version: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ORDER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
