"""Invoice domain entities."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from shopdesk.core.entities.order import OrderItem

# Amounts closer than half a paisa are treated as equal.
MONEY_TOLERANCE = 0.005


class PaidStatus(str, Enum):
    """Payment state of an invoice."""

    PAID = "paid"
    UNPAID = "unpaid"
    PARTIALLY_PAID = "partially_paid"


def payment_problem(
    paid_status: PaidStatus, amount_paid: float, total: float
) -> str | None:
    """Return why a status/amount pair is inconsistent, or None if it is valid."""
    if amount_paid < 0:
        return "amount paid cannot be negative"
    if amount_paid > total + MONEY_TOLERANCE:
        return f"amount paid {amount_paid:.2f} exceeds total {total:.2f}"
    if paid_status == PaidStatus.PAID and abs(amount_paid - total) > MONEY_TOLERANCE:
        return "a paid invoice must have amount paid equal to its total"
    if paid_status == PaidStatus.UNPAID and amount_paid > MONEY_TOLERANCE:
        return "an unpaid invoice cannot have an amount paid"
    if paid_status == PaidStatus.PARTIALLY_PAID and not (
        MONEY_TOLERANCE < amount_paid < total - MONEY_TOLERANCE
    ):
        return "a partial payment must be above zero and below the total"
    return None


class PaymentRecord(BaseModel):
    """One entry of an invoice's append-only payment log."""

    paid_status: PaidStatus
    amount_paid: float = 0.0
    payment_method: str | None = None
    payment_date: date | None = None
    reference: str | None = None
    notes: str | None = None
    recorded_at: datetime = Field(default_factory=datetime.utcnow)


class Invoice(BaseModel):
    """Invoice issued once per order, holding a snapshot of its charges."""

    id: str | None = None
    invoice_number: int
    order_id: str
    customer_id: str = ""
    customer_name: str = ""
    customer_phone: str = ""
    delivery_address: str = ""
    items: list[OrderItem] = Field(default_factory=list)
    shipping_cost: float = 0.0
    outstanding_amount: float = 0.0
    include_outstanding: bool = False
    total: float = 0.0
    paid_status: PaidStatus = PaidStatus.UNPAID
    amount_paid: float = 0.0
    payment_method: str | None = None
    due_date: date | None = None
    notes: str = ""
    payment_history: list[PaymentRecord] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def check_payment(self) -> "Invoice":
        problem = payment_problem(self.paid_status, self.amount_paid, self.total)
        if problem:
            raise ValueError(problem)
        return self

    @property
    def formatted_number(self) -> str:
        """Printed invoice number, e.g. ``0001/2025-26``."""
        from shopdesk.core.services.invoice_numbering import format_invoice_number

        return format_invoice_number(self.invoice_number, self.created_at)

    @property
    def due_amount(self) -> float:
        return max(self.total - self.amount_paid, 0.0)
