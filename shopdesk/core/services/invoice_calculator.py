"""
Invoice calculator.

Prices are tax-inclusive: tax is decomposed out of the subtotal, never added.
Figures keep full precision; rounding is applied only where noted
(pretax subtotal to 2 places, the rounded grand total to a whole rupee) and
by ``format_money`` at presentation time.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from shopdesk.core.entities.invoice import MONEY_TOLERANCE, PaidStatus
from shopdesk.core.entities.order import OrderItem


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a cashier does: halves go away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_money(value: float) -> str:
    """Two decimals with Indian digit grouping, e.g. ``12,34,567.80``."""
    rounded = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    whole, fraction = f"{abs(rounded):.2f}".split(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])

    return f"{sign}{whole}.{fraction}"


@dataclass
class InvoiceBreakdown:
    """Every figure printed in an invoice's totals block."""

    subtotal: float
    tax_rate: float  # fraction, e.g. 0.05
    pretax_subtotal: float
    total_tax: float
    cgst: float
    sgst: float
    shipping: float
    order_total: float
    outstanding: float  # included portion only
    grand_total: float
    rounded_total: int
    amount_paid: float
    due_amount: float | None  # None when nothing is due

    @property
    def half_rate_percent(self) -> float:
        """Rate of each tax half as a percentage (2.5 for 5%)."""
        return self.tax_rate * 50


def calculate_invoice(
    items: list[OrderItem],
    tax_rate: float,
    shipping_cost: float | None = None,
    outstanding_amount: float | None = None,
    include_outstanding: bool = False,
    amount_paid: float = 0.0,
    paid_status: PaidStatus = PaidStatus.UNPAID,
) -> InvoiceBreakdown:
    """Decompose embedded tax and build the invoice totals.

    Args:
        items: Order lines; ``price`` is the tax-inclusive unit price.
        tax_rate: Tax as a fraction (0.05 for 5%).
        shipping_cost: Optional delivery charge added after tax.
        outstanding_amount: Prior balance carried into the invoice.
        include_outstanding: Whether the carried balance counts.
        amount_paid: Amount already received.
        paid_status: Current payment state.
    """
    if tax_rate < 0:
        raise ValueError("tax rate must not be negative")

    subtotal = sum(item.price * item.quantity for item in items)
    pretax_subtotal = round_half_up(subtotal / (1 + tax_rate), 2)
    total_tax = subtotal - pretax_subtotal
    shipping = shipping_cost or 0.0
    order_total = subtotal + shipping
    outstanding = (outstanding_amount or 0.0) if include_outstanding else 0.0
    grand_total = order_total + outstanding

    due = grand_total - amount_paid
    due_amount = (
        due if paid_status != PaidStatus.PAID and due > MONEY_TOLERANCE else None
    )

    return InvoiceBreakdown(
        subtotal=subtotal,
        tax_rate=tax_rate,
        pretax_subtotal=pretax_subtotal,
        total_tax=total_tax,
        cgst=total_tax / 2,
        sgst=total_tax / 2,
        shipping=shipping,
        order_total=order_total,
        outstanding=outstanding,
        grand_total=grand_total,
        rounded_total=int(round_half_up(grand_total)),
        amount_paid=amount_paid,
        due_amount=due_amount,
    )
