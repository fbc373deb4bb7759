"""
Reporting service.

Pure aggregations over already-fetched records; the use cases do the loading.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from shopdesk.core.entities.invoice import Invoice
from shopdesk.core.entities.order import Order, OrderItem
from shopdesk.core.entities.product import Product

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass
class InvoiceProfit:
    """Profit line for one invoice."""

    invoice_id: str
    invoice_number: str
    customer_name: str
    created_at: datetime
    total: float
    cost: float
    profit: float
    margin: float  # percent


@dataclass
class ProfitLossReport:
    """Profit and loss over an inclusive date range."""

    start: date
    end: date
    rows: list[InvoiceProfit] = field(default_factory=list)
    total_revenue: float = 0.0
    total_cost: float = 0.0
    total_profit: float = 0.0

    @property
    def overall_margin(self) -> float:
        if self.total_revenue <= 0:
            return 0.0
        return self.total_profit / self.total_revenue * 100


@dataclass
class DashboardStats:
    """Headline numbers for the admin dashboard."""

    total_sales: float
    total_orders: int
    total_customers: int
    low_stock_products: list[Product]
    recent_orders: list[Order]
    weekly_sales: list[dict]
    total_outstanding: float


def outstanding_balance(invoices: list[Invoice]) -> float:
    """What a customer still owes across their invoices."""
    return sum(invoice.due_amount for invoice in invoices)


def line_cost(item: OrderItem) -> float:
    """FIFO cost of a line, or catalog price times quantity when unknown."""
    if item.cost_basis > 0:
        return item.cost_basis
    return item.original_price * item.quantity


def invoice_profit(invoice: Invoice) -> InvoiceProfit:
    cost = sum(line_cost(item) for item in invoice.items)
    profit = invoice.total - cost
    margin = profit / invoice.total * 100 if invoice.total > 0 else 0.0
    return InvoiceProfit(
        invoice_id=invoice.id or "",
        invoice_number=invoice.formatted_number,
        customer_name=invoice.customer_name,
        created_at=invoice.created_at,
        total=invoice.total,
        cost=cost,
        profit=profit,
        margin=margin,
    )


def profit_loss(invoices: list[Invoice], start: date, end: date) -> ProfitLossReport:
    """Profit per invoice created between ``start`` and ``end`` inclusive."""
    if end < start:
        raise ValueError("end date is before start date")

    report = ProfitLossReport(start=start, end=end)
    selected = [inv for inv in invoices if start <= inv.created_at.date() <= end]
    for invoice in sorted(selected, key=lambda inv: inv.created_at, reverse=True):
        row = invoice_profit(invoice)
        report.rows.append(row)
        report.total_revenue += row.total
        report.total_cost += row.cost
        report.total_profit += row.profit
    return report


def dashboard_stats(
    orders: list[Order],
    products: list[Product],
    customer_count: int,
    invoices: list[Invoice],
    now: datetime,
    window_days: int = 30,
    low_stock_threshold: float = 10.0,
    recent_limit: int = 5,
) -> DashboardStats:
    """Sales over the trailing window, stock alerts and receivables."""
    since = now - timedelta(days=window_days)
    window = [order for order in orders if order.created_at >= since]

    weekly = dict.fromkeys(WEEKDAYS, 0.0)
    for order in window:
        weekly[WEEKDAYS[order.created_at.weekday()]] += order.total

    recent = sorted(orders, key=lambda order: order.created_at, reverse=True)

    return DashboardStats(
        total_sales=sum(order.total for order in window),
        total_orders=len(window),
        total_customers=customer_count,
        low_stock_products=[
            product for product in products if product.is_low_stock(low_stock_threshold)
        ],
        recent_orders=recent[:recent_limit],
        weekly_sales=[{"name": day, "sales": weekly[day]} for day in WEEKDAYS],
        total_outstanding=outstanding_balance(invoices),
    )
