"""Core business services (pure, no infrastructure imports)."""

from shopdesk.core.services.amount_in_words import amount_in_words
from shopdesk.core.services.invoice_calculator import (
    InvoiceBreakdown,
    calculate_invoice,
    format_money,
    round_half_up,
)
from shopdesk.core.services.invoice_numbering import format_invoice_number
from shopdesk.core.services.order_reconciliation import (
    QuantityChange,
    ReconciliationPlan,
    plan_reconciliation,
)
from shopdesk.core.services.reporting import (
    DashboardStats,
    ProfitLossReport,
    dashboard_stats,
    outstanding_balance,
    profit_loss,
)
from shopdesk.core.services.stock_ledger import (
    add_batch,
    average_cost,
    deplete,
    depletion_cost,
    replenish,
    total_stock,
)
from shopdesk.core.services.stock_planner import StockPlan, plan_stock_changes

__all__ = [
    # Stock ledger
    "add_batch",
    "average_cost",
    "deplete",
    "depletion_cost",
    "replenish",
    "total_stock",
    "StockPlan",
    "plan_stock_changes",
    # Orders
    "QuantityChange",
    "ReconciliationPlan",
    "plan_reconciliation",
    # Invoices
    "InvoiceBreakdown",
    "amount_in_words",
    "calculate_invoice",
    "format_invoice_number",
    "format_money",
    "round_half_up",
    # Reports
    "DashboardStats",
    "ProfitLossReport",
    "dashboard_stats",
    "outstanding_balance",
    "profit_loss",
]
