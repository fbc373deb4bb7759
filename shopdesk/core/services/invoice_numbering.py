"""Human-readable invoice numbers."""

from datetime import datetime


def financial_year(created_at: datetime) -> str:
    """Year label for an invoice, e.g. ``2025-26`` for anything dated 2025."""
    return f"{created_at.year}-{str(created_at.year + 1)[-2:]}"


def format_invoice_number(number: int, created_at: datetime) -> str:
    """Zero-padded counter value plus year label: ``0001/2025-26``."""
    if number < 1:
        raise ValueError("invoice number must be positive")
    return f"{number:04d}/{financial_year(created_at)}"
