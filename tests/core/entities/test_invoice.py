"""Unit tests for invoice entities."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from shopdesk.core.entities import Invoice, PaidStatus, payment_problem


class TestPaymentProblem:
    @pytest.mark.parametrize(
        ("status", "amount", "total"),
        [
            (PaidStatus.PAID, 100.0, 100.0),
            (PaidStatus.PAID, 100.004, 100.0),
            (PaidStatus.UNPAID, 0.0, 100.0),
            (PaidStatus.PARTIALLY_PAID, 40.0, 100.0),
        ],
    )
    def test_consistent_pairs(self, status, amount, total):
        assert payment_problem(status, amount, total) is None

    @pytest.mark.parametrize(
        ("status", "amount", "total"),
        [
            (PaidStatus.PAID, 90.0, 100.0),
            (PaidStatus.UNPAID, 10.0, 100.0),
            (PaidStatus.PARTIALLY_PAID, 0.0, 100.0),
            (PaidStatus.PARTIALLY_PAID, 100.0, 100.0),
            (PaidStatus.PARTIALLY_PAID, 150.0, 100.0),
            (PaidStatus.UNPAID, -5.0, 100.0),
        ],
    )
    def test_inconsistent_pairs(self, status, amount, total):
        assert payment_problem(status, amount, total)

    def test_overpayment_message(self):
        problem = payment_problem(PaidStatus.PAID, 120.0, 100.0)
        assert "exceeds" in problem


class TestInvoice:
    def test_formatted_number(self, sample_invoice: Invoice):
        assert sample_invoice.formatted_number == "0001/2025-26"

    def test_due_amount(self, sample_invoice: Invoice):
        assert sample_invoice.due_amount == 260.0

    def test_due_amount_never_negative(self):
        invoice = Invoice(
            invoice_number=3,
            order_id="o1",
            total=100.0,
            paid_status=PaidStatus.PAID,
            amount_paid=100.004,
        )
        assert invoice.due_amount == 0.0

    def test_inconsistent_payment_rejected(self):
        with pytest.raises(ValidationError):
            Invoice(
                invoice_number=1,
                order_id="o1",
                total=100.0,
                paid_status=PaidStatus.PAID,
                amount_paid=10.0,
            )

    def test_year_label_follows_creation_date(self):
        invoice = Invoice(
            invoice_number=42,
            order_id="o1",
            created_at=datetime(2026, 1, 15),
        )
        assert invoice.formatted_number == "0042/2026-27"
