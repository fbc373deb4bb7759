"""Tests for GenerateInvoiceUseCase."""

from datetime import date, timedelta

import pytest

from shopdesk.application.dto.requests import GenerateInvoiceRequest
from shopdesk.application.use_cases.generate_invoice import GenerateInvoiceUseCase
from shopdesk.core.entities import PaidStatus
from shopdesk.core.exceptions import (
    DuplicateInvoiceError,
    InvalidPaymentError,
    OrderNotFoundError,
)


@pytest.fixture
def use_case(order_store, invoice_store, counter_store, settings_store):
    return GenerateInvoiceUseCase(
        order_store=order_store,
        invoice_store=invoice_store,
        counter_store=counter_store,
        settings_store=settings_store,
    )


class TestGenerateInvoice:
    async def test_snapshots_order(self, use_case, counter_store):
        result = await use_case.execute(GenerateInvoiceRequest(order_id="order-1"))
        invoice = result.invoice

        assert invoice.id == "inv-new"
        assert invoice.invoice_number == 7
        assert invoice.order_id == "order-1"
        assert invoice.customer_name == "Asha Rao"
        assert invoice.shipping_cost == 50.0
        assert invoice.total == pytest.approx(260.0)
        assert invoice.paid_status == PaidStatus.UNPAID
        assert invoice.amount_paid == 0.0
        assert invoice.due_date == date.today() + timedelta(days=14)
        assert [r.notes for r in invoice.payment_history] == ["Invoice generated"]
        counter_store.increment.assert_awaited_once_with("invoices")

    async def test_breakdown_uses_company_tax_rate(self, use_case):
        result = await use_case.execute(GenerateInvoiceRequest(order_id="order-1"))
        assert result.breakdown.pretax_subtotal == 200.0
        assert result.breakdown.cgst == pytest.approx(5.0)
        assert result.breakdown.due_amount == pytest.approx(260.0)

    async def test_paid_defaults_to_full_total(self, use_case):
        result = await use_case.execute(
            GenerateInvoiceRequest(order_id="order-1", paid_status=PaidStatus.PAID)
        )
        assert result.invoice.amount_paid == pytest.approx(260.0)
        assert result.breakdown.due_amount is None

    async def test_partial_payment(self, use_case):
        result = await use_case.execute(
            GenerateInvoiceRequest(
                order_id="order-1",
                paid_status=PaidStatus.PARTIALLY_PAID,
                amount_paid=100.0,
            )
        )
        assert result.invoice.due_amount == pytest.approx(160.0)

    async def test_duplicate_is_refused_before_numbering(
        self, use_case, invoice_store, counter_store, sample_invoice
    ):
        invoice_store.find_by_order.return_value = sample_invoice

        with pytest.raises(DuplicateInvoiceError):
            await use_case.execute(GenerateInvoiceRequest(order_id="order-1"))
        counter_store.increment.assert_not_awaited()

    async def test_invalid_payment_does_not_consume_a_number(self, use_case, counter_store):
        with pytest.raises(InvalidPaymentError):
            await use_case.execute(
                GenerateInvoiceRequest(
                    order_id="order-1", paid_status=PaidStatus.PARTIALLY_PAID
                )
            )
        counter_store.increment.assert_not_awaited()

    async def test_unknown_order(self, use_case, order_store):
        order_store.get.return_value = None
        with pytest.raises(OrderNotFoundError):
            await use_case.execute(GenerateInvoiceRequest(order_id="missing"))

    async def test_to_response(self, use_case):
        result = await use_case.execute(GenerateInvoiceRequest(order_id="order-1"))
        response = use_case.to_response(result)
        assert response.invoice_number == 7
        assert response.breakdown is not None
        assert response.breakdown.amount_in_words == "Two Hundred Sixty Only"
