"""Generate Invoice Use Case: one numbered invoice per order."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from shopdesk.application.dto.requests import GenerateInvoiceRequest
from shopdesk.application.dto.responses import InvoiceResponse, invoice_to_response
from shopdesk.application.use_cases.update_invoice_payment import resolve_amount_paid
from shopdesk.config import get_logger, get_settings
from shopdesk.core.entities import Invoice, PaymentRecord
from shopdesk.core.exceptions import DuplicateInvoiceError, OrderNotFoundError
from shopdesk.core.interfaces import (
    ICounterStore,
    IInvoiceStore,
    IOrderStore,
    ISettingsStore,
)
from shopdesk.core.services.invoice_calculator import InvoiceBreakdown, calculate_invoice

logger = get_logger(__name__)


@dataclass
class GenerateInvoiceResult:
    """Result of issuing an invoice."""

    invoice: Invoice
    breakdown: InvoiceBreakdown


class GenerateInvoiceUseCase:
    """
    Issue the invoice for an order.

    The order's items and charges are snapshotted so later order edits do not
    change an issued invoice. The number comes from the shared counter and is
    only drawn once every check has passed.
    """

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        invoice_store: IInvoiceStore | None = None,
        counter_store: ICounterStore | None = None,
        settings_store: ISettingsStore | None = None,
    ):
        self._order_store = order_store
        self._invoice_store = invoice_store
        self._counter_store = counter_store
        self._settings_store = settings_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_counter_store(self) -> ICounterStore:
        if self._counter_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_counter_store

            self._counter_store = await get_counter_store()
        return self._counter_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    async def execute(self, request: GenerateInvoiceRequest) -> GenerateInvoiceResult:
        """Execute generate invoice use case."""
        logger.info("generate_invoice_started", order_id=request.order_id)
        business = get_settings().business

        order = await (await self._get_order_store()).get(request.order_id)
        if order is None:
            raise OrderNotFoundError(request.order_id)

        invoice_store = await self._get_invoice_store()
        existing = await invoice_store.find_by_order(request.order_id)
        if existing is not None:
            raise DuplicateInvoiceError(request.order_id, existing.id)  # type: ignore[arg-type]

        company = await (await self._get_settings_store()).get_company()
        breakdown = calculate_invoice(
            order.items,
            tax_rate=company.tax_fraction,
            shipping_cost=order.shipping_cost,
            outstanding_amount=order.outstanding_amount,
            include_outstanding=order.include_outstanding,
        )
        total = breakdown.grand_total
        amount_paid = resolve_amount_paid(request.paid_status, request.amount_paid, total)

        number = await (await self._get_counter_store()).increment(
            business.invoice_counter_name
        )

        now = datetime.utcnow()
        invoice = Invoice(
            invoice_number=number,
            order_id=order.id,  # type: ignore[arg-type]
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            customer_phone=order.customer_phone,
            delivery_address=order.delivery_address,
            items=[item.model_copy() for item in order.items],
            shipping_cost=order.shipping_cost or 0.0,
            outstanding_amount=order.outstanding_amount or 0.0,
            include_outstanding=order.include_outstanding,
            total=total,
            paid_status=request.paid_status,
            amount_paid=amount_paid,
            payment_method=request.payment_method,
            due_date=request.due_date
            or date.today() + timedelta(days=business.invoice_due_days),
            notes=request.notes,
            payment_history=[
                PaymentRecord(
                    paid_status=request.paid_status,
                    amount_paid=amount_paid,
                    payment_method=request.payment_method,
                    payment_date=date.today(),
                    notes="Invoice generated",
                )
            ],
            created_at=now,
            updated_at=now,
        )
        invoice = await invoice_store.create(invoice)

        breakdown = calculate_invoice(
            invoice.items,
            tax_rate=company.tax_fraction,
            shipping_cost=invoice.shipping_cost,
            outstanding_amount=invoice.outstanding_amount,
            include_outstanding=invoice.include_outstanding,
            amount_paid=invoice.amount_paid,
            paid_status=invoice.paid_status,
        )
        logger.info(
            "generate_invoice_complete",
            invoice_id=invoice.id,
            invoice_number=invoice.formatted_number,
            total=total,
        )
        return GenerateInvoiceResult(invoice=invoice, breakdown=breakdown)

    def to_response(self, result: GenerateInvoiceResult) -> InvoiceResponse:
        """Convert result to API response."""
        return invoice_to_response(result.invoice, result.breakdown)
