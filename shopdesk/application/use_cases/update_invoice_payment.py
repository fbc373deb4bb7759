"""Update Invoice Payment Use Case: records a payment status change."""

from datetime import date

from shopdesk.application.dto.requests import UpdatePaymentRequest
from shopdesk.application.dto.responses import InvoiceResponse, invoice_to_response
from shopdesk.config import get_logger
from shopdesk.core.entities import Invoice, PaidStatus, PaymentRecord, payment_problem
from shopdesk.core.exceptions import InvalidPaymentError, InvoiceNotFoundError
from shopdesk.core.interfaces import IInvoiceStore

logger = get_logger(__name__)


def resolve_amount_paid(
    paid_status: PaidStatus, amount_paid: float | None, total: float
) -> float:
    """
    Amount paid implied by a status, checked against the invoice total.

    ``paid`` defaults to the total and ``unpaid`` to zero; a partial payment
    must state its amount.
    """
    if amount_paid is None:
        if paid_status == PaidStatus.PARTIALLY_PAID:
            raise InvalidPaymentError(
                paid_status.value, 0.0, total, "a partial payment needs an amount"
            )
        amount_paid = total if paid_status == PaidStatus.PAID else 0.0

    problem = payment_problem(paid_status, amount_paid, total)
    if problem:
        raise InvalidPaymentError(paid_status.value, amount_paid, total, problem)
    return amount_paid


class UpdateInvoicePaymentUseCase:
    """Change an invoice's payment state and append it to the payment log."""

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, invoice_id: str, request: UpdatePaymentRequest) -> Invoice:
        store = await self._get_invoice_store()
        invoice = await store.get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        amount = resolve_amount_paid(request.paid_status, request.amount_paid, invoice.total)

        invoice.paid_status = request.paid_status
        invoice.amount_paid = amount
        if request.payment_method:
            invoice.payment_method = request.payment_method
        invoice.payment_history.append(
            PaymentRecord(
                paid_status=request.paid_status,
                amount_paid=amount,
                payment_method=request.payment_method or invoice.payment_method,
                payment_date=request.payment_date or date.today(),
                reference=request.reference,
                notes=request.notes,
            )
        )
        invoice = await store.update(invoice)

        logger.info(
            "invoice_payment_updated",
            invoice_id=invoice_id,
            paid_status=request.paid_status.value,
            amount_paid=amount,
            payments=len(invoice.payment_history),
        )
        return invoice

    def to_response(self, invoice: Invoice) -> InvoiceResponse:
        return invoice_to_response(invoice)
