"""Invoice read use cases."""

from datetime import date

from shopdesk.application.dto.responses import InvoiceResponse, invoice_to_response
from shopdesk.core.entities import PaidStatus
from shopdesk.core.exceptions import InvoiceNotFoundError
from shopdesk.core.interfaces import IInvoiceStore, ISettingsStore
from shopdesk.core.services.invoice_calculator import calculate_invoice


class GetInvoiceUseCase:
    """Invoice detail including its tax breakdown at the current tax rate."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        settings_store: ISettingsStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._settings_store = settings_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    async def execute(self, invoice_id: str) -> InvoiceResponse:
        invoice = await (await self._get_invoice_store()).get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        company = await (await self._get_settings_store()).get_company()
        breakdown = calculate_invoice(
            invoice.items,
            tax_rate=company.tax_fraction,
            shipping_cost=invoice.shipping_cost,
            outstanding_amount=invoice.outstanding_amount,
            include_outstanding=invoice.include_outstanding,
            amount_paid=invoice.amount_paid,
            paid_status=invoice.paid_status,
        )
        return invoice_to_response(invoice, breakdown)


class ListInvoicesUseCase:
    """Invoices newest first with search and payment-status filter."""

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(
        self,
        search: str | None = None,
        paid_status: PaidStatus | None = None,
        customer_id: str | None = None,
        start: date | None = None,
        end: date | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[InvoiceResponse]:
        store = await self._get_invoice_store()
        invoices = await store.list_invoices(
            search=search,
            paid_status=paid_status,
            customer_id=customer_id,
            start=start,
            end=end,
            limit=limit,
            offset=offset,
        )
        return [invoice_to_response(invoice) for invoice in invoices]
