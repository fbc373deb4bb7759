"""Create Invoice PDF Use Case."""

from dataclasses import dataclass

from shopdesk.config import get_logger
from shopdesk.core.exceptions import InvoiceNotFoundError
from shopdesk.core.interfaces import IInvoiceStore, ISettingsStore
from shopdesk.infrastructure.pdf.invoice_pdf_renderer import (
    Fpdf2InvoiceRenderer,
    IInvoicePdfRenderer,
)

logger = get_logger(__name__)


@dataclass
class InvoicePdfResult:
    """Rendered PDF and the filename it should be served under."""

    content: bytes
    filename: str


class CreateInvoicePdfUseCase:
    """Render a stored invoice with the current company settings."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        settings_store: ISettingsStore | None = None,
        renderer: IInvoicePdfRenderer | None = None,
    ):
        self._invoice_store = invoice_store
        self._settings_store = settings_store
        self._renderer = renderer or Fpdf2InvoiceRenderer()

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

    async def execute(self, invoice_id: str) -> InvoicePdfResult:
        invoice = await (await self._get_invoice_store()).get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        company = await (await self._get_settings_store()).get_company()
        content = self._renderer.render(invoice, company)
        filename = f"Tax-Invoice-{invoice.formatted_number.replace('/', '-')}.pdf"

        logger.info(
            "invoice_pdf_created",
            invoice_id=invoice_id,
            size_bytes=len(content),
        )
        return InvoicePdfResult(content=content, filename=filename)
