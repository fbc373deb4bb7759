"""PDF generation infrastructure."""

from shopdesk.infrastructure.pdf.invoice_pdf_renderer import (
    Fpdf2InvoiceRenderer,
    IInvoicePdfRenderer,
)

__all__ = [
    "Fpdf2InvoiceRenderer",
    "IInvoicePdfRenderer",
]
