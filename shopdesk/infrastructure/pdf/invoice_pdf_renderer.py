"""
Tax invoice PDF renderer using fpdf2.

Lays out a single-page A4 tax invoice: company header with logo (or an
initial badge), bill-to / ship-to blocks, line items, the embedded-tax
breakdown, amount in words and a contact footer. All figures come from
the invoice calculator.
"""

import os
from abc import ABC, abstractmethod

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from shopdesk.config import get_logger
from shopdesk.config.settings import PdfSettings, get_settings
from shopdesk.core.entities import CompanySettings, Invoice, PaidStatus
from shopdesk.core.services.amount_in_words import amount_in_words
from shopdesk.core.services.invoice_calculator import (
    InvoiceBreakdown,
    calculate_invoice,
    format_money,
)

logger = get_logger(__name__)

ACCENT = (0, 128, 0)
WARNING = (210, 80, 0)
DUE = (210, 0, 0)
MUTED = (80, 80, 80)

LEFT = 15
RIGHT = 195
TOTALS_X = 115


def _safe_text(text: str) -> str:
    """Core PDF fonts are Latin-1 only; replace anything else."""
    return (text or "").encode("latin-1", "replace").decode("latin-1")


def _wrap(text: str, max_chars: int = 40) -> list[str]:
    """Split an address into lines of at most ``max_chars``."""
    lines: list[str] = []
    current = ""
    for word in (text or "").split():
        candidate = f"{current} {word}".strip()
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


class IInvoicePdfRenderer(ABC):
    """Interface for invoice PDF rendering implementations."""

    @abstractmethod
    def render(self, invoice: Invoice, company: CompanySettings) -> bytes:
        """Render an invoice into PDF bytes."""
        ...


class _InvoicePdf(FPDF):
    """FPDF subclass that prints the contact footer on every page."""

    def __init__(self, company: CompanySettings, pdf_settings: PdfSettings) -> None:
        super().__init__(format="A4")
        self._company = company
        self._pdf_settings = pdf_settings

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "", 8)
        self.set_text_color(150, 150, 150)
        contact = f"Email: {self._company.email} | Phone: {self._company.phone}"
        self.cell(0, 4, _safe_text(contact), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.cell(0, 4, _safe_text(self._pdf_settings.footer_text), align="C")
        self.set_text_color(0, 0, 0)


class Fpdf2InvoiceRenderer(IInvoicePdfRenderer):
    """Renders tax invoices with fpdf2."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._settings = pdf_settings

    def render(self, invoice: Invoice, company: CompanySettings) -> bytes:
        breakdown = calculate_invoice(
            invoice.items,
            tax_rate=company.tax_fraction,
            shipping_cost=invoice.shipping_cost,
            outstanding_amount=invoice.outstanding_amount,
            include_outstanding=invoice.include_outstanding,
            amount_paid=invoice.amount_paid,
            paid_status=invoice.paid_status,
        )

        pdf = _InvoicePdf(company, self._settings)
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.set_title(_safe_text(f"Tax Invoice-{invoice.formatted_number}"))
        pdf.set_author(_safe_text(company.name))
        pdf.set_creator(_safe_text(company.name))
        pdf.add_page()

        self._render_header(pdf, company)
        self._render_details(pdf, invoice, company)
        self._render_items_table(pdf, invoice)
        self._render_totals(pdf, invoice, breakdown)
        self._render_notes(pdf, invoice, company)

        logger.debug(
            "invoice_pdf_rendered",
            invoice_id=invoice.id,
            pages=pdf.page_no(),
        )
        return bytes(pdf.output())

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _render_header(self, pdf: FPDF, company: CompanySettings) -> None:
        top = 10
        has_logo = self._draw_image(pdf, company.logo, LEFT, top, 32, 16)
        if not has_logo:
            self._draw_initial_badge(pdf, company.name, top)

        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "B", 16)
        pdf.set_xy(LEFT, top + (26 if has_logo else 22))
        pdf.cell(0, 8, _safe_text(company.name.upper()))

        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(*MUTED)
        pdf.set_xy(LEFT, top + 34)
        for line in (company.address, company.city, company.country):
            if line:
                pdf.cell(0, 5, _safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
                pdf.set_x(LEFT)
        if company.gstin:
            pdf.cell(0, 5, _safe_text(f"GSTIN {company.gstin}"))

        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "B", 16)
        pdf.set_xy(TOTALS_X, top + 10)
        pdf.cell(RIGHT - TOTALS_X, 8, "TAX INVOICE", align="R")

        pdf.set_y(top + 60)

    @staticmethod
    def _draw_image(pdf: FPDF, path: str, x: float, y: float, w: float, h: float) -> bool:
        if not path or not os.path.isfile(path):
            return False
        try:
            pdf.image(path, x=x, y=y, w=w, h=h)
        except Exception as e:
            logger.warning("invoice_image_failed", path=path, error=str(e))
            return False
        return True

    @staticmethod
    def _draw_initial_badge(pdf: FPDF, name: str, top: float) -> None:
        """Filled circle with the company's initial, used without a logo."""
        pdf.set_fill_color(*ACCENT)
        pdf.ellipse(LEFT, top, 20, 20, style="F")
        pdf.set_text_color(255, 255, 255)
        pdf.set_font("Helvetica", "B", 16)
        pdf.set_xy(LEFT, top + 6)
        initial = name.strip()[:1].upper() if name.strip() else "?"
        pdf.cell(20, 8, _safe_text(initial), align="C")
        pdf.set_text_color(0, 0, 0)

    def _render_details(
        self, pdf: FPDF, invoice: Invoice, company: CompanySettings
    ) -> None:
        pdf.set_font("Helvetica", "", 10)
        rows = [
            ("Invoice No", invoice.formatted_number),
            ("Invoice Date", invoice.created_at.strftime("%d/%m/%Y")),
            ("Payment Terms", company.payment_terms or "Immediate"),
        ]
        if invoice.due_date and invoice.paid_status != PaidStatus.PAID:
            rows.append(("Due Date", invoice.due_date.strftime("%d/%m/%Y")))
        for label, value in rows:
            pdf.set_x(LEFT)
            pdf.cell(35, 6, label)
            pdf.cell(5, 6, ":")
            pdf.cell(0, 6, _safe_text(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.ln(6)
        block_top = pdf.get_y()
        address = _wrap(invoice.delivery_address)
        for x, title in ((LEFT, "Bill To"), (TOTALS_X, "Ship To")):
            pdf.set_xy(x, block_top)
            pdf.set_font("Helvetica", "B", 10)
            pdf.cell(70, 6, title, new_x=XPos.LEFT, new_y=YPos.NEXT)
            pdf.set_font("Helvetica", "", 10)
            pdf.cell(70, 6, "Non GST Customer", new_x=XPos.LEFT, new_y=YPos.NEXT)
            pdf.cell(70, 6, _safe_text(invoice.customer_name), new_x=XPos.LEFT, new_y=YPos.NEXT)
            for line in address:
                pdf.cell(70, 6, _safe_text(line), new_x=XPos.LEFT, new_y=YPos.NEXT)

        pdf.set_y(block_top + 6 * (3 + len(address)) + 6)

    def _render_items_table(self, pdf: FPDF, invoice: Invoice) -> None:
        col_widths = [12, 83, 20, 30, 35]
        headers = ["S.No", "Description", "Qty", "Unit Price", "Net Price"]
        aligns = ["C", "L", "C", "R", "R"]

        pdf.set_x(LEFT)
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(240, 240, 240)
        for width, header in zip(col_widths, headers):
            pdf.cell(width, 8, header, border=1, fill=True, align="C")
        pdf.ln()

        rows = [
            [
                str(idx),
                _safe_text(item.name[:48]),
                f"{item.quantity:g}",
                format_money(item.price),
                format_money(item.line_total),
            ]
            for idx, item in enumerate(invoice.items, 1)
        ]
        while len(rows) < self._settings.min_table_rows:
            rows.append([""] * len(headers))

        pdf.set_font("Helvetica", "", 9)
        for row in rows:
            pdf.set_x(LEFT)
            for width, value, align in zip(col_widths, row, aligns):
                pdf.cell(width, 7, value, border=1, align=align)
            pdf.ln()
        pdf.ln(6)

    def _render_totals(
        self, pdf: FPDF, invoice: Invoice, breakdown: InvoiceBreakdown
    ) -> None:
        top = pdf.get_y()

        # Amount in words, left column
        pdf.set_xy(LEFT, top)
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(90, 6, "Amount in words", new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(90, 5, amount_in_words(breakdown.rounded_total))

        # Totals, right column
        pdf.set_draw_color(0, 0, 0)
        pdf.line(TOTALS_X, top, RIGHT, top)
        pdf.set_y(top + 2)
        half = f"{breakdown.half_rate_percent:.1f}%"
        self._total_row(pdf, "Subtotal (excl. GST)", format_money(breakdown.pretax_subtotal))
        self._total_row(pdf, f"CGST @ {half}", format_money(breakdown.cgst))
        self._total_row(pdf, f"SGST @ {half}", format_money(breakdown.sgst))
        self._total_row(pdf, "Subtotal (incl. GST)", format_money(breakdown.subtotal))
        if breakdown.shipping > 0:
            self._total_row(pdf, "Shipping Cost", format_money(breakdown.shipping))
        self._total_row(pdf, "Order Total", format_money(breakdown.order_total))
        if breakdown.outstanding > 0:
            self._total_row(
                pdf, "Outstanding Amount", format_money(breakdown.outstanding), WARNING
            )

        pdf.set_font("Helvetica", "B", 9)
        self._total_row(pdf, "Total", format_money(breakdown.grand_total), bold=True)
        self._total_row(
            pdf,
            "Grand Total (Rounded off)",
            f"{self._settings.currency_label} {breakdown.rounded_total}",
            bold=True,
        )

        if invoice.paid_status == PaidStatus.PARTIALLY_PAID:
            pdf.ln(2)
            self._total_row(pdf, "Amount Paid", format_money(breakdown.amount_paid), ACCENT)
            self._total_row(
                pdf, "Amount Due", format_money(breakdown.due_amount or 0.0), DUE
            )
        pdf.ln(8)

    @staticmethod
    def _total_row(
        pdf: FPDF,
        label: str,
        value: str,
        color: tuple[int, int, int] = (0, 0, 0),
        bold: bool = False,
    ) -> None:
        pdf.set_font("Helvetica", "B" if bold else "", 9)
        pdf.set_text_color(*color)
        pdf.set_x(TOTALS_X)
        pdf.cell(45, 5, label)
        pdf.cell(RIGHT - TOTALS_X - 45, 5, value, align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

    def _render_notes(
        self, pdf: FPDF, invoice: Invoice, company: CompanySettings
    ) -> None:
        top = pdf.get_y()
        notes = invoice.notes.strip() or company.notes or "Thank you for your business."

        pdf.set_xy(LEFT, top)
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(90, 5, "Notes:", new_x=XPos.LEFT, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(90, 5, _safe_text(notes))

        has_signature = self._draw_image(pdf, company.signature, 140, top, 55, 20)
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_xy(TOTALS_X, top + (22 if has_signature else 0))
        pdf.cell(RIGHT - TOTALS_X, 5, "Authorized Signature", align="R")
