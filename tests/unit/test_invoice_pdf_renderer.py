"""Tests for the fpdf2 tax invoice renderer."""

import zlib

import pytest

from shopdesk.config.settings import PdfSettings
from shopdesk.core.entities import PaidStatus
from shopdesk.infrastructure.pdf.invoice_pdf_renderer import (
    Fpdf2InvoiceRenderer,
    _safe_text,
    _wrap,
)


def _extract_pdf_text(pdf_bytes: bytes) -> str:
    """Inflate the FlateDecode page streams and return their raw text."""
    texts = [pdf_bytes.decode("latin-1")]
    idx = 0
    while True:
        start = pdf_bytes.find(b"stream\n", idx)
        if start == -1:
            break
        start += len(b"stream\n")
        end = pdf_bytes.find(b"\nendstream", start)
        if end == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[start:end]).decode("latin-1"))
        except zlib.error:
            pass
        idx = end
    return "\n".join(texts)


@pytest.fixture
def renderer() -> Fpdf2InvoiceRenderer:
    return Fpdf2InvoiceRenderer(PdfSettings())


def test_renders_pdf_document(renderer, sample_invoice, company):
    content = renderer.render(sample_invoice, company)

    assert content.startswith(b"%PDF")
    assert content.rstrip().endswith(b"%%EOF")


def test_pdf_contains_invoice_details(renderer, sample_invoice, company):
    text = _extract_pdf_text(renderer.render(sample_invoice, company))

    assert "TAX INVOICE" in text
    assert "Green Grocers" in text
    assert "0001/2025-26" in text
    assert "Basmati Rice" in text
    assert "Two Hundred Sixty Only" in text


def test_renders_paid_invoice_without_logo_file(renderer, sample_invoice, company):
    company.logo = "/does/not/exist.png"
    sample_invoice.paid_status = PaidStatus.PAID
    sample_invoice.amount_paid = sample_invoice.total

    assert renderer.render(sample_invoice, company).startswith(b"%PDF")


def test_non_latin_text_is_replaced(renderer, sample_invoice, company):
    sample_invoice.customer_name = "Asha आशा"

    assert renderer.render(sample_invoice, company).startswith(b"%PDF")
    assert _safe_text("Café ₹") == "Café ?"


def test_wrap_splits_long_addresses():
    lines = _wrap("Flat 12, Sunrise Apartments, Near City Mall, Baner Road, Pune 411045", 30)

    assert all(len(line) <= 30 for line in lines)
    assert " ".join(lines).startswith("Flat 12, Sunrise")
