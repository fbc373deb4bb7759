"""SQLite implementation of invoice storage."""

from datetime import date, datetime

import aiosqlite

from shopdesk.config import get_logger
from shopdesk.core.entities import Invoice, PaidStatus
from shopdesk.core.exceptions import DatabaseError, DuplicateInvoiceError
from shopdesk.core.interfaces.storage import IInvoiceStore
from shopdesk.infrastructure.storage.sqlite.connection import get_transaction
from shopdesk.infrastructure.storage.sqlite.document_collection import (
    DocumentCollection,
    matches,
    paginate,
)

logger = get_logger(__name__)


class SQLiteInvoiceStore(IInvoiceStore):
    """Invoices as JSON documents with embedded item snapshot and payments."""

    def __init__(self) -> None:
        self._docs = DocumentCollection("invoices", Invoice)

    async def create(self, invoice: Invoice) -> Invoice:
        """Insert an invoice; a second invoice for the same order is refused."""
        try:
            async with get_transaction() as conn:
                invoice = await self._docs.insert_in(conn, invoice)
        except aiosqlite.IntegrityError as e:
            existing = await self.find_by_order(invoice.order_id)
            if existing is None:
                raise DatabaseError("create invoice", str(e)) from e
            logger.warning(
                "duplicate_invoice_refused", order_id=invoice.order_id, existing_id=existing.id
            )
            raise DuplicateInvoiceError(invoice.order_id, existing.id) from e  # type: ignore[arg-type]
        except aiosqlite.Error as e:
            raise DatabaseError("create invoice", str(e)) from e
        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            order_id=invoice.order_id,
            total=invoice.total,
        )
        return invoice

    async def get(self, invoice_id: str) -> Invoice | None:
        return await self._docs.get(invoice_id)

    async def find_by_order(self, order_id: str) -> Invoice | None:
        return await self._docs.find_one("order_id", order_id)

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = datetime.utcnow()
        invoice = await self._docs.replace(invoice)
        logger.info(
            "invoice_updated",
            invoice_id=invoice.id,
            paid_status=invoice.paid_status.value,
        )
        return invoice

    async def list_invoices(
        self,
        search: str | None = None,
        paid_status: PaidStatus | None = None,
        customer_id: str | None = None,
        start: date | None = None,
        end: date | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Invoice]:
        invoices = []
        for invoice in await self._docs.all():
            day = invoice.created_at.date()
            if start is not None and day < start:
                continue
            if end is not None and day > end:
                continue
            if paid_status is not None and invoice.paid_status != paid_status:
                continue
            if customer_id is not None and invoice.customer_id != customer_id:
                continue
            if not matches(
                search,
                invoice.customer_name,
                invoice.formatted_number,
                invoice.order_id,
            ):
                continue
            invoices.append(invoice)

        invoices.sort(key=lambda invoice: invoice.created_at, reverse=True)
        return paginate(invoices, limit, offset)
