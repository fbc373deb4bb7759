"""Invoice endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from shopdesk.api.dependencies import (
    get_create_invoice_pdf_use_case,
    get_generate_invoice_use_case,
    get_get_invoice_use_case,
    get_list_invoices_use_case,
    get_update_invoice_payment_use_case,
)
from shopdesk.application.dto.requests import GenerateInvoiceRequest, UpdatePaymentRequest
from shopdesk.application.dto.responses import ErrorResponse, InvoiceResponse
from shopdesk.application.use_cases import (
    CreateInvoicePdfUseCase,
    GenerateInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    UpdateInvoicePaymentUseCase,
)
from shopdesk.core.entities import PaidStatus

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Order already invoiced"},
    },
)
async def generate_invoice(
    request: GenerateInvoiceRequest,
    use_case: GenerateInvoiceUseCase = Depends(get_generate_invoice_use_case),
) -> InvoiceResponse:
    """
    Issue the invoice for an order.

    Draws the next sequential invoice number and snapshots the order's
    customer details, items and charges.
    """
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    search: str | None = None,
    paid_status: PaidStatus | None = None,
    customer_id: str | None = None,
    start: date | None = None,
    end: date | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    use_case: ListInvoicesUseCase = Depends(get_list_invoices_use_case),
) -> list[InvoiceResponse]:
    return await use_case.execute(
        search=search,
        paid_status=paid_status,
        customer_id=customer_id,
        start=start,
        end=end,
        limit=limit,
        offset=offset,
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: str,
    use_case: GetInvoiceUseCase = Depends(get_get_invoice_use_case),
) -> InvoiceResponse:
    """Get an invoice with its tax breakdown."""
    return await use_case.execute(invoice_id)


@router.patch(
    "/{invoice_id}/payment",
    response_model=InvoiceResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Inconsistent payment"},
        404: {"model": ErrorResponse},
    },
)
async def update_payment(
    invoice_id: str,
    request: UpdatePaymentRequest,
    use_case: UpdateInvoicePaymentUseCase = Depends(get_update_invoice_payment_use_case),
) -> InvoiceResponse:
    """Record a payment status change and append it to the payment history."""
    invoice = await use_case.execute(invoice_id, request)
    return use_case.to_response(invoice)


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"model": ErrorResponse, "description": "Invoice not found"},
    },
)
async def get_invoice_pdf(
    invoice_id: str,
    use_case: CreateInvoicePdfUseCase = Depends(get_create_invoice_pdf_use_case),
) -> Response:
    """Render and download the tax invoice PDF."""
    result = await use_case.execute(invoice_id)
    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )
