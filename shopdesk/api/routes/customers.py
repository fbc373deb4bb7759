"""Customer endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopdesk.api.dependencies import (
    get_create_customer_use_case,
    get_delete_customer_use_case,
    get_get_customer_use_case,
    get_list_customers_use_case,
    get_update_customer_use_case,
)
from shopdesk.application.dto.requests import CreateCustomerRequest, UpdateCustomerRequest
from shopdesk.application.dto.responses import (
    CustomerResponse,
    DeleteResponse,
    ErrorResponse,
    customer_to_response,
)
from shopdesk.application.use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerUseCase,
)

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_customer(
    request: CreateCustomerRequest,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
) -> CustomerResponse:
    customer = await use_case.execute(request)
    return customer_to_response(customer, outstanding_balance=0.0)


@router.get("", response_model=list[CustomerResponse])
async def list_customers(
    search: str | None = None,
    sort_by: str = Query(default="name", pattern="^(name|created_at)$"),
    descending: bool = False,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    use_case: ListCustomersUseCase = Depends(get_list_customers_use_case),
) -> list[CustomerResponse]:
    """List customers, optionally filtered by name, email or phone."""
    return await use_case.execute(
        search=search,
        sort_by=sort_by,
        descending=descending,
        limit=limit,
        offset=offset,
    )


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_customer(
    customer_id: str,
    use_case: GetCustomerUseCase = Depends(get_get_customer_use_case),
) -> CustomerResponse:
    """Get a customer with their outstanding balance."""
    return await use_case.execute(customer_id)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequest,
    use_case: UpdateCustomerUseCase = Depends(get_update_customer_use_case),
) -> CustomerResponse:
    customer = await use_case.execute(customer_id, request)
    return customer_to_response(customer)


@router.delete(
    "/{customer_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_customer(
    customer_id: str,
    use_case: DeleteCustomerUseCase = Depends(get_delete_customer_use_case),
) -> DeleteResponse:
    await use_case.execute(customer_id)
    return DeleteResponse(id=customer_id)
