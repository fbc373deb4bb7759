"""Order endpoints.

Creating, editing and deleting an order moves stock through the product
batches; see the use cases for the ledger rules.
"""

from fastapi import APIRouter, Depends, Query, status

from shopdesk.api.dependencies import (
    get_create_order_use_case,
    get_delete_order_use_case,
    get_edit_order_use_case,
    get_get_order_use_case,
    get_list_orders_use_case,
    get_update_order_status_use_case,
)
from shopdesk.application.dto.requests import (
    CreateOrderRequest,
    EditOrderRequest,
    UpdateOrderStatusRequest,
)
from shopdesk.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    OrderResponse,
    order_to_response,
)
from shopdesk.application.use_cases import (
    CreateOrderUseCase,
    DeleteOrderUseCase,
    EditOrderUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from shopdesk.core.entities import OrderStatus

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Insufficient stock"},
    },
)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> OrderResponse:
    """Place an order and draw its items from stock, oldest batch first."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    customer_id: str | None = None,
    order_status: OrderStatus | None = Query(default=None, alias="status"),
    search: str | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
) -> list[OrderResponse]:
    orders = await use_case.execute(
        customer_id=customer_id,
        status=order_status,
        search=search,
        limit=limit,
        offset=offset,
    )
    return [order_to_response(o) for o in orders]


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    order_id: str,
    use_case: GetOrderUseCase = Depends(get_get_order_use_case),
) -> OrderResponse:
    return order_to_response(await use_case.execute(order_id))


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Insufficient stock"},
    },
)
async def edit_order(
    order_id: str,
    request: EditOrderRequest,
    use_case: EditOrderUseCase = Depends(get_edit_order_use_case),
) -> OrderResponse:
    """Replace the order's items, adjusting stock by the per-product difference."""
    result = await use_case.execute(order_id, request)
    return use_case.to_response(result)


@router.patch(
    "/{order_id}/status",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
) -> OrderResponse:
    order = await use_case.execute(order_id, request)
    return use_case.to_response(order)


@router.delete(
    "/{order_id}",
    response_model=DeleteResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Order has an invoice"},
    },
)
async def delete_order(
    order_id: str,
    use_case: DeleteOrderUseCase = Depends(get_delete_order_use_case),
) -> DeleteResponse:
    """Delete an uninvoiced order and return its items to stock."""
    result = await use_case.execute(order_id)
    return DeleteResponse(id=result.order_id)
