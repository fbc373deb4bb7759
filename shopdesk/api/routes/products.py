"""Product catalog and stock endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopdesk.api.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_use_case,
    get_list_products_use_case,
    get_restock_product_use_case,
    get_update_product_use_case,
)
from shopdesk.application.dto.requests import (
    CreateProductRequest,
    RestockProductRequest,
    UpdateProductRequest,
)
from shopdesk.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    ProductResponse,
    product_to_response,
)
from shopdesk.application.use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    RestockProductUseCase,
    UpdateProductUseCase,
)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(
    request: CreateProductRequest,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product with its opening stock batches."""
    product = await use_case.execute(request)
    return product_to_response(product)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    search: str | None = None,
    category: str | None = None,
    in_stock: bool | None = None,
    low_stock: bool = False,
    sort_by: str = Query(default="name", pattern="^(name|price|stock|created_at)$"),
    descending: bool = False,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> list[ProductResponse]:
    products = await use_case.execute(
        search=search,
        category=category,
        in_stock=in_stock,
        low_stock=low_stock,
        sort_by=sort_by,
        descending=descending,
        limit=limit,
        offset=offset,
    )
    return [product_to_response(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
) -> ProductResponse:
    return product_to_response(await use_case.execute(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> ProductResponse:
    """Update product details; a batches list replaces the stored batches."""
    return product_to_response(await use_case.execute(product_id, request))


@router.post(
    "/{product_id}/restock",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def restock_product(
    product_id: str,
    request: RestockProductRequest,
    use_case: RestockProductUseCase = Depends(get_restock_product_use_case),
) -> ProductResponse:
    """Append a new stock batch at its purchase cost."""
    return product_to_response(await use_case.execute(product_id, request))


@router.delete(
    "/{product_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_product(
    product_id: str,
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> DeleteResponse:
    await use_case.execute(product_id)
    return DeleteResponse(id=product_id)
