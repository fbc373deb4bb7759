"""Product catalog use cases: create, read, update, delete and list."""

from datetime import datetime

from shopdesk.application.dto.requests import (
    CreateProductRequest,
    UpdateProductRequest,
)
from shopdesk.config import get_logger, get_settings
from shopdesk.core.entities import Product, StockBatch
from shopdesk.core.entities.product import new_batch_id
from shopdesk.core.exceptions import ProductNotFoundError, ValidationError
from shopdesk.core.interfaces import IProductStore

logger = get_logger(__name__)


class _ProductUseCase:
    """Shared store wiring for product use cases."""

    def __init__(self, product_store: IProductStore | None = None):
        self._product_store = product_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _require(self, product_id: str) -> Product:
        product = await (await self._get_product_store()).get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product


def _check_text(field: str, value: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(field, f"{field} is required", value)
    return value


class CreateProductUseCase(_ProductUseCase):
    async def execute(self, request: CreateProductRequest) -> Product:
        now = datetime.utcnow()
        product = Product(
            name=_check_text("name", request.name),
            description=request.description,
            price=request.price,
            category=_check_text("category", request.category),
            unit=request.unit,
            image=request.image,
            batches=[
                StockBatch(
                    quantity=batch.quantity,
                    cost_price=batch.cost_price,
                    date_added=batch.date_added or now,
                )
                for batch in request.batches
            ],
            created_at=now,
            updated_at=now,
        )
        return await (await self._get_product_store()).create(product)


class GetProductUseCase(_ProductUseCase):
    async def execute(self, product_id: str) -> Product:
        return await self._require(product_id)


class UpdateProductUseCase(_ProductUseCase):
    """Edit catalog fields and, optionally, replace the batch list."""

    async def execute(self, product_id: str, request: UpdateProductRequest) -> Product:
        product = await self._require(product_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True, exclude={"batches"})

        for field in ("name", "category"):
            if field in changes:
                changes[field] = _check_text(field, changes[field])
        for field, value in changes.items():
            setattr(product, field, value)

        if request.batches is not None:
            now = datetime.utcnow()
            # Zero-quantity rows are dropped, matching depletion's pruning.
            product.batches = [
                StockBatch(
                    id=batch.id or new_batch_id(),
                    quantity=batch.quantity,
                    cost_price=batch.cost_price,
                    date_added=batch.date_added or now,
                )
                for batch in request.batches
                if batch.quantity > 0
            ]

        return await (await self._get_product_store()).update(product)


class DeleteProductUseCase(_ProductUseCase):
    async def execute(self, product_id: str) -> None:
        await self._require(product_id)
        await (await self._get_product_store()).delete(product_id)


class ListProductsUseCase(_ProductUseCase):
    async def execute(
        self,
        search: str | None = None,
        category: str | None = None,
        in_stock: bool | None = None,
        low_stock: bool = False,
        sort_by: str = "name",
        descending: bool = False,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Product]:
        threshold = get_settings().business.low_stock_threshold if low_stock else None
        store = await self._get_product_store()
        return await store.list_products(
            search=search,
            category=category,
            in_stock=in_stock,
            low_stock_below=threshold,
            sort_by=sort_by,
            descending=descending,
            limit=limit,
            offset=offset,
        )
