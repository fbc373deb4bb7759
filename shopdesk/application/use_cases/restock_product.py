"""Restock Product Use Case: appends a new purchase batch."""

from shopdesk.application.dto.requests import RestockProductRequest
from shopdesk.config import get_logger
from shopdesk.core.entities import Product
from shopdesk.core.exceptions import ProductNotFoundError, ValidationError
from shopdesk.core.interfaces import IProductStore
from shopdesk.core.services.stock_ledger import add_batch

logger = get_logger(__name__)


class RestockProductUseCase:
    """Receive stock into a product as its newest batch."""

    def __init__(self, product_store: IProductStore | None = None):
        self._product_store = product_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def execute(self, product_id: str, request: RestockProductRequest) -> Product:
        store = await self._get_product_store()
        product = await store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        try:
            product.batches = add_batch(product.batches, request.quantity, request.cost_price)
        except ValueError as e:
            raise ValidationError("batch", str(e)) from e

        product = await store.update(product)
        logger.info(
            "product_restocked",
            product_id=product_id,
            quantity=request.quantity,
            cost_price=request.cost_price,
            total_stock=product.total_stock,
        )
        return product
