"""
SQLite implementation of product storage.

Batches are embedded in the product document, so a product and its stock
are always written together.
"""

from datetime import datetime

from shopdesk.config import get_logger
from shopdesk.core.entities import Product
from shopdesk.core.interfaces.storage import IProductStore
from shopdesk.infrastructure.storage.sqlite.document_collection import (
    DocumentCollection,
    matches,
    paginate,
)

logger = get_logger(__name__)

SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "price": lambda p: p.price,
    "stock": lambda p: p.total_stock,
    "created_at": lambda p: p.created_at,
}


class SQLiteProductStore(IProductStore):
    """Products with embedded stock batches."""

    def __init__(self) -> None:
        self._docs = DocumentCollection("products", Product)

    async def create(self, product: Product) -> Product:
        product = await self._docs.insert(product)
        logger.info(
            "product_created",
            product_id=product.id,
            name=product.name,
            stock=product.total_stock,
        )
        return product

    async def get(self, product_id: str) -> Product | None:
        return await self._docs.get(product_id)

    async def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        return await self._docs.get_many(product_ids)

    async def update(self, product: Product) -> Product:
        product.updated_at = datetime.utcnow()
        product = await self._docs.replace(product)
        logger.info("product_updated", product_id=product.id)
        return product

    async def delete(self, product_id: str) -> bool:
        deleted = await self._docs.delete(product_id)
        if deleted:
            logger.info("product_deleted", product_id=product_id)
        return deleted

    async def list_products(
        self,
        search: str | None = None,
        category: str | None = None,
        in_stock: bool | None = None,
        low_stock_below: float | None = None,
        sort_by: str = "name",
        descending: bool = False,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Product]:
        products = []
        for product in await self._docs.all():
            if not matches(search, product.name):
                continue
            if category and product.category.lower() != category.lower():
                continue
            if in_stock is not None and (product.total_stock > 0) != in_stock:
                continue
            if low_stock_below is not None and not product.is_low_stock(low_stock_below):
                continue
            products.append(product)

        products.sort(key=SORT_KEYS.get(sort_by, SORT_KEYS["name"]), reverse=descending)
        return paginate(products, limit, offset)
