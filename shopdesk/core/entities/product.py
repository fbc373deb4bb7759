"""Product and stock batch domain entities."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field


def new_batch_id() -> str:
    """Generate an identifier for a stock batch."""
    return uuid4().hex


class StockBatch(BaseModel):
    """A dated purchase lot of one product with its own unit cost."""

    id: str = Field(default_factory=new_batch_id)
    quantity: float = Field(0.0, ge=0)  # fractional units allowed (loose goods)
    cost_price: float = Field(0.0, ge=0)
    date_added: datetime = Field(default_factory=datetime.utcnow)


class Product(BaseModel):
    """Catalog product owning an ordered list of stock batches.

    ``batches`` is kept oldest first; that order is the FIFO depletion order.
    """

    id: str | None = None
    name: str
    description: str = ""
    price: float = Field(..., ge=0)  # catalog selling price, tax included
    category: str
    unit: str = "Kilogram"
    image: str = ""
    batches: list[StockBatch] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def total_stock(self) -> float:
        """Sum of all batch quantities."""
        from shopdesk.core.services.stock_ledger import total_stock

        return total_stock(self.batches)

    @property
    def average_cost(self) -> float:
        """Stock-weighted mean cost of the batches on hand."""
        from shopdesk.core.services.stock_ledger import average_cost

        return average_cost(self.batches)

    @property
    def restock_cost_hint(self) -> float:
        """Cost used when returned stock has no batch to merge into."""
        return self.average_cost if self.total_stock > 0 else self.price

    def is_low_stock(self, threshold: float) -> bool:
        return self.total_stock <= threshold
