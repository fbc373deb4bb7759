"""
Multi-product stock planning.

Computes every product's new batch list in memory before anything is
written. A shortfall on any product aborts the whole plan, so callers can
commit the result in one transaction or not at all.
"""

from dataclasses import dataclass, field

from shopdesk.core.entities.product import Product
from shopdesk.core.exceptions import InsufficientStockError, ProductNotFoundError
from shopdesk.core.services.stock_ledger import (
    QUANTITY_EPSILON,
    deplete,
    depletion_cost,
    replenish,
)


@dataclass
class StockPlan:
    """Products with their planned batches, ready to be saved together."""

    updated: dict[str, Product] = field(default_factory=dict)
    drawn_cost: dict[str, float] = field(default_factory=dict)  # FIFO cost per depletion

    @property
    def products(self) -> list[Product]:
        return list(self.updated.values())


def plan_stock_changes(
    products: dict[str, Product], deltas: dict[str, float]
) -> StockPlan:
    """
    Apply net quantity changes to copies of ``products``.

    Positive deltas deplete FIFO, negative deltas replenish using the
    product's restock cost hint. The originals are left untouched.

    Raises:
        ProductNotFoundError: a delta names a product that was not loaded
        InsufficientStockError: a depletion exceeds the product's stock
    """
    plan = StockPlan()
    for product_id, delta in deltas.items():
        if abs(delta) <= QUANTITY_EPSILON:
            continue
        product = products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if delta > 0:
            batches, shortfall = deplete(product.batches, delta)
            if shortfall > 0:
                raise InsufficientStockError(
                    product_id=product_id,
                    product_name=product.name,
                    requested=delta,
                    available=product.total_stock,
                )
            plan.drawn_cost[product_id] = depletion_cost(product.batches, delta)
        else:
            batches = replenish(product.batches, -delta, product.restock_cost_hint)

        plan.updated[product_id] = product.model_copy(update={"batches": batches})

    return plan
