"""
Stock batch ledger.

Pure functions over a product's ordered batch list (oldest first).
Inputs are never mutated; every operation returns a new list.
"""

from datetime import datetime

from shopdesk.core.entities.product import StockBatch

# Quantities below this are treated as zero (float dust from fractional units).
QUANTITY_EPSILON = 1e-9


def total_stock(batches: list[StockBatch]) -> float:
    """Sum of all batch quantities."""
    return sum(batch.quantity for batch in batches)


def average_cost(batches: list[StockBatch]) -> float:
    """Stock-weighted mean unit cost, 0 when there is no stock."""
    stock = total_stock(batches)
    if stock <= QUANTITY_EPSILON:
        return 0.0
    return sum(batch.quantity * batch.cost_price for batch in batches) / stock


def deplete(
    batches: list[StockBatch], quantity: float
) -> tuple[list[StockBatch], float]:
    """
    Consume ``quantity`` units oldest batch first.

    Batches that reach zero are pruned. Returns the remaining batches and the
    unsatisfied shortfall (0 when fully covered). The caller decides whether a
    shortfall aborts the operation.
    """
    if quantity < 0:
        raise ValueError("quantity must not be negative")

    remaining = quantity
    updated: list[StockBatch] = []
    for batch in batches:
        if remaining <= QUANTITY_EPSILON:
            updated.append(batch.model_copy())
            continue
        taken = min(batch.quantity, remaining)
        remaining -= taken
        left = batch.quantity - taken
        if left > QUANTITY_EPSILON:
            updated.append(batch.model_copy(update={"quantity": left}))

    shortfall = remaining if remaining > QUANTITY_EPSILON else 0.0
    return updated, shortfall


def depletion_cost(batches: list[StockBatch], quantity: float) -> float:
    """FIFO cost of the units ``deplete`` would consume (covered part only)."""
    remaining = quantity
    cost = 0.0
    for batch in batches:
        if remaining <= QUANTITY_EPSILON:
            break
        taken = min(batch.quantity, remaining)
        cost += taken * batch.cost_price
        remaining -= taken
    return cost


def replenish(
    batches: list[StockBatch], quantity: float, cost_hint: float
) -> list[StockBatch]:
    """
    Return ``quantity`` units to stock.

    Units go into the oldest batch when one exists; otherwise a new batch
    dated now is created at ``cost_hint``. The returned units lose their
    original cost attribution.
    """
    if quantity < 0:
        raise ValueError("quantity must not be negative")

    updated = [batch.model_copy() for batch in batches]
    if quantity <= QUANTITY_EPSILON:
        return updated

    if updated:
        first = updated[0]
        updated[0] = first.model_copy(update={"quantity": first.quantity + quantity})
    else:
        updated.append(
            StockBatch(
                quantity=quantity,
                cost_price=max(cost_hint, 0.0),
                date_added=datetime.utcnow(),
            )
        )
    return updated


def add_batch(
    batches: list[StockBatch], quantity: float, cost_price: float
) -> list[StockBatch]:
    """Restock: append a new purchase lot as the newest batch."""
    if quantity <= 0:
        raise ValueError("batch quantity must be positive")
    if cost_price <= 0:
        raise ValueError("batch cost price must be positive")
    return [batch.model_copy() for batch in batches] + [
        StockBatch(quantity=quantity, cost_price=cost_price)
    ]
