"""
Order item reconciliation.

Diffs an edited item set against the original one, per product, so the
caller can restock or deplete only what changed.
"""

from dataclasses import dataclass, field

from shopdesk.core.entities.order import OrderItem
from shopdesk.core.services.stock_ledger import QUANTITY_EPSILON


@dataclass
class QuantityChange:
    """A product present in both item sets with a different quantity."""

    product_id: str
    old_quantity: float
    new_quantity: float

    @property
    def delta(self) -> float:
        """Positive means more stock must be drawn, negative means restock."""
        return self.new_quantity - self.old_quantity


@dataclass
class ReconciliationPlan:
    """Three disjoint sets of stock movements keyed by product."""

    removed: dict[str, float] = field(default_factory=dict)  # restock
    changed: list[QuantityChange] = field(default_factory=list)
    added: dict[str, float] = field(default_factory=dict)  # deplete

    @property
    def is_empty(self) -> bool:
        return not (self.removed or self.changed or self.added)

    def stock_deltas(self) -> dict[str, float]:
        """Net quantity to deplete per product (negative values restock)."""
        deltas: dict[str, float] = {}
        for product_id, quantity in self.removed.items():
            deltas[product_id] = -quantity
        for change in self.changed:
            deltas[change.product_id] = change.delta
        for product_id, quantity in self.added.items():
            deltas[product_id] = quantity
        return deltas


def quantities_by_product(items: list[OrderItem]) -> dict[str, float]:
    """Total quantity per product id, merging duplicate lines."""
    totals: dict[str, float] = {}
    for item in items:
        totals[item.product_id] = totals.get(item.product_id, 0.0) + item.quantity
    return totals


def plan_reconciliation(
    original_items: list[OrderItem], new_items: list[OrderItem]
) -> ReconciliationPlan:
    """Compute removed, quantity-changed and added products."""
    before = quantities_by_product(original_items)
    after = quantities_by_product(new_items)
    plan = ReconciliationPlan()

    for product_id, quantity in before.items():
        if product_id not in after:
            plan.removed[product_id] = quantity
        elif abs(after[product_id] - quantity) > QUANTITY_EPSILON:
            plan.changed.append(
                QuantityChange(
                    product_id=product_id,
                    old_quantity=quantity,
                    new_quantity=after[product_id],
                )
            )

    for product_id, quantity in after.items():
        if product_id not in before:
            plan.added[product_id] = quantity

    return plan
