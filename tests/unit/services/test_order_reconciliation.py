"""Unit tests for order item reconciliation."""

import pytest

from shopdesk.core.entities import OrderItem
from shopdesk.core.services.order_reconciliation import (
    plan_reconciliation,
    quantities_by_product,
)


def _item(product_id: str, quantity: float) -> OrderItem:
    return OrderItem(product_id=product_id, name=product_id, quantity=quantity, price=10.0)


class TestQuantitiesByProduct:
    def test_merges_duplicate_lines(self):
        totals = quantities_by_product([_item("a", 1), _item("b", 2), _item("a", 1.5)])
        assert totals == {"a": 2.5, "b": 2}


class TestPlanReconciliation:
    def test_partitions_products(self):
        original = [_item("keep", 2), _item("grow", 3), _item("drop", 1)]
        edited = [_item("keep", 2), _item("grow", 5), _item("new", 4)]

        plan = plan_reconciliation(original, edited)

        assert plan.removed == {"drop": 1}
        assert [(c.product_id, c.old_quantity, c.new_quantity) for c in plan.changed] == [
            ("grow", 3, 5)
        ]
        assert plan.added == {"new": 4}

    def test_stock_deltas(self):
        plan = plan_reconciliation(
            [_item("shrink", 5), _item("drop", 1)],
            [_item("shrink", 2), _item("new", 4)],
        )
        assert plan.stock_deltas() == {"drop": -1, "shrink": -3, "new": 4}

    def test_unchanged_items_make_an_empty_plan(self):
        items = [_item("a", 1), _item("b", 2)]
        plan = plan_reconciliation(items, [i.model_copy() for i in items])
        assert plan.is_empty
        assert plan.stock_deltas() == {}

    def test_split_lines_compare_by_total(self):
        plan = plan_reconciliation([_item("a", 3)], [_item("a", 1), _item("a", 2)])
        assert plan.is_empty

    def test_change_delta_sign(self):
        plan = plan_reconciliation([_item("a", 3)], [_item("a", 1)])
        assert plan.changed[0].delta == pytest.approx(-2)
