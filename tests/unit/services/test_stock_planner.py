"""Unit tests for multi-product stock planning."""

import pytest

from shopdesk.core.entities import Product, StockBatch
from shopdesk.core.exceptions import InsufficientStockError, ProductNotFoundError
from shopdesk.core.services.stock_planner import plan_stock_changes


@pytest.fixture
def products(sample_product: Product) -> dict[str, Product]:
    oil = Product(
        id="prod-2",
        name="Mustard Oil",
        price=180.0,
        category="Oils",
        batches=[StockBatch(id="o1", quantity=2, cost_price=150)],
    )
    return {sample_product.id: sample_product, oil.id: oil}


def test_depletes_and_records_fifo_cost(products):
    plan = plan_stock_changes(products, {"prod-1": 7})

    assert [b.quantity for b in plan.updated["prod-1"].batches] == [8]
    assert plan.drawn_cost["prod-1"] == pytest.approx(5 * 40 + 2 * 45)


def test_originals_are_untouched(products):
    plan_stock_changes(products, {"prod-1": 7, "prod-2": -1})

    assert products["prod-1"].total_stock == 15
    assert products["prod-2"].total_stock == 2


def test_negative_delta_restocks(products):
    plan = plan_stock_changes(products, {"prod-2": -3})
    assert plan.updated["prod-2"].total_stock == 5
    assert "prod-2" not in plan.drawn_cost


def test_any_shortfall_aborts_the_whole_plan(products):
    with pytest.raises(InsufficientStockError) as exc_info:
        plan_stock_changes(products, {"prod-1": 1, "prod-2": 3})

    assert exc_info.value.product_id == "prod-2"
    assert exc_info.value.shortfall == pytest.approx(1)


def test_unknown_product(products):
    with pytest.raises(ProductNotFoundError):
        plan_stock_changes(products, {"missing": 1})


def test_zero_deltas_are_skipped(products):
    plan = plan_stock_changes(products, {"prod-1": 0.0})
    assert plan.products == []


def test_restock_into_empty_product_uses_price():
    product = Product(id="p", name="Jaggery", price=60.0, category="Sweeteners")
    plan = plan_stock_changes({"p": product}, {"p": -4})

    batch = plan.updated["p"].batches[0]
    assert batch.quantity == 4
    assert batch.cost_price == 60.0
