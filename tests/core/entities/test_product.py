"""Unit tests for product and stock batch entities."""

import pytest
from pydantic import ValidationError

from shopdesk.core.entities import Product, StockBatch


class TestStockBatch:
    def test_defaults(self):
        batch = StockBatch()
        assert batch.quantity == 0.0
        assert batch.cost_price == 0.0
        assert batch.id

    def test_ids_are_unique(self):
        assert StockBatch().id != StockBatch().id

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            StockBatch(quantity=-1, cost_price=10)

    def test_fractional_quantity_allowed(self):
        assert StockBatch(quantity=2.5, cost_price=10).quantity == 2.5


class TestProduct:
    def test_total_stock(self, sample_product: Product):
        assert sample_product.total_stock == 15

    def test_average_cost_is_stock_weighted(self, sample_product: Product):
        # (5*40 + 10*45) / 15
        assert sample_product.average_cost == pytest.approx(650 / 15)

    def test_average_cost_without_stock(self):
        product = Product(name="Salt", price=20, category="Spices")
        assert product.total_stock == 0
        assert product.average_cost == 0.0

    def test_restock_cost_hint_prefers_average_cost(self, sample_product: Product):
        assert sample_product.restock_cost_hint == pytest.approx(650 / 15)

    def test_restock_cost_hint_falls_back_to_price(self):
        product = Product(name="Salt", price=20, category="Spices")
        assert product.restock_cost_hint == 20

    def test_is_low_stock_inclusive(self, sample_product: Product):
        assert sample_product.is_low_stock(15)
        assert not sample_product.is_low_stock(14.9)

    def test_default_unit(self):
        assert Product(name="Dal", price=90, category="Pulses").unit == "Kilogram"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(name="Dal", price=-1, category="Pulses")
