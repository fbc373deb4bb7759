"""Mock stores for use case tests."""

from unittest.mock import AsyncMock

import pytest


def _assign_id(prefix: str):
    def _create(entity):
        if entity.id is None:
            entity.id = f"{prefix}-new"
        return entity

    return _create


def _echo(entity):
    return entity


def _with_stock(write):
    def _call(entity, products):
        return write(entity)

    return _call


@pytest.fixture
def customer_store(sample_customer):
    store = AsyncMock()
    store.get.return_value = sample_customer
    store.create.side_effect = _assign_id("cust")
    store.update.side_effect = _echo
    return store


@pytest.fixture
def product_store(sample_product):
    store = AsyncMock()
    store.get.return_value = sample_product
    store.get_many.return_value = {sample_product.id: sample_product}
    store.update.side_effect = _echo
    return store


@pytest.fixture
def order_store(sample_order):
    store = AsyncMock()
    store.get.return_value = sample_order
    store.create_with_stock.side_effect = _with_stock(_assign_id("order"))
    store.update_with_stock.side_effect = _with_stock(_echo)
    store.delete_with_stock.return_value = True
    store.update.side_effect = _echo
    return store


@pytest.fixture
def invoice_store():
    store = AsyncMock()
    store.find_by_order.return_value = None
    store.list_invoices.return_value = []
    store.create.side_effect = _assign_id("inv")
    store.update.side_effect = _echo
    return store


@pytest.fixture
def counter_store():
    store = AsyncMock()
    store.increment.return_value = 7
    return store


@pytest.fixture
def settings_store(company):
    store = AsyncMock()
    store.get_company.return_value = company
    store.save_company.side_effect = _echo
    return store
