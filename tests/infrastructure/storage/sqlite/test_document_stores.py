"""Tests for the SQLite document-backed stores."""

from datetime import date, datetime

import pytest

from shopdesk.core.entities import (
    CompanySettings,
    Customer,
    Invoice,
    Order,
    OrderItem,
    OrderStatus,
    PaidStatus,
    Product,
    StockBatch,
)
from shopdesk.core.exceptions import DuplicateInvoiceError, RecordNotFoundError
from shopdesk.infrastructure.storage.sqlite import (
    SQLiteCustomerStore,
    SQLiteInvoiceStore,
    SQLiteOrderStore,
    SQLiteProductStore,
    SQLiteSettingsStore,
)


class TestCustomerStore:
    async def test_create_get_roundtrip(self, initialized_db):
        store = SQLiteCustomerStore()
        created = await store.create(Customer(name="Asha", phone="98765"))

        assert created.id
        fetched = await store.get(created.id)
        assert fetched.name == "Asha"
        assert fetched.phone == "98765"

    async def test_get_missing(self, initialized_db):
        assert await SQLiteCustomerStore().get("nope") is None

    async def test_list_search_and_sort(self, initialized_db):
        store = SQLiteCustomerStore()
        for name in ("Charu", "asha", "Bina"):
            await store.create(Customer(name=name, email=f"{name.lower()}@x.in"))

        names = [c.name for c in await store.list_customers()]
        assert names == ["asha", "Bina", "Charu"]

        found = await store.list_customers(search="BIN")
        assert [c.name for c in found] == ["Bina"]
        assert await store.count() == 3

    async def test_update_and_delete(self, initialized_db):
        store = SQLiteCustomerStore()
        customer = await store.create(Customer(name="Ravi"))
        customer.address = "Nashik"
        await store.update(customer)
        assert (await store.get(customer.id)).address == "Nashik"

        assert await store.delete(customer.id) is True
        assert await store.get(customer.id) is None
        assert await store.delete(customer.id) is False

    async def test_update_missing_raises(self, initialized_db):
        with pytest.raises(RecordNotFoundError):
            await SQLiteCustomerStore().update(Customer(id="ghost", name="Ghost"))


class TestProductStore:
    async def test_batches_roundtrip_in_order(self, initialized_db):
        store = SQLiteProductStore()
        product = await store.create(
            Product(
                name="Rice",
                price=105,
                category="Grains",
                batches=[
                    StockBatch(quantity=5, cost_price=40),
                    StockBatch(quantity=10, cost_price=45),
                ],
            )
        )
        fetched = await store.get(product.id)
        assert [b.cost_price for b in fetched.batches] == [40, 45]
        assert fetched.total_stock == 15

    async def test_get_many_skips_missing(self, initialized_db):
        store = SQLiteProductStore()
        product = await store.create(Product(name="Salt", price=20, category="Spices"))
        found = await store.get_many([product.id, "missing"])
        assert list(found) == [product.id]

    async def test_list_filters(self, initialized_db):
        store = SQLiteProductStore()
        await store.create(
            Product(name="Rice", price=105, category="Grains", batches=[StockBatch(quantity=50, cost_price=40)])
        )
        await store.create(
            Product(name="Wheat", price=45, category="grains", batches=[StockBatch(quantity=3, cost_price=30)])
        )
        await store.create(Product(name="Saffron", price=500, category="Spices"))

        assert [p.name for p in await store.list_products(category="Grains")] == ["Rice", "Wheat"]
        assert [p.name for p in await store.list_products(in_stock=False)] == ["Saffron"]
        assert [p.name for p in await store.list_products(low_stock_below=10)] == ["Saffron", "Wheat"]
        by_price = await store.list_products(sort_by="price", descending=True)
        assert [p.name for p in by_price] == ["Saffron", "Rice", "Wheat"]
        assert len(await store.list_products(limit=1, offset=1)) == 1


class TestOrderStore:
    async def test_roundtrip_and_listing(self, initialized_db):
        store = SQLiteOrderStore()
        first = await store.create(
            Order(
                customer_id="c1",
                customer_name="Asha",
                items=[OrderItem(product_id="p1", name="Rice", quantity=2, price=105, custom_price=100)],
                created_at=datetime(2025, 6, 1),
            )
        )
        second = await store.create(
            Order(customer_id="c2", customer_name="Bina", created_at=datetime(2025, 6, 2))
        )

        fetched = await store.get(first.id)
        assert fetched.items[0].price == 100
        assert fetched.shipping_cost is None

        assert [o.id for o in await store.list_orders()] == [second.id, first.id]
        assert [o.id for o in await store.list_orders(customer_id="c1")] == [first.id]

        second.status = OrderStatus.DELIVERED
        await store.update(second)
        delivered = await store.list_orders(status=OrderStatus.DELIVERED)
        assert [o.id for o in delivered] == [second.id]

    async def test_create_with_stock_commits_both(self, initialized_db):
        products = SQLiteProductStore()
        salt = await products.create(
            Product(name="Salt", price=20, category="Spices", batches=[StockBatch(quantity=5, cost_price=10)])
        )
        salt.batches[0].quantity = 3

        order = await SQLiteOrderStore().create_with_stock(
            Order(customer_id="c1", items=[OrderItem(product_id=salt.id, name="Salt", quantity=2, price=20)]),
            [salt],
        )

        assert (await SQLiteOrderStore().get(order.id)) is not None
        assert (await products.get(salt.id)).total_stock == 3

    async def test_missing_product_rolls_back_the_order(self, initialized_db):
        products = SQLiteProductStore()
        salt = await products.create(
            Product(name="Salt", price=20, category="Spices", batches=[StockBatch(quantity=5, cost_price=10)])
        )
        salt.batches = []
        ghost = Product(id="ghost", name="Ghost", price=1, category="X")
        store = SQLiteOrderStore()

        with pytest.raises(RecordNotFoundError):
            await store.create_with_stock(Order(customer_id="c1"), [salt, ghost])

        assert (await products.get(salt.id)).total_stock == 5
        assert await store.list_orders() == []

    async def test_delete_with_stock(self, initialized_db):
        products = SQLiteProductStore()
        salt = await products.create(Product(name="Salt", price=20, category="Spices"))
        store = SQLiteOrderStore()
        order = await store.create(Order(customer_id="c1"))
        salt.batches = [StockBatch(quantity=2, cost_price=10)]

        assert await store.delete_with_stock(order.id, [salt]) is True

        assert await store.get(order.id) is None
        assert (await products.get(salt.id)).total_stock == 2


class TestInvoiceStore:
    async def test_find_by_order(self, initialized_db):
        store = SQLiteInvoiceStore()
        invoice = await store.create(Invoice(invoice_number=1, order_id="order-9", total=100))

        assert (await store.find_by_order("order-9")).id == invoice.id
        assert await store.find_by_order("order-1") is None

    async def test_second_invoice_for_order_is_refused(self, initialized_db):
        store = SQLiteInvoiceStore()
        first = await store.create(Invoice(invoice_number=1, order_id="order-9", total=100))

        with pytest.raises(DuplicateInvoiceError) as exc_info:
            await store.create(Invoice(invoice_number=2, order_id="order-9", total=100))

        assert exc_info.value.details == {"order_id": "order-9", "existing_id": first.id}
        assert [i.invoice_number for i in await store.list_invoices()] == [1]

    async def test_list_filters(self, initialized_db):
        store = SQLiteInvoiceStore()
        await store.create(
            Invoice(invoice_number=1, order_id="o1", customer_id="c1", customer_name="Asha",
                    total=100, created_at=datetime(2025, 6, 1))
        )
        await store.create(
            Invoice(invoice_number=2, order_id="o2", customer_id="c2", customer_name="Bina",
                    total=200, paid_status=PaidStatus.PAID, amount_paid=200,
                    created_at=datetime(2025, 6, 15))
        )

        assert [i.invoice_number for i in await store.list_invoices()] == [2, 1]
        assert [i.invoice_number for i in await store.list_invoices(paid_status=PaidStatus.PAID)] == [2]
        assert [i.invoice_number for i in await store.list_invoices(customer_id="c1")] == [1]
        assert [i.invoice_number for i in await store.list_invoices(search="0002/")] == [2]
        in_range = await store.list_invoices(start=date(2025, 6, 1), end=date(2025, 6, 1))
        assert [i.invoice_number for i in in_range] == [1]


class TestSettingsStore:
    async def test_defaults_until_saved(self, initialized_db):
        store = SQLiteSettingsStore()
        assert (await store.get_company()).name == CompanySettings().name

        await store.save_company(CompanySettings(name="Green Grocers", tax_rate=12))
        saved = await store.get_company()
        assert saved.name == "Green Grocers"
        assert saved.tax_rate == 12

        await store.save_company(CompanySettings(name="Renamed"))
        assert (await store.get_company()).name == "Renamed"
