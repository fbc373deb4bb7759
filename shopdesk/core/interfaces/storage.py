"""Abstract interfaces for document storage."""

from abc import ABC, abstractmethod
from datetime import date

from shopdesk.core.entities import (
    CompanySettings,
    Customer,
    Invoice,
    Order,
    OrderStatus,
    PaidStatus,
    Product,
)


class ICustomerStore(ABC):
    """Interface for customer persistence."""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """Insert a customer and return it with its generated id."""
        pass

    @abstractmethod
    async def get(self, customer_id: str) -> Customer | None:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer_id: str) -> bool:
        pass

    @abstractmethod
    async def list_customers(
        self,
        search: str | None = None,
        sort_by: str = "name",
        descending: bool = False,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Customer]:
        """List customers, matching ``search`` against name, phone and email."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class IProductStore(ABC):
    """Interface for product and stock batch persistence."""

    @abstractmethod
    async def create(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def get(self, product_id: str) -> Product | None:
        pass

    @abstractmethod
    async def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        """Fetch several products keyed by id; missing ids are absent."""
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        pass

    @abstractmethod
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
        pass


class IOrderStore(ABC):
    """Interface for order persistence."""

    @abstractmethod
    async def create(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def get(self, order_id: str) -> Order | None:
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def delete(self, order_id: str) -> bool:
        pass

    @abstractmethod
    async def create_with_stock(self, order: Order, products: list[Product]) -> Order:
        """Insert the order and save the products it drew from, atomically."""
        pass

    @abstractmethod
    async def update_with_stock(self, order: Order, products: list[Product]) -> Order:
        """Replace the order and save its re-balanced products, atomically."""
        pass

    @abstractmethod
    async def delete_with_stock(self, order_id: str, products: list[Product]) -> bool:
        """Delete the order and save its restocked products, atomically."""
        pass

    @abstractmethod
    async def list_orders(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
        search: str | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Order]:
        """List orders newest first."""
        pass


class IInvoiceStore(ABC):
    """Interface for invoice persistence."""

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        pass

    @abstractmethod
    async def get(self, invoice_id: str) -> Invoice | None:
        pass

    @abstractmethod
    async def find_by_order(self, order_id: str) -> Invoice | None:
        """Return the invoice issued for an order, if any."""
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        pass

    @abstractmethod
    async def list_invoices(
        self,
        search: str | None = None,
        paid_status: PaidStatus | None = None,
        customer_id: str | None = None,
        start: date | None = None,
        end: date | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[Invoice]:
        """List invoices newest first; ``start``/``end`` are inclusive days."""
        pass


class ICounterStore(ABC):
    """Interface for named monotonic counters."""

    @abstractmethod
    async def increment(self, name: str) -> int:
        """Atomically add one and return the new value (first call returns 1)."""
        pass

    @abstractmethod
    async def current(self, name: str) -> int:
        """Current value, 0 when the counter was never incremented."""
        pass


class ISettingsStore(ABC):
    """Interface for the company settings singleton."""

    @abstractmethod
    async def get_company(self) -> CompanySettings:
        """Stored settings, or defaults when none were saved."""
        pass

    @abstractmethod
    async def save_company(self, settings: CompanySettings) -> CompanySettings:
        pass
