"""SQLite storage implementations."""

from shopdesk.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from shopdesk.infrastructure.storage.sqlite.counter_store import SQLiteCounterStore
from shopdesk.infrastructure.storage.sqlite.customer_store import SQLiteCustomerStore
from shopdesk.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from shopdesk.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from shopdesk.infrastructure.storage.sqlite.product_store import SQLiteProductStore
from shopdesk.infrastructure.storage.sqlite.settings_store import SQLiteSettingsStore

# Singleton instances
_customer_store: SQLiteCustomerStore | None = None
_product_store: SQLiteProductStore | None = None
_order_store: SQLiteOrderStore | None = None
_invoice_store: SQLiteInvoiceStore | None = None
_counter_store: SQLiteCounterStore | None = None
_settings_store: SQLiteSettingsStore | None = None


async def get_customer_store() -> SQLiteCustomerStore:
    """Get singleton customer store instance."""
    global _customer_store
    if _customer_store is None:
        _customer_store = SQLiteCustomerStore()
    return _customer_store


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_order_store() -> SQLiteOrderStore:
    """Get singleton order store instance."""
    global _order_store
    if _order_store is None:
        _order_store = SQLiteOrderStore()
    return _order_store


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_counter_store() -> SQLiteCounterStore:
    """Get singleton counter store instance."""
    global _counter_store
    if _counter_store is None:
        _counter_store = SQLiteCounterStore()
    return _counter_store


async def get_settings_store() -> SQLiteSettingsStore:
    """Get singleton company settings store instance."""
    global _settings_store
    if _settings_store is None:
        _settings_store = SQLiteSettingsStore()
    return _settings_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Stores
    "SQLiteCounterStore",
    "SQLiteCustomerStore",
    "SQLiteInvoiceStore",
    "SQLiteOrderStore",
    "SQLiteProductStore",
    "SQLiteSettingsStore",
    # Singleton getters
    "get_counter_store",
    "get_customer_store",
    "get_invoice_store",
    "get_order_store",
    "get_product_store",
    "get_settings_store",
]
