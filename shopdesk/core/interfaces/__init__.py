"""Core interfaces (ports) for dependency injection."""

from shopdesk.core.interfaces.storage import (
    ICounterStore,
    ICustomerStore,
    IInvoiceStore,
    IOrderStore,
    IProductStore,
    ISettingsStore,
)

__all__ = [
    "ICounterStore",
    "ICustomerStore",
    "IInvoiceStore",
    "IOrderStore",
    "IProductStore",
    "ISettingsStore",
]
