"""
Domain exceptions for the ShopDesk application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class ShopDeskError(Exception):
    """Base exception for all ShopDesk errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(ShopDeskError):
    """Base exception for storage operations."""

    pass


class RecordNotFoundError(StorageError):
    """A document was not found in its collection."""

    def __init__(self, collection: str, record_id: str, code: str | None = None):
        super().__init__(
            f"{collection.rstrip('s').capitalize()} not found: {record_id}",
            code=code or "RECORD_NOT_FOUND",
            details={"collection": collection, "id": record_id},
        )


class CustomerNotFoundError(RecordNotFoundError):
    """Customer not found in storage."""

    def __init__(self, customer_id: str):
        super().__init__("customers", customer_id, code="CUSTOMER_NOT_FOUND")


class ProductNotFoundError(RecordNotFoundError):
    """Product not found in storage."""

    def __init__(self, product_id: str):
        super().__init__("products", product_id, code="PRODUCT_NOT_FOUND")


class OrderNotFoundError(RecordNotFoundError):
    """Order not found in storage."""

    def __init__(self, order_id: str):
        super().__init__("orders", order_id, code="ORDER_NOT_FOUND")


class InvoiceNotFoundError(RecordNotFoundError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: str):
        super().__init__("invoices", invoice_id, code="INVOICE_NOT_FOUND")


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(ShopDeskError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


# Inventory Exceptions
class InventoryError(ShopDeskError):
    """Base exception for stock ledger operations."""

    pass


class InsufficientStockError(InventoryError):
    """Requested quantity exceeds the stock held in a product's batches."""

    def __init__(
        self,
        product_id: str,
        product_name: str,
        requested: float,
        available: float,
    ):
        shortfall = requested - available
        super().__init__(
            f"Not enough stock for {product_name}: "
            f"requested {requested:g}, available {available:g}",
            code="INSUFFICIENT_STOCK",
            details={
                "product_id": product_id,
                "product_name": product_name,
                "requested": requested,
                "available": available,
                "shortfall": shortfall,
            },
        )
        self.product_id = product_id
        self.shortfall = shortfall


# Conflict Exceptions
class ConflictError(ShopDeskError):
    """Operation conflicts with the current state of stored records."""

    pass


class DuplicateInvoiceError(ConflictError):
    """An invoice already exists for the order."""

    def __init__(self, order_id: str, existing_id: str):
        super().__init__(
            f"Invoice already exists for order: {order_id}",
            code="DUPLICATE_INVOICE",
            details={"order_id": order_id, "existing_id": existing_id},
        )


class OrderHasInvoiceError(ConflictError):
    """Order cannot be removed while an invoice references it."""

    def __init__(self, order_id: str, invoice_id: str):
        super().__init__(
            f"Order {order_id} is referenced by invoice {invoice_id}",
            code="ORDER_HAS_INVOICE",
            details={"order_id": order_id, "invoice_id": invoice_id},
        )


# Payment Exceptions
class PaymentError(ShopDeskError):
    """Base exception for invoice payment updates."""

    pass


class InvalidPaymentError(PaymentError):
    """Paid status and amount paid are inconsistent."""

    def __init__(self, paid_status: str, amount_paid: float, total: float, reason: str):
        super().__init__(
            f"Invalid payment for status '{paid_status}': {reason}",
            code="INVALID_PAYMENT",
            details={
                "paid_status": paid_status,
                "amount_paid": amount_paid,
                "total": total,
                "reason": reason,
            },
        )


class ConfigurationError(ShopDeskError):
    """Configuration error."""

    pass
