"""Unit tests for domain exceptions."""

from shopdesk.core.exceptions import (
    ConflictError,
    CustomerNotFoundError,
    DatabaseError,
    DuplicateInvoiceError,
    InsufficientStockError,
    InvalidPaymentError,
    InventoryError,
    InvoiceNotFoundError,
    OrderHasInvoiceError,
    OrderNotFoundError,
    PaymentError,
    ProductNotFoundError,
    RecordNotFoundError,
    ShopDeskError,
    StorageError,
    ValidationError,
)


class TestShopDeskError:
    def test_basic_initialization(self):
        error = ShopDeskError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "ShopDeskError"
        assert error.details == {}

    def test_to_dict(self):
        error = ShopDeskError("Boom", code="BOOM", details={"a": 1})
        assert error.to_dict() == {"error": "BOOM", "message": "Boom", "details": {"a": 1}}


class TestNotFoundErrors:
    def test_codes(self):
        assert CustomerNotFoundError("c1").code == "CUSTOMER_NOT_FOUND"
        assert ProductNotFoundError("p1").code == "PRODUCT_NOT_FOUND"
        assert OrderNotFoundError("o1").code == "ORDER_NOT_FOUND"
        assert InvoiceNotFoundError("i1").code == "INVOICE_NOT_FOUND"

    def test_hierarchy(self):
        error = OrderNotFoundError("o1")
        assert isinstance(error, RecordNotFoundError)
        assert isinstance(error, StorageError)
        assert "o1" in error.message


class TestStockAndConflictErrors:
    def test_insufficient_stock_details(self):
        error = InsufficientStockError("p1", "Rice", requested=20, available=15)
        assert isinstance(error, InventoryError)
        assert error.code == "INSUFFICIENT_STOCK"
        assert error.shortfall == 5
        assert error.details["product_id"] == "p1"
        assert "Rice" in error.message

    def test_duplicate_invoice(self):
        error = DuplicateInvoiceError("o1", "i1")
        assert isinstance(error, ConflictError)
        assert error.code == "DUPLICATE_INVOICE"

    def test_order_has_invoice(self):
        error = OrderHasInvoiceError("o1", "i1")
        assert isinstance(error, ConflictError)
        assert error.code == "ORDER_HAS_INVOICE"


class TestOtherErrors:
    def test_invalid_payment(self):
        error = InvalidPaymentError("paid", 10.0, 100.0, "mismatch")
        assert isinstance(error, PaymentError)
        assert error.code == "INVALID_PAYMENT"

    def test_validation_error(self):
        error = ValidationError("items", "at least one item is required")
        assert error.code == "VALIDATION_ERROR"

    def test_database_error(self):
        error = DatabaseError("insert orders", "disk full")
        assert isinstance(error, StorageError)
        assert error.code == "DATABASE_ERROR"
