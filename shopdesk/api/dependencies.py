"""
Dependency injection container for FastAPI.

Provides use case instances to route handlers. Tests replace these
through ``app.dependency_overrides``.
"""

from functools import lru_cache

from shopdesk.application.use_cases import (
    CreateCustomerUseCase,
    CreateInvoicePdfUseCase,
    CreateOrderUseCase,
    CreateProductUseCase,
    DashboardStatsUseCase,
    DeleteCustomerUseCase,
    DeleteOrderUseCase,
    DeleteProductUseCase,
    EditOrderUseCase,
    GenerateInvoiceUseCase,
    GetCompanySettingsUseCase,
    GetCustomerUseCase,
    GetInvoiceUseCase,
    GetOrderUseCase,
    GetProductUseCase,
    ListCustomersUseCase,
    ListInvoicesUseCase,
    ListOrdersUseCase,
    ListProductsUseCase,
    ProfitLossReportUseCase,
    RestockProductUseCase,
    UpdateCompanySettingsUseCase,
    UpdateCustomerUseCase,
    UpdateInvoicePaymentUseCase,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)
from shopdesk.config import Settings, get_settings


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Customers
def get_create_customer_use_case() -> CreateCustomerUseCase:
    return CreateCustomerUseCase()


def get_get_customer_use_case() -> GetCustomerUseCase:
    return GetCustomerUseCase()


def get_update_customer_use_case() -> UpdateCustomerUseCase:
    return UpdateCustomerUseCase()


def get_delete_customer_use_case() -> DeleteCustomerUseCase:
    return DeleteCustomerUseCase()


def get_list_customers_use_case() -> ListCustomersUseCase:
    return ListCustomersUseCase()


# Products
def get_create_product_use_case() -> CreateProductUseCase:
    return CreateProductUseCase()


def get_get_product_use_case() -> GetProductUseCase:
    return GetProductUseCase()


def get_update_product_use_case() -> UpdateProductUseCase:
    return UpdateProductUseCase()


def get_delete_product_use_case() -> DeleteProductUseCase:
    return DeleteProductUseCase()


def get_list_products_use_case() -> ListProductsUseCase:
    return ListProductsUseCase()


def get_restock_product_use_case() -> RestockProductUseCase:
    return RestockProductUseCase()


# Orders
def get_create_order_use_case() -> CreateOrderUseCase:
    """Get create order use case."""
    return CreateOrderUseCase()


def get_edit_order_use_case() -> EditOrderUseCase:
    """Get edit order use case."""
    return EditOrderUseCase()


def get_delete_order_use_case() -> DeleteOrderUseCase:
    """Get delete order use case."""
    return DeleteOrderUseCase()


def get_update_order_status_use_case() -> UpdateOrderStatusUseCase:
    return UpdateOrderStatusUseCase()


def get_get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase()


def get_list_orders_use_case() -> ListOrdersUseCase:
    return ListOrdersUseCase()


# Invoices
def get_generate_invoice_use_case() -> GenerateInvoiceUseCase:
    """Get generate invoice use case."""
    return GenerateInvoiceUseCase()


def get_update_invoice_payment_use_case() -> UpdateInvoicePaymentUseCase:
    """Get invoice payment use case."""
    return UpdateInvoicePaymentUseCase()


def get_create_invoice_pdf_use_case() -> CreateInvoicePdfUseCase:
    """Get invoice PDF use case."""
    return CreateInvoicePdfUseCase()


def get_get_invoice_use_case() -> GetInvoiceUseCase:
    return GetInvoiceUseCase()


def get_list_invoices_use_case() -> ListInvoicesUseCase:
    return ListInvoicesUseCase()


# Reports
def get_profit_loss_use_case() -> ProfitLossReportUseCase:
    return ProfitLossReportUseCase()


def get_dashboard_stats_use_case() -> DashboardStatsUseCase:
    return DashboardStatsUseCase()


# Settings
def get_company_settings_use_case() -> GetCompanySettingsUseCase:
    return GetCompanySettingsUseCase()


def get_update_company_settings_use_case() -> UpdateCompanySettingsUseCase:
    return UpdateCompanySettingsUseCase()
