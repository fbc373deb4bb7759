"""Application use cases."""

from shopdesk.application.use_cases.company_settings import (
    GetCompanySettingsUseCase,
    UpdateCompanySettingsUseCase,
)
from shopdesk.application.use_cases.create_invoice_pdf import CreateInvoicePdfUseCase
from shopdesk.application.use_cases.create_order import CreateOrderUseCase
from shopdesk.application.use_cases.delete_order import DeleteOrderUseCase
from shopdesk.application.use_cases.edit_order import EditOrderUseCase
from shopdesk.application.use_cases.generate_invoice import GenerateInvoiceUseCase
from shopdesk.application.use_cases.manage_customers import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerUseCase,
)
from shopdesk.application.use_cases.manage_products import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from shopdesk.application.use_cases.query_invoices import (
    GetInvoiceUseCase,
    ListInvoicesUseCase,
)
from shopdesk.application.use_cases.query_orders import GetOrderUseCase, ListOrdersUseCase
from shopdesk.application.use_cases.reports import (
    DashboardStatsUseCase,
    ProfitLossReportUseCase,
)
from shopdesk.application.use_cases.restock_product import RestockProductUseCase
from shopdesk.application.use_cases.update_invoice_payment import (
    UpdateInvoicePaymentUseCase,
)
from shopdesk.application.use_cases.update_order_status import UpdateOrderStatusUseCase

__all__ = [
    # Customers
    "CreateCustomerUseCase",
    "DeleteCustomerUseCase",
    "GetCustomerUseCase",
    "ListCustomersUseCase",
    "UpdateCustomerUseCase",
    # Products
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "RestockProductUseCase",
    "UpdateProductUseCase",
    # Orders
    "CreateOrderUseCase",
    "DeleteOrderUseCase",
    "EditOrderUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "UpdateOrderStatusUseCase",
    # Invoices
    "CreateInvoicePdfUseCase",
    "GenerateInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "UpdateInvoicePaymentUseCase",
    # Reports
    "DashboardStatsUseCase",
    "ProfitLossReportUseCase",
    # Settings
    "GetCompanySettingsUseCase",
    "UpdateCompanySettingsUseCase",
]
