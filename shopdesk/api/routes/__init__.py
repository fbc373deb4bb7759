"""API route modules."""

from shopdesk.api.routes.customers import router as customers_router
from shopdesk.api.routes.health import router as health_router
from shopdesk.api.routes.invoices import router as invoices_router
from shopdesk.api.routes.orders import router as orders_router
from shopdesk.api.routes.products import router as products_router
from shopdesk.api.routes.reports import router as reports_router
from shopdesk.api.routes.settings import router as settings_router

__all__ = [
    "health_router",
    "customers_router",
    "products_router",
    "orders_router",
    "invoices_router",
    "reports_router",
    "settings_router",
]
