"""Report use cases: profit and loss, dashboard statistics."""

from datetime import date, datetime

from shopdesk.application.dto.responses import (
    DashboardStatsResponse,
    ProfitLossResponse,
    ProfitLossRowResponse,
    WeeklySalesPoint,
    order_to_response,
    product_to_response,
)
from shopdesk.config import get_logger, get_settings
from shopdesk.core.exceptions import ValidationError
from shopdesk.core.interfaces import (
    ICustomerStore,
    IInvoiceStore,
    IOrderStore,
    IProductStore,
)
from shopdesk.core.services.reporting import (
    DashboardStats,
    ProfitLossReport,
    dashboard_stats,
    profit_loss,
)

logger = get_logger(__name__)


class ProfitLossReportUseCase:
    """Profit per invoice in a date range, costed at FIFO cost basis."""

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, start: date, end: date) -> ProfitLossReport:
        if end < start:
            raise ValidationError("end", "end date is before start date", end.isoformat())

        invoices = await (await self._get_invoice_store()).list_invoices(
            start=start, end=end, limit=None
        )
        report = profit_loss(invoices, start, end)
        logger.info(
            "profit_loss_report",
            start=start.isoformat(),
            end=end.isoformat(),
            invoices=len(report.rows),
            profit=report.total_profit,
        )
        return report

    def to_response(self, report: ProfitLossReport) -> ProfitLossResponse:
        return ProfitLossResponse(
            start=report.start,
            end=report.end,
            rows=[
                ProfitLossRowResponse(
                    invoice_id=row.invoice_id,
                    invoice_number=row.invoice_number,
                    customer_name=row.customer_name,
                    created_at=row.created_at,
                    total=row.total,
                    cost=row.cost,
                    profit=row.profit,
                    margin=row.margin,
                )
                for row in report.rows
            ],
            total_revenue=report.total_revenue,
            total_cost=report.total_cost,
            total_profit=report.total_profit,
            overall_margin=report.overall_margin,
        )


class DashboardStatsUseCase:
    """Headline figures for the dashboard."""

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        product_store: IProductStore | None = None,
        customer_store: ICustomerStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._order_store = order_store
        self._product_store = product_store
        self._customer_store = customer_store
        self._invoice_store = invoice_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_customer_store(self) -> ICustomerStore:
        if self._customer_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_customer_store

            self._customer_store = await get_customer_store()
        return self._customer_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, now: datetime | None = None) -> DashboardStats:
        business = get_settings().business
        orders = await (await self._get_order_store()).list_orders(limit=None)
        products = await (await self._get_product_store()).list_products(limit=None)
        customer_count = await (await self._get_customer_store()).count()
        invoices = await (await self._get_invoice_store()).list_invoices(limit=None)

        return dashboard_stats(
            orders=orders,
            products=products,
            customer_count=customer_count,
            invoices=invoices,
            now=now or datetime.utcnow(),
            window_days=business.dashboard_window_days,
            low_stock_threshold=business.low_stock_threshold,
            recent_limit=business.recent_orders_limit,
        )

    def to_response(self, stats: DashboardStats) -> DashboardStatsResponse:
        return DashboardStatsResponse(
            total_sales=stats.total_sales,
            total_orders=stats.total_orders,
            total_customers=stats.total_customers,
            low_stock_count=len(stats.low_stock_products),
            low_stock_products=[product_to_response(p) for p in stats.low_stock_products],
            recent_orders=[order_to_response(o) for o in stats.recent_orders],
            weekly_sales=[WeeklySalesPoint(**point) for point in stats.weekly_sales],
            total_outstanding=stats.total_outstanding,
        )
