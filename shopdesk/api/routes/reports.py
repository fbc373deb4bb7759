"""Report endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from shopdesk.api.dependencies import (
    get_dashboard_stats_use_case,
    get_profit_loss_use_case,
)
from shopdesk.application.dto.responses import (
    DashboardStatsResponse,
    ErrorResponse,
    ProfitLossResponse,
)
from shopdesk.application.use_cases import DashboardStatsUseCase, ProfitLossReportUseCase

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "/profit-loss",
    response_model=ProfitLossResponse,
    responses={400: {"model": ErrorResponse}},
)
async def profit_loss_report(
    start: date,
    end: date,
    use_case: ProfitLossReportUseCase = Depends(get_profit_loss_use_case),
) -> ProfitLossResponse:
    """Revenue, cost and profit per invoice created between two dates (inclusive)."""
    report = await use_case.execute(start, end)
    return use_case.to_response(report)


@router.get("/dashboard", response_model=DashboardStatsResponse)
async def dashboard(
    use_case: DashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
) -> DashboardStatsResponse:
    stats = await use_case.execute()
    return use_case.to_response(stats)
