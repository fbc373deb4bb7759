"""Company settings endpoints."""

from fastapi import APIRouter, Depends

from shopdesk.api.dependencies import (
    get_company_settings_use_case,
    get_update_company_settings_use_case,
)
from shopdesk.application.dto.requests import UpdateCompanySettingsRequest
from shopdesk.application.dto.responses import CompanySettingsResponse, settings_to_response
from shopdesk.application.use_cases import (
    GetCompanySettingsUseCase,
    UpdateCompanySettingsUseCase,
)

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=CompanySettingsResponse)
async def get_company_settings(
    use_case: GetCompanySettingsUseCase = Depends(get_company_settings_use_case),
) -> CompanySettingsResponse:
    """Company profile printed on invoices; defaults until first saved."""
    return settings_to_response(await use_case.execute())


@router.put("", response_model=CompanySettingsResponse)
async def update_company_settings(
    request: UpdateCompanySettingsRequest,
    use_case: UpdateCompanySettingsUseCase = Depends(get_update_company_settings_use_case),
) -> CompanySettingsResponse:
    return settings_to_response(await use_case.execute(request))
