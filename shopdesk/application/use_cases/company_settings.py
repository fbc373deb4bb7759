"""Company settings use cases."""

from shopdesk.application.dto.requests import UpdateCompanySettingsRequest
from shopdesk.config import get_logger
from shopdesk.core.entities import CompanySettings
from shopdesk.core.interfaces import ISettingsStore

logger = get_logger(__name__)


class _SettingsUseCase:
    def __init__(self, settings_store: ISettingsStore | None = None):
        self._settings_store = settings_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from shopdesk.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store


class GetCompanySettingsUseCase(_SettingsUseCase):
    async def execute(self) -> CompanySettings:
        return await (await self._get_settings_store()).get_company()


class UpdateCompanySettingsUseCase(_SettingsUseCase):
    async def execute(self, request: UpdateCompanySettingsRequest) -> CompanySettings:
        settings = CompanySettings(**request.model_dump())
        return await (await self._get_settings_store()).save_company(settings)
