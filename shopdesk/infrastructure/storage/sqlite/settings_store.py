"""SQLite storage for the company settings singleton."""

from pydantic import ConfigDict

from shopdesk.config import get_logger
from shopdesk.core.entities import CompanySettings
from shopdesk.core.interfaces.storage import ISettingsStore
from shopdesk.infrastructure.storage.sqlite.document_collection import (
    DocumentCollection,
)

logger = get_logger(__name__)

SETTINGS_DOC_ID = "default"


class _SettingsDocument(CompanySettings):
    """Company settings carrying the fixed document id."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = SETTINGS_DOC_ID


class SQLiteSettingsStore(ISettingsStore):
    """Company settings stored as document ``settings/default``."""

    def __init__(self) -> None:
        self._docs = DocumentCollection("settings", _SettingsDocument)

    async def get_company(self) -> CompanySettings:
        doc = await self._docs.get(SETTINGS_DOC_ID)
        if doc is None:
            return CompanySettings()
        return CompanySettings.model_validate(doc.model_dump(exclude={"id"}))

    async def save_company(self, settings: CompanySettings) -> CompanySettings:
        doc = _SettingsDocument(**settings.model_dump(), id=SETTINGS_DOC_ID)
        await self._docs.upsert(doc)
        logger.info("company_settings_saved", name=settings.name)
        return settings
