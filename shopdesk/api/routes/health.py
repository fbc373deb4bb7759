"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from shopdesk.api.dependencies import get_app_settings
from shopdesk.application.dto.responses import HealthResponse
from shopdesk.config import Settings, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Service and database health.

    Runs a trivial query through the connection pool and reports the
    latest applied schema migration.
    """
    from shopdesk.infrastructure.storage.sqlite import get_pool
    from shopdesk.infrastructure.storage.sqlite.migrations import get_migration_status

    database = "ok"
    schema_version = None
    try:
        pool = await get_pool()
        async with pool.acquire() as conn:
            await conn.execute("SELECT 1")
        migration_status = await get_migration_status()
        applied = migration_status["applied_migrations"]
        schema_version = applied[-1] if applied else None
    except Exception as e:
        logger.warning("health_check_database_failed", error=str(e))
        database = "error"

    return HealthResponse(
        status="healthy" if database == "ok" else "unhealthy",
        version=settings.app_version,
        environment=settings.environment,
        database=database,
        schema_version=schema_version,
    )
