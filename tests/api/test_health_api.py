"""API tests for health, settings and request middleware."""

from unittest.mock import AsyncMock, Mock, patch

import pytest
from httpx import ASGITransport, AsyncClient

import shopdesk.infrastructure.storage.sqlite as sqlite_module
from shopdesk.api.dependencies import (
    get_company_settings_use_case,
    get_update_company_settings_use_case,
)
from shopdesk.api.main import app
from shopdesk.application.use_cases import (
    GetCompanySettingsUseCase,
    UpdateCompanySettingsUseCase,
)


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_root_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_request_id_is_echoed(client):
    resp = await client.get("/health", headers={"X-Request-ID": "abc123"})

    assert resp.headers["X-Request-ID"] == "abc123"
    assert resp.headers["X-Response-Time"].endswith("ms")


async def test_request_id_is_generated(client):
    resp = await client.get("/health")

    assert len(resp.headers["X-Request-ID"]) == 8


async def test_detailed_health_reports_database_failure(client):
    with patch.object(sqlite_module, "get_pool", AsyncMock(side_effect=OSError("disk gone"))):
        resp = await client.get("/api/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "unhealthy"
    assert data["database"] == "error"
    assert data["schema_version"] is None


async def test_get_company_settings(client, company):
    uc = Mock(spec=GetCompanySettingsUseCase)
    uc.execute = AsyncMock(return_value=company)
    app.dependency_overrides[get_company_settings_use_case] = lambda: uc

    resp = await client.get("/api/settings")

    assert resp.status_code == 200
    assert resp.json()["name"] == "Green Grocers"
    assert resp.json()["tax_rate"] == 5.0


async def test_update_company_settings_rejects_bad_tax_rate(client):
    uc = Mock(spec=UpdateCompanySettingsUseCase)
    app.dependency_overrides[get_update_company_settings_use_case] = lambda: uc

    resp = await client.put("/api/settings", json={"name": "Green Grocers", "tax_rate": 150})

    assert resp.status_code == 422
    uc.execute.assert_not_called()


async def test_unknown_route_is_json_404(client):
    resp = await client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["error_code"]
