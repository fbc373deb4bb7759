"""Fixtures for flows that run use cases against a real SQLite file."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import shopdesk.infrastructure.storage.sqlite.connection as conn_module
from shopdesk.infrastructure.storage.sqlite.connection import close_pool
from shopdesk.infrastructure.storage.sqlite.migrations import initialize_database


@pytest.fixture
async def live_db(tmp_path: Path) -> AsyncGenerator[Path, None]:
    db_path = tmp_path / "flow.db"
    await initialize_database(db_path, create_backup_before=False)

    settings = MagicMock()
    settings.storage.db_path = db_path
    settings.storage.pool_size = 2
    settings.storage.busy_timeout = 5000

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=settings):
        try:
            yield db_path
        finally:
            await close_pool()
