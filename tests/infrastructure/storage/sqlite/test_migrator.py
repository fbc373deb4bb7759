"""Tests for the SQLite migrator."""

from pathlib import Path

import aiosqlite

from shopdesk.infrastructure.storage.sqlite.migrations import (
    discover_migrations,
    get_migration_status,
    initialize_database,
    verify_schema_integrity,
)


def test_discovers_migrations_in_order():
    migrations = discover_migrations()
    assert [m.version for m in migrations] == ["001", "002"]
    assert migrations[0].name == "initial"
    assert migrations[1].name == "unique_invoice_order"
    assert len(migrations[0].checksum) == 16


async def test_initialize_creates_tables(temp_db_path: Path):
    results = await initialize_database(temp_db_path, create_backup_before=False)
    assert results and all(r.success for r in results)

    async with aiosqlite.connect(temp_db_path) as conn:
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        tables = {row[0] for row in await cursor.fetchall()}

    assert {"customers", "products", "orders", "invoices", "settings", "counters"} <= tables


async def test_initialize_is_idempotent(temp_db_path: Path):
    await initialize_database(temp_db_path, create_backup_before=False)
    assert await initialize_database(temp_db_path, create_backup_before=False) == []


async def test_status(temp_db_path: Path):
    before = await get_migration_status(temp_db_path)
    assert before["exists"] is False
    assert "001" in before["pending_migrations"]

    await initialize_database(temp_db_path, create_backup_before=False)
    after = await get_migration_status(temp_db_path)
    assert after["applied_migrations"] == ["001", "002"]
    assert after["pending_migrations"] == []


async def test_schema_integrity(temp_db_path: Path):
    await initialize_database(temp_db_path, create_backup_before=False)
    checks = await verify_schema_integrity(temp_db_path)
    assert all(check["status"] == "PASS" for check in checks)


async def test_invoice_order_index_is_unique(temp_db_path: Path):
    await initialize_database(temp_db_path, create_backup_before=False)

    async with aiosqlite.connect(temp_db_path) as conn:
        cursor = await conn.execute("PRAGMA index_list(invoices)")
        indexes = {row[1]: row[2] for row in await cursor.fetchall()}

    assert indexes["idx_invoices_order_id"] == 1
