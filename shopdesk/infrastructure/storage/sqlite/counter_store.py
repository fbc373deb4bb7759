"""
SQLite counter storage.

Counters back invoice numbering: concurrent callers must never receive the
same value, so the increment is a single upsert statement that returns the
new value inside one write transaction.
"""

import aiosqlite

from shopdesk.config import get_logger
from shopdesk.core.exceptions import DatabaseError
from shopdesk.core.interfaces.storage import ICounterStore
from shopdesk.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


class SQLiteCounterStore(ICounterStore):
    """Named counters in the ``counters`` table."""

    async def increment(self, name: str) -> int:
        try:
            async with get_transaction(immediate=True) as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO counters (name, value) VALUES (?, 1)
                    ON CONFLICT(name) DO UPDATE SET value = value + 1
                    RETURNING value
                    """,
                    (name,),
                )
                row = await cursor.fetchone()
                await cursor.close()
        except aiosqlite.Error as e:
            raise DatabaseError(f"increment counter {name}", str(e)) from e

        value = row[0]
        logger.debug("counter_incremented", counter=name, value=value)
        return value

    async def current(self, name: str) -> int:
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM counters WHERE name = ?", (name,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError(f"read counter {name}", str(e)) from e
        return row[0] if row else 0
