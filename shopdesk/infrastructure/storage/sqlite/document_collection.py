"""
Schemaless JSON document collections on SQLite.

Each collection is a table of ``(id, data, created_at, updated_at)`` rows
where ``data`` holds the entity as JSON. Documents are validated into their
pydantic entity when read, so malformed records fail at this boundary.
"""

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Generic, TypeVar
from uuid import uuid4

import aiosqlite
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shopdesk.config import get_logger
from shopdesk.core.exceptions import DatabaseError, RecordNotFoundError
from shopdesk.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

COLLECTIONS = ("customers", "products", "orders", "invoices", "settings")


def new_document_id() -> str:
    return uuid4().hex[:20]


class DocumentCollection(Generic[T]):
    """Typed access to one document table."""

    def __init__(self, name: str, model: type[T]):
        if name not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {name}")
        self.name = name
        self.model = model

    def _encode(self, entity: T) -> str:
        return entity.model_dump_json(exclude={"id"})

    def _decode(self, row: aiosqlite.Row) -> T:
        try:
            data = json.loads(row["data"])
            data["id"] = row["id"]
            return self.model.model_validate(data)
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise DatabaseError(f"decode {self.name}/{row['id']}", str(e)) from e

    # Writes on a caller-owned connection; the caller commits or rolls back.

    async def insert_in(self, conn: aiosqlite.Connection, entity: T) -> T:
        """Store a new document, assigning an id when it has none."""
        if getattr(entity, "id", None) is None:
            entity.id = new_document_id()
        now = datetime.utcnow().isoformat()
        await conn.execute(
            f"INSERT INTO {self.name} (id, data, created_at, updated_at) "
            "VALUES (?, ?, ?, ?)",
            (entity.id, self._encode(entity), now, now),
        )
        return entity

    async def replace_in(self, conn: aiosqlite.Connection, entity: T) -> T:
        """Overwrite an existing document; raises when it is gone."""
        if getattr(entity, "id", None) is None:
            raise RecordNotFoundError(self.name, "<none>")
        cursor = await conn.execute(
            f"UPDATE {self.name} SET data = ?, updated_at = ? WHERE id = ?",
            (self._encode(entity), datetime.utcnow().isoformat(), entity.id),
        )
        if cursor.rowcount == 0:
            raise RecordNotFoundError(self.name, str(entity.id))
        return entity

    async def save_many_in(self, conn: aiosqlite.Connection, entities: list[T]) -> None:
        for entity in entities:
            await self.replace_in(conn, entity)
        if entities:
            logger.debug("documents_saved", collection=self.name, count=len(entities))

    async def delete_in(self, conn: aiosqlite.Connection, doc_id: str) -> bool:
        cursor = await conn.execute(f"DELETE FROM {self.name} WHERE id = ?", (doc_id,))
        return cursor.rowcount > 0

    async def insert(self, entity: T) -> T:
        """Store a new document in its own transaction."""
        try:
            async with get_transaction() as conn:
                return await self.insert_in(conn, entity)
        except aiosqlite.Error as e:
            raise DatabaseError(f"insert {self.name}", str(e)) from e

    async def get(self, doc_id: str) -> T | None:
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    f"SELECT id, data FROM {self.name} WHERE id = ?", (doc_id,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError(f"get {self.name}", str(e)) from e
        return self._decode(row) if row else None

    async def get_many(self, doc_ids: Iterable[str]) -> dict[str, T]:
        ids = list(dict.fromkeys(doc_ids))
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    f"SELECT id, data FROM {self.name} WHERE id IN ({placeholders})",
                    ids,
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError(f"get_many {self.name}", str(e)) from e
        return {row["id"]: self._decode(row) for row in rows}

    async def find_one(self, field: str, value: str) -> T | None:
        """First document whose top-level ``field`` equals ``value``."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    f"SELECT id, data FROM {self.name} "
                    "WHERE json_extract(data, ?) = ? ORDER BY created_at LIMIT 1",
                    (f"$.{field}", value),
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError(f"find {self.name}", str(e)) from e
        return self._decode(row) if row else None

    async def replace(self, entity: T) -> T:
        """Overwrite an existing document (last write wins)."""
        try:
            async with get_transaction() as conn:
                return await self.replace_in(conn, entity)
        except aiosqlite.Error as e:
            raise DatabaseError(f"replace {self.name}", str(e)) from e

    async def upsert(self, entity: T) -> T:
        """Insert or overwrite a document with a fixed id."""
        now = datetime.utcnow().isoformat()
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    f"INSERT INTO {self.name} (id, data, created_at, updated_at) "
                    "VALUES (?, ?, ?, ?) "
                    "ON CONFLICT(id) DO UPDATE SET data = excluded.data, "
                    "updated_at = excluded.updated_at",
                    (entity.id, self._encode(entity), now, now),
                )
        except aiosqlite.Error as e:
            raise DatabaseError(f"upsert {self.name}", str(e)) from e
        return entity

    async def delete(self, doc_id: str) -> bool:
        try:
            async with get_transaction() as conn:
                return await self.delete_in(conn, doc_id)
        except aiosqlite.Error as e:
            raise DatabaseError(f"delete {self.name}", str(e)) from e

    async def all(self) -> list[T]:
        """Every document, oldest first."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    f"SELECT id, data FROM {self.name} ORDER BY created_at, rowid"
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError(f"list {self.name}", str(e)) from e
        return [self._decode(row) for row in rows]

    async def count(self) -> int:
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(f"SELECT COUNT(*) FROM {self.name}")
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError(f"count {self.name}", str(e)) from e
        return row[0]


def paginate(items: list, limit: int | None, offset: int = 0) -> list:
    """Slice an in-memory listing."""
    if limit is None:
        return items[offset:]
    return items[offset : offset + limit]


def matches(needle: str | None, *haystacks: str | None) -> bool:
    """Case-insensitive substring search over several fields."""
    if not needle:
        return True
    needle = needle.strip().lower()
    return any(needle in (value or "").lower() for value in haystacks)
