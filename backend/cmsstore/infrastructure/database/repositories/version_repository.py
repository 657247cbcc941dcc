"""Version repository backed by SQLAlchemy Core."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cmsstore.application.interfaces import VersionRepository
from cmsstore.domain.columns import (
    COLUMN_CONTENT,
    COLUMN_CREATED_AT,
    COLUMN_ENTITY_ID,
    COLUMN_ENTITY_TYPE,
    COLUMN_ID,
    COLUMN_SOFT_DELETED_AT,
)
from cmsstore.domain.entities import VersionSnapshot
from cmsstore.domain.soft_delete import now_datetime_string


class SQLAlchemyVersionRepository(VersionRepository):
    """Implements the VersionRepository port; newest snapshot first by ``created_at``."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], table: Table):
        self._session_factory = session_factory
        self._table = table

    @staticmethod
    def _to_entity(row: Mapping[str, Any]) -> VersionSnapshot:
        return VersionSnapshot(
            id=row[COLUMN_ID],
            entity_type=row[COLUMN_ENTITY_TYPE],
            entity_id=row[COLUMN_ENTITY_ID],
            content=row[COLUMN_CONTENT],
            created_at=row[COLUMN_CREATED_AT],
            soft_deleted_at=row[COLUMN_SOFT_DELETED_AT],
        )

    async def create(self, snapshot: VersionSnapshot) -> VersionSnapshot:
        stmt = insert(self._table).values(
            id=snapshot.id,
            entity_type=snapshot.entity_type,
            entity_id=snapshot.entity_id,
            content=snapshot.content,
            created_at=snapshot.created_at,
            soft_deleted_at=snapshot.soft_deleted_at,
        )
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()
        return snapshot

    async def find_latest(self, entity_type: str, entity_id: str) -> VersionSnapshot | None:
        found = await self.list(entity_type, entity_id, limit=1)
        return found[0] if found else None

    async def list(
        self,
        entity_type: str,
        entity_id: str,
        limit: int | None = None,
        soft_deleted_included: bool = False,
    ) -> list[VersionSnapshot]:
        table = self._table
        stmt = (
            select(table)
            .where(table.c[COLUMN_ENTITY_TYPE] == entity_type)
            .where(table.c[COLUMN_ENTITY_ID] == entity_id)
            .order_by(table.c[COLUMN_CREATED_AT].desc())
        )
        if not soft_deleted_included:
            stmt = stmt.where(table.c[COLUMN_SOFT_DELETED_AT] > now_datetime_string())
        if limit is not None:
            stmt = stmt.limit(limit)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.mappings().all()]

    async def find_by_id(self, version_id: str) -> VersionSnapshot | None:
        stmt = select(self._table).where(self._table.c[COLUMN_ID] == version_id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
        return self._to_entity(row) if row else None

    async def delete_by_id(self, version_id: str) -> bool:
        stmt = delete(self._table).where(self._table.c[COLUMN_ID] == version_id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def soft_delete_by_id(self, version_id: str) -> bool:
        stmt = (
            update(self._table)
            .where(self._table.c[COLUMN_ID] == version_id)
            .values(soft_deleted_at=now_datetime_string())
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0
