"""Row gateway implementation backed by SQLAlchemy Core and async sessions."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Integer, Table, delete, insert, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cmsstore.application.interfaces import RowGateway
from cmsstore.domain.columns import COLUMN_ID
from cmsstore.domain.queries import EntityQuery
from cmsstore.domain.soft_delete import now_datetime_string
from cmsstore.infrastructure.database.query_compiler import compile_count, compile_select

logger = logging.getLogger(__name__)


class SQLAlchemyRowGateway(RowGateway):
    """Implements the RowGateway port for one table.

    Each call runs in its own session and commits before returning, so a
    failure in a later call never rolls back an earlier one.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        table: Table,
        debug: bool = False,
    ):
        self._session_factory = session_factory
        self._table = table
        self._debug = debug

    def _log_statement(self, stmt: Any) -> None:
        if self._debug:
            logger.info("%s: %s", self._table.name, stmt)

    def _to_db(self, row: Mapping[str, str]) -> dict[str, Any]:
        """Map string fields → column values; unknown keys are dropped."""
        values: dict[str, Any] = {}
        for key, value in row.items():
            if key not in self._table.c:
                continue
            if isinstance(self._table.c[key].type, Integer):
                values[key] = int(value) if str(value).strip() else 0
            else:
                values[key] = value
        return values

    @staticmethod
    def _to_row(mapping: Mapping[str, Any]) -> dict[str, str]:
        """Map a result row → string fields."""
        return {key: "" if value is None else str(value) for key, value in mapping.items()}

    async def insert(self, row: Mapping[str, str]) -> None:
        stmt = insert(self._table).values(**self._to_db(row))
        self._log_statement(stmt)
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()

    async def update(self, entity_id: str, changes: Mapping[str, str]) -> int:
        values = self._to_db(changes)
        values.pop(COLUMN_ID, None)
        if not values:
            return 0

        stmt = update(self._table).where(self._table.c[COLUMN_ID] == entity_id).values(**values)
        self._log_statement(stmt)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount

    async def delete(self, entity_id: str) -> int:
        stmt = delete(self._table).where(self._table.c[COLUMN_ID] == entity_id)
        self._log_statement(stmt)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount

    async def select(self, query: EntityQuery) -> list[dict[str, str]]:
        stmt = compile_select(query, self._table, now_datetime_string())
        self._log_statement(stmt)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_row(mapping) for mapping in result.mappings().all()]

    async def count(self, query: EntityQuery) -> int:
        stmt = compile_count(query, self._table, now_datetime_string())
        self._log_statement(stmt)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())
