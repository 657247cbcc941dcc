"""SQLAlchemy Core tables for the entity kinds and the version log.

Table names are configurable, so tables are built by factory functions
rather than declared as ORM models.
"""

import logging
from collections.abc import Mapping

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.ext.asyncio import AsyncEngine

from cmsstore.domain.columns import (
    COLUMN_ALIAS,
    COLUMN_CONTENT,
    COLUMN_CREATED_AT,
    COLUMN_DOMAIN_NAMES,
    COLUMN_ENTITY_ID,
    COLUMN_ENTITY_TYPE,
    COLUMN_ID,
    COLUMN_MEMO,
    COLUMN_METAS,
    COLUMN_SEQUENCE,
    COLUMN_SOFT_DELETED_AT,
)
from cmsstore.domain.entities import ENTITY_CLASSES, EntityKind

logger = logging.getLogger(__name__)

DATETIME_LENGTH = 40
ID_LENGTH = 40

# Free-form columns; everything else is a bounded string.
_TEXT_COLUMNS = frozenset({COLUMN_ALIAS, COLUMN_CONTENT, COLUMN_DOMAIN_NAMES, COLUMN_MEMO, COLUMN_METAS})
_INTEGER_COLUMNS = frozenset({COLUMN_SEQUENCE})


def _column_for(name: str) -> Column:
    if name == COLUMN_ID:
        return Column(name, String(ID_LENGTH), primary_key=True)
    if name in _INTEGER_COLUMNS:
        return Column(name, Integer, nullable=False, default=0)
    if name in _TEXT_COLUMNS:
        return Column(name, Text, nullable=False, default="")
    if name.endswith("_at"):
        return Column(name, String(DATETIME_LENGTH), nullable=False)
    return Column(name, String(255), nullable=False, default="")


def entity_table(kind: EntityKind, table_name: str, metadata: MetaData) -> Table:
    """Table with one column per field of the entity kind."""
    columns = [_column_for(name) for name in ENTITY_CLASSES[kind].COLUMNS]
    return Table(
        table_name,
        metadata,
        *columns,
        Index(f"ix_{table_name}_{COLUMN_SOFT_DELETED_AT}", COLUMN_SOFT_DELETED_AT),
    )


def version_table(table_name: str, metadata: MetaData) -> Table:
    return Table(
        table_name,
        metadata,
        Column(COLUMN_ID, String(ID_LENGTH), primary_key=True),
        Column(COLUMN_ENTITY_TYPE, String(40), nullable=False),
        Column(COLUMN_ENTITY_ID, String(ID_LENGTH), nullable=False),
        Column(COLUMN_CONTENT, Text, nullable=False),
        Column(COLUMN_CREATED_AT, String(DATETIME_LENGTH), nullable=False),
        Column(COLUMN_SOFT_DELETED_AT, String(DATETIME_LENGTH), nullable=False),
        Index(f"ix_{table_name}_entity", COLUMN_ENTITY_TYPE, COLUMN_ENTITY_ID),
    )


class StoreTables:
    """The tables of one store, sharing one ``MetaData``."""

    def __init__(self, table_names: Mapping[EntityKind, str], version_table_name: str | None = None):
        self.metadata = MetaData()
        self.entities: dict[EntityKind, Table] = {
            kind: entity_table(kind, name, self.metadata) for kind, name in table_names.items()
        }
        self.versions: Table | None = (
            version_table(version_table_name, self.metadata) if version_table_name else None
        )


async def auto_migrate(engine: AsyncEngine, tables: StoreTables) -> None:
    """Create every missing table; existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(tables.metadata.create_all)
    logger.info("Auto-migrated tables: %s", ", ".join(sorted(tables.metadata.tables)))
