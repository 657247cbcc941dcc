"""Entity store: CRUD orchestration for one entity kind over a row gateway."""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Generic, TypeVar

from cmsstore.application.interfaces import RowGateway
from cmsstore.application.services.versioning_tracker import VersioningTracker
from cmsstore.domain.columns import COLUMN_ID, COLUMN_UPDATED_AT
from cmsstore.domain.entities import CmsEntity
from cmsstore.domain.exceptions import EntityNotFoundError, PreconditionError
from cmsstore.domain.queries import EntityQuery
from cmsstore.domain.soft_delete import now_datetime_string

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=CmsEntity)
T = TypeVar("T")


class EntityStore(Generic[E]):
    """Create, update, soft delete, delete, find, list and count one entity kind.

    Every mutation that succeeds is followed by a best-effort snapshot when a
    versioning tracker is attached. Backend errors propagate unchanged.

    There is no row locking: two callers updating the same row from stale
    copies both succeed, and the last write wins per column.
    """

    def __init__(
        self,
        entity_class: type[E],
        query_class: type[EntityQuery],
        gateway: RowGateway,
        tracker: VersioningTracker | None = None,
        statement_timeout: float | None = None,
    ):
        self.entity_class = entity_class
        self.query_class = query_class
        self._gateway = gateway
        self._tracker = tracker
        self._statement_timeout = statement_timeout

    @property
    def kind_name(self) -> str:
        return self.entity_class.kind.value

    async def _run(self, statement: Awaitable[T]) -> T:
        """Await one backend call under the optional per-statement deadline."""
        if self._statement_timeout is None:
            return await statement
        async with asyncio.timeout(self._statement_timeout):
            return await statement

    async def _track(self, entity: E) -> None:
        if self._tracker is not None:
            await self._tracker.track(entity)

    def new_query(self, **params) -> EntityQuery:
        return self.query_class(**params)

    # ── Mutations ────────────────────────────────────────────────────

    async def create(self, entity: E | None) -> E:
        if entity is None:
            raise PreconditionError(f"{self.kind_name} is required")

        now = now_datetime_string()
        entity.created_at = now
        entity.updated_at = now

        await self._run(self._gateway.insert(entity.data()))
        entity.mark_as_not_dirty()
        logger.debug("Created %s %s", self.kind_name, entity.id)

        await self._track(entity)
        return entity

    async def update(self, entity: E | None) -> E:
        """Persist only the changed fields; a clean entity costs no backend call."""
        if entity is None:
            raise PreconditionError(f"{self.kind_name} is required")
        if not entity.id:
            raise PreconditionError(f"{self.kind_name} id is empty")

        changes = entity.data_changed()
        changes.pop(COLUMN_ID, None)
        if not changes:
            return entity

        entity.updated_at = now_datetime_string()
        changes[COLUMN_UPDATED_AT] = entity.updated_at

        affected = await self._run(self._gateway.update(entity.id, changes))
        if affected == 0:
            logger.warning("Update of %s %s matched no row", self.kind_name, entity.id)
            return entity

        entity.mark_as_not_dirty()
        logger.debug("Updated %s %s: %s", self.kind_name, entity.id, sorted(changes))

        await self._track(entity)
        return entity

    async def soft_delete(self, entity: E | None) -> E:
        if entity is None:
            raise PreconditionError(f"{self.kind_name} is required")

        entity.soft_deleted_at = now_datetime_string()
        return await self.update(entity)

    async def soft_delete_by_id(self, entity_id: str) -> E:
        entity = await self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.kind_name, entity_id)
        return await self.soft_delete(entity)

    async def delete(self, entity: E | None) -> bool:
        if entity is None:
            raise PreconditionError(f"{self.kind_name} is required")
        return await self.delete_by_id(entity.id)

    async def delete_by_id(self, entity_id: str) -> bool:
        """Physically remove the row; not tracked and not versioned."""
        if not entity_id:
            raise PreconditionError(f"{self.kind_name} id is empty")

        affected = await self._run(self._gateway.delete(entity_id))
        logger.debug("Deleted %s %s (%d row(s))", self.kind_name, entity_id, affected)
        return affected > 0

    # ── Reads ────────────────────────────────────────────────────────

    async def find_by_id(self, entity_id: str) -> E | None:
        if not entity_id:
            raise PreconditionError(f"{self.kind_name} id is empty")
        return await self._find_one(self.new_query(id=entity_id))

    async def find_by_handle(self, handle: str) -> E | None:
        if not handle:
            raise PreconditionError(f"{self.kind_name} handle is empty")
        return await self._find_one(self.new_query(handle=handle))

    async def _find_one(self, query: EntityQuery) -> E | None:
        query.limit = 1
        found = await self.list(query)
        return found[0] if found else None

    async def list(self, query: EntityQuery | None) -> list[E]:
        if query is None:
            raise PreconditionError(f"{self.kind_name} query is required")
        query.validate()

        rows = await self._run(self._gateway.select(query))
        return [self.entity_class.from_existing_data(row) for row in rows]

    async def count(self, query: EntityQuery | None) -> int:
        """Matching rows, with paging ignored; the caller's query is left untouched."""
        if query is None:
            raise PreconditionError(f"{self.kind_name} query is required")

        counting = query.copy()
        counting.count_only = True
        counting.validate()
        return await self._run(self._gateway.count(counting))
