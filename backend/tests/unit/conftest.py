"""In-memory fakes of the store ports, shared by the unit tests."""

from collections.abc import Mapping

import pytest

from cmsstore.application.interfaces import RowGateway, VersionRepository
from cmsstore.domain.columns import COLUMN_ID, COLUMN_SOFT_DELETED_AT
from cmsstore.domain.entities import VersionSnapshot
from cmsstore.domain.queries import EntityQuery, ParamKind
from cmsstore.domain.soft_delete import is_soft_deleted


class FakeRowGateway(RowGateway):
    """Evaluates queries over a dict of rows and records every backend call."""

    def __init__(self):
        self.rows: dict[str, dict[str, str]] = {}
        self.calls: list[str] = []

    @property
    def writes(self) -> list[str]:
        return [call for call in self.calls if call in ("insert", "update", "delete")]

    async def insert(self, row: Mapping[str, str]) -> None:
        self.calls.append("insert")
        self.rows[row[COLUMN_ID]] = dict(row)

    async def update(self, entity_id: str, changes: Mapping[str, str]) -> int:
        self.calls.append("update")
        if entity_id not in self.rows:
            return 0
        self.rows[entity_id].update(changes)
        return 1

    async def delete(self, entity_id: str) -> int:
        self.calls.append("delete")
        return 1 if self.rows.pop(entity_id, None) is not None else 0

    def _matches(self, row: dict[str, str], query: EntityQuery) -> bool:
        for param, value in query.set_params():
            if param.kind == ParamKind.EQUALS and row.get(param.column) != str(value):
                return False
            if param.kind == ParamKind.EQUALS_ANY and value not in [row.get(c) for c in param.columns]:
                return False
            if param.kind == ParamKind.IN and row.get(param.column) not in value:
                return False
            if param.kind == ParamKind.CONTAINS:
                needle = param.contains_format.format(value).lower()
                if needle not in row.get(param.column, "").lower():
                    return False
            if param.kind == ParamKind.RANGE_GTE and row.get(param.column, "") < value:
                return False
            if param.kind == ParamKind.RANGE_LTE and row.get(param.column, "") > value:
                return False
        if not query.soft_deleted_included and is_soft_deleted(row.get(COLUMN_SOFT_DELETED_AT, "")):
            return False
        return True

    async def select(self, query: EntityQuery) -> list[dict[str, str]]:
        self.calls.append("select")
        found = [dict(row) for row in self.rows.values() if self._matches(row, query)]
        if query.has("order_by"):
            found.sort(key=lambda row: row.get(query.order_by, ""), reverse=not query.sort_ascending)
        start = query.offset or 0
        end = start + query.limit if query.has("limit") else None
        found = found[start:end]
        if query.columns:
            found = [{column: row.get(column, "") for column in query.columns} for row in found]
        return found

    async def count(self, query: EntityQuery) -> int:
        self.calls.append("count")
        return sum(1 for row in self.rows.values() if self._matches(row, query))


class FakeVersionRepository(VersionRepository):
    def __init__(self):
        self.snapshots: list[VersionSnapshot] = []
        self.fail_with: Exception | None = None

    async def create(self, snapshot: VersionSnapshot) -> VersionSnapshot:
        if self.fail_with is not None:
            raise self.fail_with
        self.snapshots.append(snapshot)
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
        found = [
            s
            for s in reversed(self.snapshots)
            if s.entity_type == entity_type
            and s.entity_id == entity_id
            and (soft_deleted_included or not s.is_soft_deleted)
        ]
        return found[:limit] if limit is not None else found

    async def find_by_id(self, version_id: str) -> VersionSnapshot | None:
        return next((s for s in self.snapshots if s.id == version_id), None)

    async def delete_by_id(self, version_id: str) -> bool:
        before = len(self.snapshots)
        self.snapshots = [s for s in self.snapshots if s.id != version_id]
        return len(self.snapshots) < before

    async def soft_delete_by_id(self, version_id: str) -> bool:
        snapshot = await self.find_by_id(version_id)
        if snapshot is None:
            return False
        snapshot.soft_deleted_at = "2000-01-01 00:00:00"
        return True


@pytest.fixture
def gateway() -> FakeRowGateway:
    return FakeRowGateway()


@pytest.fixture
def version_repository() -> FakeVersionRepository:
    return FakeVersionRepository()


@pytest.fixture
def make_gateway():
    """Factory for additional gateways (one per table)."""
    return FakeRowGateway
