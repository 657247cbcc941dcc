"""Abstract version repository (port) for the append-only snapshot log."""

from abc import ABC, abstractmethod

from cmsstore.domain.entities import VersionSnapshot


class VersionRepository(ABC):
    """Port for version snapshot persistence."""

    @abstractmethod
    async def create(self, snapshot: VersionSnapshot) -> VersionSnapshot:
        ...

    @abstractmethod
    async def find_latest(self, entity_type: str, entity_id: str) -> VersionSnapshot | None:
        """Most recent live snapshot of the entity, if any."""
        ...

    @abstractmethod
    async def list(
        self,
        entity_type: str,
        entity_id: str,
        limit: int | None = None,
        soft_deleted_included: bool = False,
    ) -> list[VersionSnapshot]:
        """Snapshots of the entity, newest first."""
        ...

    @abstractmethod
    async def find_by_id(self, version_id: str) -> VersionSnapshot | None:
        ...

    @abstractmethod
    async def delete_by_id(self, version_id: str) -> bool:
        """Physically remove a snapshot. Returns True if one was removed."""
        ...

    @abstractmethod
    async def soft_delete_by_id(self, version_id: str) -> bool:
        ...
