"""Versioning tracker: deduplicated, best-effort snapshots after each mutation."""

import logging

from cmsstore.application.interfaces import VersionRepository
from cmsstore.domain.entities import CmsEntity, VersionSnapshot

logger = logging.getLogger(__name__)


class VersioningTracker:
    """Appends a snapshot whenever an entity's versioned content changes.

    A snapshot failure never fails the mutation that triggered it: errors are
    logged with their traceback and :meth:`track` returns ``None``.
    """

    def __init__(self, repository: VersionRepository):
        self._repository = repository

    async def should_snapshot(self, entity_type: str, entity_id: str, content: str) -> bool:
        latest = await self._repository.find_latest(entity_type, entity_id)
        if latest is None:
            return True
        return latest.content != content

    async def track(self, entity: CmsEntity) -> VersionSnapshot | None:
        """Snapshot ``entity`` unless its kind is unversioned or its content is unchanged."""
        if not entity.kind.versioned:
            return None

        entity_type = entity.kind.value
        try:
            content = entity.to_versioned_content()
            if not await self.should_snapshot(entity_type, entity.id, content):
                logger.debug("Skipping %s %s snapshot: content unchanged", entity_type, entity.id)
                return None
            snapshot = await self._repository.create(
                VersionSnapshot(entity_type=entity_type, entity_id=entity.id, content=content)
            )
        except Exception:
            logger.warning(
                "Versioning of %s %s failed; mutation kept", entity_type, entity.id, exc_info=True
            )
            return None

        logger.debug("Stored %s %s version %s", entity_type, entity.id, snapshot.id)
        return snapshot
