"""Version snapshot: an immutable capture of an entity's versioned content."""

import uuid
from dataclasses import dataclass, field

from cmsstore.domain.soft_delete import MAX_DATETIME, is_soft_deleted, now_precise_datetime_string


@dataclass
class VersionSnapshot:
    """One entry of the append-only version log of an (entity_type, entity_id) pair."""

    entity_type: str
    entity_id: str
    content: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=now_precise_datetime_string)
    soft_deleted_at: str = MAX_DATETIME

    @property
    def is_soft_deleted(self) -> bool:
        return is_soft_deleted(self.soft_deleted_at)
