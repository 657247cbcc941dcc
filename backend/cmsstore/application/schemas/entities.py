"""Pydantic DTOs (Data Transfer Objects) shared by every entity kind."""

from typing import Any

from pydantic import BaseModel, Field

from cmsstore.domain.entities import CmsEntity, EntityKind, VersionSnapshot


class EntityWrite(BaseModel):
    """Request body for creating or partially updating an entity.

    Keys are column names; values use the typed form of the field (lists for
    middlewares and domain names, maps for metas and translation content,
    integers for sequence).
    """

    data: dict[str, Any] = Field(default_factory=dict, examples=[{"name": "Home", "alias": "/"}])


class EntityResponse(BaseModel):
    """Entity representation returned to clients; ``data`` is the stored row."""

    id: str
    kind: EntityKind
    data: dict[str, str]
    is_active: bool
    is_soft_deleted: bool

    @classmethod
    def from_entity(cls, entity: CmsEntity) -> "EntityResponse":
        return cls(
            id=entity.id,
            kind=entity.kind,
            data=entity.data(),
            is_active=entity.is_active,
            is_soft_deleted=entity.is_soft_deleted,
        )


class CountResponse(BaseModel):
    count: int


class VersionResponse(BaseModel):
    id: str
    entity_type: str
    entity_id: str
    content: str
    created_at: str
    soft_deleted_at: str

    model_config = {"from_attributes": True}

    @classmethod
    def from_snapshot(cls, snapshot: VersionSnapshot) -> "VersionResponse":
        return cls.model_validate(snapshot, from_attributes=True)


class SiteResolution(BaseModel):
    """Site serving a domain and path, with the endpoint that matched."""

    site: EntityResponse | None = None
    endpoint: str = ""
