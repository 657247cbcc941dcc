"""CRUD endpoints, generated once per entity kind."""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, status

from cmsstore.application.schemas import CountResponse, EntityResponse, EntityWrite, VersionResponse
from cmsstore.application.services import CmsStore, EntityStore
from cmsstore.domain.entities import CmsEntity, EntityKind
from cmsstore.domain.exceptions import EntityNotFoundError, PreconditionError
from cmsstore.domain.queries import EntityQuery
from cmsstore.infrastructure.dependencies import get_cms_store

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

# Query-string parameters that are not query filters.
_RESERVED_PARAMS = frozenset({"count_only"})


def store_dependency(kind: EntityKind) -> Callable[..., Awaitable[EntityStore]]:
    async def _get_store(cms: CmsStore = Depends(get_cms_store)) -> EntityStore:
        return cms.store(kind)

    return _get_store


def query_from_request(store: EntityStore, request: Request) -> EntityQuery:
    """Build the kind's query from query-string filters.

    List fields accept repeated or comma-separated values.
    """
    query = store.new_query()
    params = request.query_params
    for param in query.params():
        if param.name in _RESERVED_PARAMS or param.name not in params:
            continue
        raw = params.getlist(param.name)
        try:
            if param.value_type is list:
                value: Any = [item for entry in raw for item in entry.split(",")]
            elif param.value_type is bool:
                value = raw[-1].strip().lower() in _TRUE_VALUES
            elif param.value_type is int:
                value = int(raw[-1])
            else:
                value = raw[-1]
        except ValueError as e:
            raise PreconditionError(f"{param.name}: {e}") from e
        setattr(query, param.name, value)
    return query


def apply_fields(entity: CmsEntity, data: dict[str, Any]) -> CmsEntity:
    try:
        return entity.assign(data)
    except (TypeError, ValueError) as e:
        raise PreconditionError(str(e)) from e


def build_entity_router(kind: EntityKind, prefix: str, tag: str) -> APIRouter:
    """Router with list, count, get, create, update, delete and versions for ``kind``."""
    router = APIRouter(prefix=prefix, tags=[tag])
    get_store = store_dependency(kind)

    @router.get("", response_model=list[EntityResponse])
    async def list_entities(
        request: Request,
        store: EntityStore = Depends(get_store),
    ) -> list[EntityResponse]:
        """List entities matching the query-string filters."""
        entities = await store.list(query_from_request(store, request))
        return [EntityResponse.from_entity(entity) for entity in entities]

    @router.get("/count", response_model=CountResponse)
    async def count_entities(
        request: Request,
        store: EntityStore = Depends(get_store),
    ) -> CountResponse:
        return CountResponse(count=await store.count(query_from_request(store, request)))

    @router.get("/{entity_id}", response_model=EntityResponse)
    async def get_entity(
        entity_id: str,
        store: EntityStore = Depends(get_store),
    ) -> EntityResponse:
        entity = await store.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(kind.value, entity_id)
        return EntityResponse.from_entity(entity)

    @router.post("", response_model=EntityResponse, status_code=status.HTTP_201_CREATED)
    async def create_entity(
        body: EntityWrite,
        store: EntityStore = Depends(get_store),
    ) -> EntityResponse:
        entity = apply_fields(store.entity_class(), body.data)
        return EntityResponse.from_entity(await store.create(entity))

    @router.patch("/{entity_id}", response_model=EntityResponse)
    async def update_entity(
        entity_id: str,
        body: EntityWrite,
        store: EntityStore = Depends(get_store),
    ) -> EntityResponse:
        """Write only the given fields."""
        entity = await store.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(kind.value, entity_id)
        apply_fields(entity, body.data)
        return EntityResponse.from_entity(await store.update(entity))

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(
        entity_id: str,
        hard: bool = Query(False, description="Remove the row instead of soft deleting it"),
        store: EntityStore = Depends(get_store),
    ) -> None:
        if hard:
            if not await store.delete_by_id(entity_id):
                raise EntityNotFoundError(kind.value, entity_id)
            return
        await store.soft_delete_by_id(entity_id)

    @router.get("/{entity_id}/versions", response_model=list[VersionResponse])
    async def list_versions(
        entity_id: str,
        limit: int | None = Query(None, ge=0),
        cms: CmsStore = Depends(get_cms_store),
    ) -> list[VersionResponse]:
        """Snapshots of the entity, newest first."""
        snapshots = await cms.versioning_list(kind, entity_id, limit=limit)
        return [VersionResponse.from_snapshot(snapshot) for snapshot in snapshots]

    return router
