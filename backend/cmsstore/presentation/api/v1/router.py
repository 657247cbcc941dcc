"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from cmsstore.domain.entities import EntityKind
from cmsstore.presentation.api.v1.endpoints.entities import build_entity_router
from cmsstore.presentation.api.v1.endpoints.health import router as health_router
from cmsstore.presentation.api.v1.endpoints.routing import router as routing_router

_ENTITY_ROUTES: list[tuple[EntityKind, str, str]] = [
    (EntityKind.BLOCK, "/blocks", "Blocks"),
    (EntityKind.PAGE, "/pages", "Pages"),
    (EntityKind.SITE, "/sites", "Sites"),
    (EntityKind.TEMPLATE, "/templates", "Templates"),
    (EntityKind.MENU, "/menus", "Menus"),
    (EntityKind.MENU_ITEM, "/menu-items", "Menu Items"),
    (EntityKind.TRANSLATION, "/translations", "Translations"),
]

router = APIRouter(prefix="/v1")
router.include_router(health_router)
# Resolution routes go first so "/pages/resolve" is not read as a page ID.
router.include_router(routing_router)
for kind, prefix, tag in _ENTITY_ROUTES:
    router.include_router(build_entity_router(kind, prefix, tag))
