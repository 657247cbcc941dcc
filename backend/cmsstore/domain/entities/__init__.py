from .record import ChangeTrackingRecord
from .base import CmsEntity, EntityKind, EntityStatus
from .block import Block
from .page import Page, PageEditor
from .site import Site
from .template import Template
from .menu import Menu, MenuItem
from .translation import Translation
from .version import VersionSnapshot

ENTITY_CLASSES: dict[EntityKind, type[CmsEntity]] = {
    EntityKind.BLOCK: Block,
    EntityKind.PAGE: Page,
    EntityKind.SITE: Site,
    EntityKind.TEMPLATE: Template,
    EntityKind.MENU: Menu,
    EntityKind.MENU_ITEM: MenuItem,
    EntityKind.TRANSLATION: Translation,
}

__all__ = [
    "ChangeTrackingRecord",
    "CmsEntity",
    "EntityKind",
    "EntityStatus",
    "Block",
    "Page",
    "PageEditor",
    "Site",
    "Template",
    "Menu",
    "MenuItem",
    "Translation",
    "VersionSnapshot",
    "ENTITY_CLASSES",
]
