"""Menu and menu item entities."""

from typing import ClassVar

from cmsstore.domain.columns import (
    COLUMN_MENU_ID,
    COLUMN_PAGE_ID,
    COLUMN_PARENT_ID,
    COLUMN_SEQUENCE,
    COLUMN_SITE_ID,
    COLUMN_TARGET,
    COLUMN_URL,
)
from cmsstore.domain.entities.base import CmsEntity, EntityKind, IntField, TextField


class Menu(CmsEntity):
    kind = EntityKind.MENU
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_SITE_ID: "",
    }

    site_id = TextField(COLUMN_SITE_ID)


class MenuItem(CmsEntity):
    """An entry of a menu; links either to a page or to a free URL.

    Items nest through ``parent_id`` and are ordered by ``sequence``.
    """

    kind = EntityKind.MENU_ITEM
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_MENU_ID: "",
        COLUMN_PARENT_ID: "",
        COLUMN_SEQUENCE: "0",
        COLUMN_PAGE_ID: "",
        COLUMN_URL: "",
        COLUMN_TARGET: "",
    }

    menu_id = TextField(COLUMN_MENU_ID)
    parent_id = TextField(COLUMN_PARENT_ID)
    sequence = IntField(COLUMN_SEQUENCE)
    page_id = TextField(COLUMN_PAGE_ID)
    url = TextField(COLUMN_URL)
    target = TextField(COLUMN_TARGET)
