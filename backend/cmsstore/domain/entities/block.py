"""Block entity: a reusable content fragment, optionally attached to a page."""

from typing import ClassVar

from cmsstore.domain.columns import (
    COLUMN_CONTENT,
    COLUMN_EDITOR,
    COLUMN_PAGE_ID,
    COLUMN_PARENT_ID,
    COLUMN_SEQUENCE,
    COLUMN_SITE_ID,
    COLUMN_TEMPLATE_ID,
    COLUMN_TYPE,
)
from cmsstore.domain.entities.base import CmsEntity, EntityKind, IntField, TextField


class Block(CmsEntity):
    kind = EntityKind.BLOCK
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_SITE_ID: "",
        COLUMN_PAGE_ID: "",
        COLUMN_TEMPLATE_ID: "",
        COLUMN_TYPE: "",
        COLUMN_CONTENT: "",
        COLUMN_EDITOR: "",
        COLUMN_PARENT_ID: "",
        COLUMN_SEQUENCE: "0",
    }

    site_id = TextField(COLUMN_SITE_ID)
    page_id = TextField(COLUMN_PAGE_ID)
    template_id = TextField(COLUMN_TEMPLATE_ID)
    type = TextField(COLUMN_TYPE)
    content = TextField(COLUMN_CONTENT)
    editor = TextField(COLUMN_EDITOR)
    parent_id = TextField(COLUMN_PARENT_ID)
    sequence = IntField(COLUMN_SEQUENCE)
