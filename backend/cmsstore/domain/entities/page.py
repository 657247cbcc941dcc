"""Page entity: a routable document of a site, rendered through a template."""

from enum import Enum
from typing import ClassVar

from cmsstore.domain.columns import (
    COLUMN_ALIAS,
    COLUMN_CANONICAL_URL,
    COLUMN_CONTENT,
    COLUMN_EDITOR,
    COLUMN_META_DESCRIPTION,
    COLUMN_META_KEYWORDS,
    COLUMN_META_ROBOTS,
    COLUMN_MIDDLEWARES_AFTER,
    COLUMN_MIDDLEWARES_BEFORE,
    COLUMN_SITE_ID,
    COLUMN_TEMPLATE_ID,
    COLUMN_TITLE,
)
from cmsstore.domain.entities.base import CmsEntity, EntityKind, ListField, TextField


class PageEditor(str, Enum):
    """Editors a page's content can be authored with."""

    BLOCKAREA = "blockarea"
    BLOCKEDITOR = "blockeditor"
    CODEMIRROR = "codemirror"
    HTMLAREA = "htmlarea"
    MARKDOWN = "markdown"
    TEXTAREA = "textarea"


class Page(CmsEntity):
    """A page is addressed by its alias, which may contain route tokens like ``:num``."""

    kind = EntityKind.PAGE
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_SITE_ID: "",
        COLUMN_TEMPLATE_ID: "",
        COLUMN_TITLE: "",
        COLUMN_ALIAS: "",
        COLUMN_CANONICAL_URL: "",
        COLUMN_CONTENT: "",
        COLUMN_EDITOR: "",
        COLUMN_META_DESCRIPTION: "",
        COLUMN_META_KEYWORDS: "",
        COLUMN_META_ROBOTS: "",
        COLUMN_MIDDLEWARES_BEFORE: "",
        COLUMN_MIDDLEWARES_AFTER: "",
    }

    site_id = TextField(COLUMN_SITE_ID)
    template_id = TextField(COLUMN_TEMPLATE_ID)
    title = TextField(COLUMN_TITLE)
    alias = TextField(COLUMN_ALIAS)
    canonical_url = TextField(COLUMN_CANONICAL_URL)
    content = TextField(COLUMN_CONTENT)
    editor = TextField(COLUMN_EDITOR)
    meta_description = TextField(COLUMN_META_DESCRIPTION)
    meta_keywords = TextField(COLUMN_META_KEYWORDS)
    meta_robots = TextField(COLUMN_META_ROBOTS)
    middlewares_before = ListField(COLUMN_MIDDLEWARES_BEFORE)
    middlewares_after = ListField(COLUMN_MIDDLEWARES_AFTER)
