"""Template entity: the layout pages are rendered into."""

from typing import ClassVar

from cmsstore.domain.columns import COLUMN_CONTENT, COLUMN_EDITOR, COLUMN_SITE_ID
from cmsstore.domain.entities.base import CmsEntity, EntityKind, TextField


class Template(CmsEntity):
    kind = EntityKind.TEMPLATE
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_SITE_ID: "",
        COLUMN_CONTENT: "",
        COLUMN_EDITOR: "",
    }

    site_id = TextField(COLUMN_SITE_ID)
    content = TextField(COLUMN_CONTENT)
    editor = TextField(COLUMN_EDITOR)
