"""Translation entity: one phrase with its text per language code."""

from typing import ClassVar

from cmsstore.domain.columns import COLUMN_CONTENT, COLUMN_SITE_ID
from cmsstore.domain.entities.base import CmsEntity, EntityKind, JsonMapField, TextField


class Translation(CmsEntity):
    kind = EntityKind.TRANSLATION
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_SITE_ID: "",
        COLUMN_CONTENT: "{}",
    }

    site_id = TextField(COLUMN_SITE_ID)
    content = JsonMapField(COLUMN_CONTENT)

    def content_for(self, language: str, fallback_language: str = "") -> str:
        """Text for ``language``, else for ``fallback_language``, else empty."""
        content = self.content
        if content.get(language):
            return content[language]
        if fallback_language:
            return content.get(fallback_language, "")
        return ""
