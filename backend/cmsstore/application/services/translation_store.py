"""Translation store: entity store plus handle-or-ID lookup and language settings."""

from cmsstore.application.services.entity_store import EntityStore
from cmsstore.domain.entities import Translation
from cmsstore.domain.exceptions import PreconditionError
from cmsstore.domain.queries import TranslationQuery


class TranslationStore(EntityStore[Translation]):
    def __init__(
        self,
        *args,
        language_default: str = "en",
        languages: dict[str, str] | None = None,
        **kwargs,
    ):
        super().__init__(Translation, TranslationQuery, *args, **kwargs)
        self.language_default = language_default
        self.languages = dict(languages or {language_default: language_default})

    async def find_by_handle_or_id(self, handle_or_id: str, language: str = "") -> Translation | None:
        """Translation whose handle or ID equals ``handle_or_id``.

        ``language`` only checks that the language is configured; the returned
        translation carries every language.
        """
        if not handle_or_id:
            raise PreconditionError("translation handle or id is empty")
        if language and language not in self.languages:
            raise PreconditionError(f"translation language '{language}' is not configured")
        return await self._find_one(TranslationQuery(handle_or_id=handle_or_id))

    async def text(self, handle_or_id: str, language: str = "") -> str:
        """Text of a translation in ``language``, falling back to the default language."""
        translation = await self.find_by_handle_or_id(handle_or_id, language)
        if translation is None:
            return ""
        return translation.content_for(language or self.language_default, self.language_default)
