"""CMS store: composition root for the per-entity stores, versioning and routing."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from cmsstore.application.interfaces import RowGateway, VersionRepository
from cmsstore.application.services.alias_router import AliasRouter
from cmsstore.application.services.entity_store import EntityStore
from cmsstore.application.services.site_store import SiteStore
from cmsstore.application.services.translation_store import TranslationStore
from cmsstore.application.services.versioning_tracker import VersioningTracker
from cmsstore.domain.entities import (
    ENTITY_CLASSES,
    Block,
    EntityKind,
    Menu,
    MenuItem,
    Page,
    Template,
    VersionSnapshot,
)
from cmsstore.domain.exceptions import ConfigurationError, FeatureDisabledError, PreconditionError
from cmsstore.domain.queries import QUERY_CLASSES

logger = logging.getLogger(__name__)

_MENU_KINDS = (EntityKind.MENU, EntityKind.MENU_ITEM)


@dataclass(frozen=True)
class StoreOptions:
    """Immutable store configuration, validated on construction."""

    block_table_name: str = "cms_block"
    page_table_name: str = "cms_page"
    site_table_name: str = "cms_site"
    template_table_name: str = "cms_template"

    menus_enabled: bool = False
    menu_table_name: str = "cms_menu"
    menu_item_table_name: str = "cms_menu_item"

    translations_enabled: bool = False
    translation_table_name: str = "cms_translation"
    translation_language_default: str = "en"
    translation_languages: Mapping[str, str] = field(default_factory=lambda: {"en": "English"})

    versioning_enabled: bool = False
    version_table_name: str = "cms_version"

    automigrate_enabled: bool = False
    debug_enabled: bool = False
    statement_timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        required = {
            "block_table_name": self.block_table_name,
            "page_table_name": self.page_table_name,
            "site_table_name": self.site_table_name,
            "template_table_name": self.template_table_name,
        }
        if self.menus_enabled:
            required["menu_table_name"] = self.menu_table_name
            required["menu_item_table_name"] = self.menu_item_table_name
        if self.translations_enabled:
            required["translation_table_name"] = self.translation_table_name
        if self.versioning_enabled:
            required["version_table_name"] = self.version_table_name

        for name, value in required.items():
            if not value:
                raise ConfigurationError(f"{name} is required")

        if self.translations_enabled:
            if not self.translation_languages:
                raise ConfigurationError("translation_languages is required")
            if self.translation_language_default not in self.translation_languages:
                raise ConfigurationError(
                    f"translation_language_default '{self.translation_language_default}' "
                    "is not one of translation_languages"
                )

        if self.statement_timeout_seconds is not None and self.statement_timeout_seconds <= 0:
            raise ConfigurationError("statement_timeout_seconds must be positive")

    def table_names(self) -> dict[EntityKind, str]:
        """Table name of every enabled entity kind."""
        names = {
            EntityKind.BLOCK: self.block_table_name,
            EntityKind.PAGE: self.page_table_name,
            EntityKind.SITE: self.site_table_name,
            EntityKind.TEMPLATE: self.template_table_name,
        }
        if self.menus_enabled:
            names[EntityKind.MENU] = self.menu_table_name
            names[EntityKind.MENU_ITEM] = self.menu_item_table_name
        if self.translations_enabled:
            names[EntityKind.TRANSLATION] = self.translation_table_name
        return names


class CmsStore:
    """One store per enabled entity kind, sharing a versioning tracker.

    The row gateways (and the version repository when versioning is on) are
    supplied by the infrastructure layer.
    """

    def __init__(
        self,
        options: StoreOptions,
        gateways: Mapping[EntityKind, RowGateway],
        version_repository: VersionRepository | None = None,
    ):
        self.options = options

        missing = [kind.value for kind in options.table_names() if kind not in gateways]
        if missing:
            raise ConfigurationError(f"no row gateway for: {', '.join(missing)}")
        if options.versioning_enabled and version_repository is None:
            raise ConfigurationError("versioning is enabled but no version repository was given")

        self._version_repository = version_repository if options.versioning_enabled else None
        tracker = (
            VersioningTracker(self._version_repository)
            if self._version_repository is not None
            else None
        )

        self._stores: dict[EntityKind, EntityStore] = {}
        for kind in options.table_names():
            if kind == EntityKind.TRANSLATION:
                store: EntityStore = TranslationStore(
                    gateways[kind],
                    tracker=tracker,
                    statement_timeout=options.statement_timeout_seconds,
                    language_default=options.translation_language_default,
                    languages=dict(options.translation_languages),
                )
            elif kind == EntityKind.SITE:
                store = SiteStore(
                    gateways[kind],
                    tracker=tracker,
                    statement_timeout=options.statement_timeout_seconds,
                )
            else:
                store = EntityStore(
                    ENTITY_CLASSES[kind],
                    QUERY_CLASSES[kind],
                    gateways[kind],
                    tracker=tracker,
                    statement_timeout=options.statement_timeout_seconds,
                )
            self._stores[kind] = store

        self.router = AliasRouter(self.pages, self.sites)
        logger.debug(
            "CMS store ready: %s (versioning %s)",
            ", ".join(kind.value for kind in self._stores),
            "on" if tracker is not None else "off",
        )

    def store(self, kind: EntityKind) -> EntityStore:
        """Store of ``kind``; raises FeatureDisabledError for a disabled feature."""
        if kind not in self._stores:
            feature = "menus" if kind in _MENU_KINDS else "translations"
            raise FeatureDisabledError(feature)
        return self._stores[kind]

    @property
    def blocks(self) -> EntityStore[Block]:
        return self.store(EntityKind.BLOCK)

    @property
    def pages(self) -> EntityStore[Page]:
        return self.store(EntityKind.PAGE)

    @property
    def sites(self) -> SiteStore:
        return self.store(EntityKind.SITE)

    @property
    def templates(self) -> EntityStore[Template]:
        return self.store(EntityKind.TEMPLATE)

    @property
    def menus(self) -> EntityStore[Menu]:
        return self.store(EntityKind.MENU)

    @property
    def menu_items(self) -> EntityStore[MenuItem]:
        return self.store(EntityKind.MENU_ITEM)

    @property
    def translations(self) -> TranslationStore:
        return self.store(EntityKind.TRANSLATION)

    # ── Versioning ───────────────────────────────────────────────────

    def _versions(self) -> VersionRepository:
        if self._version_repository is None:
            raise FeatureDisabledError("versioning")
        return self._version_repository

    async def versioning_list(
        self,
        entity_type: EntityKind | str,
        entity_id: str,
        limit: int | None = None,
        soft_deleted_included: bool = False,
    ) -> list[VersionSnapshot]:
        """Snapshots of one entity, newest first."""
        repository = self._versions()
        if not entity_id:
            raise PreconditionError("entity id is empty")
        if limit is not None and limit < 0:
            raise PreconditionError("limit cannot be negative")
        return await repository.list(
            EntityKind(entity_type).value, entity_id, limit, soft_deleted_included
        )

    async def versioning_find_by_id(self, version_id: str) -> VersionSnapshot | None:
        repository = self._versions()
        if not version_id:
            raise PreconditionError("version id is empty")
        return await repository.find_by_id(version_id)

    async def versioning_delete_by_id(self, version_id: str) -> bool:
        repository = self._versions()
        if not version_id:
            raise PreconditionError("version id is empty")
        return await repository.delete_by_id(version_id)

    async def versioning_soft_delete_by_id(self, version_id: str) -> bool:
        repository = self._versions()
        if not version_id:
            raise PreconditionError("version id is empty")
        return await repository.soft_delete_by_id(version_id)
