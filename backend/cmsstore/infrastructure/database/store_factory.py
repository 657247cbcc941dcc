"""Builds a CmsStore wired to SQLAlchemy gateways for a given engine."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from cmsstore.application.services import CmsStore, StoreOptions
from cmsstore.config import Settings
from cmsstore.infrastructure.database.repositories import (
    SQLAlchemyRowGateway,
    SQLAlchemyVersionRepository,
)
from cmsstore.infrastructure.database.session import create_session_factory
from cmsstore.infrastructure.database.tables import StoreTables, auto_migrate

logger = logging.getLogger(__name__)


def store_options_from_settings(settings: Settings) -> StoreOptions:
    return StoreOptions(
        block_table_name=settings.block_table_name,
        page_table_name=settings.page_table_name,
        site_table_name=settings.site_table_name,
        template_table_name=settings.template_table_name,
        menus_enabled=settings.menus_enabled,
        menu_table_name=settings.menu_table_name,
        menu_item_table_name=settings.menu_item_table_name,
        translations_enabled=settings.translations_enabled,
        translation_table_name=settings.translation_table_name,
        translation_language_default=settings.translation_language_default,
        translation_languages=dict(settings.translation_languages),
        versioning_enabled=settings.versioning_enabled,
        version_table_name=settings.version_table_name,
        automigrate_enabled=settings.automigrate_enabled,
        debug_enabled=settings.debug_enabled,
        statement_timeout_seconds=settings.statement_timeout_seconds,
    )


async def create_cms_store(engine: AsyncEngine, options: StoreOptions) -> CmsStore:
    """Create the tables of every enabled feature (when auto-migrating) and the store."""
    tables = StoreTables(
        options.table_names(),
        options.version_table_name if options.versioning_enabled else None,
    )
    if options.automigrate_enabled:
        await auto_migrate(engine, tables)

    session_factory = create_session_factory(engine)
    gateways = {
        kind: SQLAlchemyRowGateway(session_factory, table, debug=options.debug_enabled)
        for kind, table in tables.entities.items()
    }
    version_repository = (
        SQLAlchemyVersionRepository(session_factory, tables.versions)
        if tables.versions is not None
        else None
    )
    return CmsStore(options, gateways, version_repository)
