"""Fixtures running the SQLAlchemy gateways against a temporary SQLite database."""

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from cmsstore.application.services import CmsStore, StoreOptions
from cmsstore.infrastructure.database import create_cms_store, create_engine


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(f"sqlite:///{tmp_path / 'cms.db'}")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def cms_store(engine) -> CmsStore:
    options = StoreOptions(
        menus_enabled=True,
        translations_enabled=True,
        translation_languages={"en": "English", "de": "German"},
        versioning_enabled=True,
        automigrate_enabled=True,
    )
    return await create_cms_store(engine, options)
