"""Unit tests for application settings configuration."""

from pathlib import Path

from cmsstore.config import Settings
from cmsstore.infrastructure.database import get_async_url, store_options_from_settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_feature_flags_and_tables_come_from_environment(monkeypatch):
    monkeypatch.setenv("MENUS_ENABLED", "true")
    monkeypatch.setenv("VERSIONING_ENABLED", "1")
    monkeypatch.setenv("PAGE_TABLE_NAME", "site_pages")
    monkeypatch.setenv("TRANSLATION_LANGUAGES", '{"en": "English", "nl": "Dutch"}')

    settings = Settings(_env_file=None)

    assert settings.menus_enabled is True
    assert settings.versioning_enabled is True
    assert settings.translations_enabled is False
    assert settings.translation_languages == {"en": "English", "nl": "Dutch"}

    options = store_options_from_settings(settings)
    assert options.page_table_name == "site_pages"
    assert options.menus_enabled
    assert options.versioning_enabled


def test_sync_database_urls_are_rewritten_to_async_drivers():
    assert get_async_url("sqlite:///./cms.db") == "sqlite+aiosqlite:///./cms.db"
    assert get_async_url("postgresql://u:p@db/cms") == "postgresql+asyncpg://u:p@db/cms"
    assert get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
