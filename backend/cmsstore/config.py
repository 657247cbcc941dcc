from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "CMS Store API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./cmsstore.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Table names
    block_table_name: str = "cms_block"
    page_table_name: str = "cms_page"
    site_table_name: str = "cms_site"
    template_table_name: str = "cms_template"
    menu_table_name: str = "cms_menu"
    menu_item_table_name: str = "cms_menu_item"
    translation_table_name: str = "cms_translation"
    version_table_name: str = "cms_version"

    # Optional features
    menus_enabled: bool = False
    translations_enabled: bool = False
    versioning_enabled: bool = False

    # Store behaviour
    automigrate_enabled: bool = True
    debug_enabled: bool = False              # Log every compiled statement
    statement_timeout_seconds: float | None = None

    # Translations
    translation_language_default: str = "en"
    translation_languages: dict[str, str] = {"en": "English"}

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine, aiosqlite
    log_level_store: str = "INFO"            # entity stores, versioning, gateways
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
