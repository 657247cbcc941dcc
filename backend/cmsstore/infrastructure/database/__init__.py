from .session import create_engine, create_session_factory, get_async_url
from .store_factory import create_cms_store, store_options_from_settings
from .tables import StoreTables, auto_migrate

__all__ = [
    "create_engine",
    "create_session_factory",
    "get_async_url",
    "create_cms_store",
    "store_options_from_settings",
    "StoreTables",
    "auto_migrate",
]
