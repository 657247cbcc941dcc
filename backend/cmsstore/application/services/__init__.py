from .alias_router import AliasRouter, alias_to_pattern
from .cms_store import CmsStore, StoreOptions
from .entity_store import EntityStore
from .site_store import SiteStore
from .translation_store import TranslationStore
from .versioning_tracker import VersioningTracker

__all__ = [
    "AliasRouter",
    "alias_to_pattern",
    "CmsStore",
    "StoreOptions",
    "EntityStore",
    "SiteStore",
    "TranslationStore",
    "VersioningTracker",
]
