from .base import EntityQuery, ParamKind, QueryParam
from .entities import (
    QUERY_CLASSES,
    BlockQuery,
    MenuItemQuery,
    MenuQuery,
    PageQuery,
    SiteQuery,
    TemplateQuery,
    TranslationQuery,
)

__all__ = [
    "EntityQuery",
    "ParamKind",
    "QueryParam",
    "BlockQuery",
    "PageQuery",
    "SiteQuery",
    "TemplateQuery",
    "MenuQuery",
    "MenuItemQuery",
    "TranslationQuery",
    "QUERY_CLASSES",
]
