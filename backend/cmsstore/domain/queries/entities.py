"""Per-entity query classes: the shared fields plus each kind's scoping filters."""

from cmsstore.domain.columns import (
    COLUMN_ALIAS,
    COLUMN_DOMAIN_NAMES,
    COLUMN_HANDLE,
    COLUMN_ID,
    COLUMN_MENU_ID,
    COLUMN_PAGE_ID,
    COLUMN_PARENT_ID,
    COLUMN_SEQUENCE,
    COLUMN_SITE_ID,
    COLUMN_TEMPLATE_ID,
)
from cmsstore.domain.entities import (
    Block,
    EntityKind,
    Menu,
    MenuItem,
    Page,
    Site,
    Template,
    Translation,
)
from cmsstore.domain.queries.base import EntityQuery, ParamKind, QueryParam


class BlockQuery(EntityQuery):
    entity_name = "block"
    allowed_columns = Block.COLUMNS

    site_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_SITE_ID)
    page_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_PAGE_ID)
    parent_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_PARENT_ID)
    template_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_TEMPLATE_ID)
    sequence = QueryParam(ParamKind.EQUALS, int, column=COLUMN_SEQUENCE)


class PageQuery(EntityQuery):
    entity_name = "page"
    allowed_columns = Page.COLUMNS

    site_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_SITE_ID)
    template_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_TEMPLATE_ID)
    alias = QueryParam(ParamKind.EQUALS, str, column=COLUMN_ALIAS)
    alias_like = QueryParam(ParamKind.CONTAINS, str, column=COLUMN_ALIAS)


class SiteQuery(EntityQuery):
    entity_name = "site"
    allowed_columns = Site.COLUMNS

    # Domain names are stored as a JSON array, match the quoted element.
    domain_name = QueryParam(
        ParamKind.CONTAINS, str, column=COLUMN_DOMAIN_NAMES, contains_format='"{}"'
    )


class TemplateQuery(EntityQuery):
    entity_name = "template"
    allowed_columns = Template.COLUMNS

    site_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_SITE_ID)


class MenuQuery(EntityQuery):
    entity_name = "menu"
    allowed_columns = Menu.COLUMNS

    site_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_SITE_ID)


class MenuItemQuery(EntityQuery):
    entity_name = "menu item"
    allowed_columns = MenuItem.COLUMNS

    menu_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_MENU_ID)
    parent_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_PARENT_ID)
    page_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_PAGE_ID)


class TranslationQuery(EntityQuery):
    entity_name = "translation"
    allowed_columns = Translation.COLUMNS

    site_id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_SITE_ID)
    handle_or_id = QueryParam(ParamKind.EQUALS_ANY, str, columns=(COLUMN_HANDLE, COLUMN_ID))


QUERY_CLASSES: dict[EntityKind, type[EntityQuery]] = {
    EntityKind.BLOCK: BlockQuery,
    EntityKind.PAGE: PageQuery,
    EntityKind.SITE: SiteQuery,
    EntityKind.TEMPLATE: TemplateQuery,
    EntityKind.MENU: MenuQuery,
    EntityKind.MENU_ITEM: MenuItemQuery,
    EntityKind.TRANSLATION: TranslationQuery,
}
