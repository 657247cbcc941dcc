"""Column names shared by the entity field maps and the backend tables."""

COLUMN_ALIAS = "alias"
COLUMN_CANONICAL_URL = "canonical_url"
COLUMN_CONTENT = "content"
COLUMN_CREATED_AT = "created_at"
COLUMN_DOMAIN_NAMES = "domain_names"
COLUMN_EDITOR = "editor"
COLUMN_ENTITY_ID = "entity_id"
COLUMN_ENTITY_TYPE = "entity_type"
COLUMN_HANDLE = "handle"
COLUMN_ID = "id"
COLUMN_MEMO = "memo"
COLUMN_MENU_ID = "menu_id"
COLUMN_META_DESCRIPTION = "meta_description"
COLUMN_META_KEYWORDS = "meta_keywords"
COLUMN_META_ROBOTS = "meta_robots"
COLUMN_METAS = "metas"
COLUMN_MIDDLEWARES_AFTER = "middlewares_after"
COLUMN_MIDDLEWARES_BEFORE = "middlewares_before"
COLUMN_NAME = "name"
COLUMN_PAGE_ID = "page_id"
COLUMN_PARENT_ID = "parent_id"
COLUMN_SEQUENCE = "sequence"
COLUMN_SITE_ID = "site_id"
COLUMN_SOFT_DELETED_AT = "soft_deleted_at"
COLUMN_STATUS = "status"
COLUMN_TARGET = "target"
COLUMN_TEMPLATE_ID = "template_id"
COLUMN_TITLE = "title"
COLUMN_TYPE = "type"
COLUMN_UPDATED_AT = "updated_at"
COLUMN_URL = "url"

# Audit columns never take part in versioned content.
AUDIT_COLUMNS = frozenset({COLUMN_CREATED_AT, COLUMN_UPDATED_AT, COLUMN_SOFT_DELETED_AT})

SHARED_COLUMNS = (
    COLUMN_ID,
    COLUMN_STATUS,
    COLUMN_NAME,
    COLUMN_HANDLE,
    COLUMN_MEMO,
    COLUMN_METAS,
    COLUMN_CREATED_AT,
    COLUMN_UPDATED_AT,
    COLUMN_SOFT_DELETED_AT,
)
