"""Site entity: the scope every page, block, template and menu belongs to."""

from typing import ClassVar

from cmsstore.domain.columns import COLUMN_DOMAIN_NAMES
from cmsstore.domain.entities.base import CmsEntity, EntityKind, JsonListField


class Site(CmsEntity):
    """A site answers on one or more endpoints.

    An endpoint is a domain, a subdomain or a domain with a path prefix
    (``example.com/blog``).
    """

    kind = EntityKind.SITE
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {
        COLUMN_DOMAIN_NAMES: "[]",
    }

    domain_names = JsonListField(COLUMN_DOMAIN_NAMES)
