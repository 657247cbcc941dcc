"""Alias router: resolves request paths to pages and domains to sites.

Page aliases may carry route tokens that stand for one path fragment:

    :any      ([^/]+)        :number   ([0-9]+)
    :num      ([0-9]+)       :numeric  ([0-9-.]+)
    :all      (.*)           :alpha    ([a-zA-Z0-9-_]+)
    :string   ([a-zA-Z]+)

``/blog/:num`` therefore matches ``/blog/42`` but neither ``/blog/abc`` nor
``/blog/42/extra``.

Only the tokens are regex fragments; the rest of an alias is escaped and
matched literally. An alias such as ``/(en|fr)/:num`` thus matches the path
``/(en|fr)/1`` and not ``/en/1``, unlike routers that splice raw aliases into
the pattern.
"""

import logging
import re

from cmsstore.application.services.entity_store import EntityStore
from cmsstore.domain.columns import COLUMN_ALIAS, COLUMN_DOMAIN_NAMES, COLUMN_ID
from cmsstore.domain.entities import EntityStatus, Page, Site
from cmsstore.domain.exceptions import PreconditionError
from cmsstore.domain.queries import PageQuery, SiteQuery

logger = logging.getLogger(__name__)

ALIAS_PATTERNS: dict[str, str] = {
    ":any": "([^/]+)",
    ":num": "([0-9]+)",
    ":all": "(.*)",
    ":string": "([a-zA-Z]+)",
    ":number": "([0-9]+)",
    ":numeric": "([0-9-.]+)",
    ":alpha": "([a-zA-Z0-9-_]+)",
}

# Longest token first so ":numeric" is never read as ":num" + "eric".
_TOKEN_RE = re.compile(
    "|".join(re.escape(token) for token in sorted(ALIAS_PATTERNS, key=len, reverse=True))
)


def alias_to_pattern(alias: str) -> re.Pattern[str] | None:
    """Anchored regex for an alias with route tokens; ``None`` when it has none.

    Text around the tokens is matched literally.
    """
    if _TOKEN_RE.search(alias) is None:
        return None

    parts: list[str] = []
    position = 0
    for match in _TOKEN_RE.finditer(alias):
        parts.append(re.escape(alias[position : match.start()]))
        parts.append(ALIAS_PATTERNS[match.group()])
        position = match.end()
    parts.append(re.escape(alias[position:]))
    return re.compile("^" + "".join(parts) + "$")


class AliasRouter:
    """Read-only lookups over the page and site stores."""

    def __init__(self, pages: EntityStore[Page], sites: EntityStore[Site]):
        self._pages = pages
        self._sites = sites

    async def find_page_by_alias(self, site_id: str, alias: str) -> Page | None:
        """Exact alias, then ``"/" + alias``, then aliases with route tokens."""
        if not site_id:
            raise PreconditionError("site id is empty")

        page = await self._find_page_by_exact_alias(site_id, alias)
        if page is None and not alias.startswith("/"):
            page = await self._find_page_by_exact_alias(site_id, "/" + alias)
        if page is None:
            page = await self.find_page_by_alias_patterns(site_id, alias)
        return page

    async def _find_page_by_exact_alias(self, site_id: str, alias: str) -> Page | None:
        if not alias:
            return None
        pages = await self._pages.list(PageQuery(site_id=site_id, alias=alias, limit=1))
        return pages[0] if pages else None

    async def page_alias_map(self, site_id: str) -> dict[str, str]:
        """Page ID to alias for every live page of the site."""
        pages = await self._pages.list(
            PageQuery(site_id=site_id, columns=[COLUMN_ID, COLUMN_ALIAS])
        )
        return {page.id: page.alias for page in pages}

    async def find_page_by_alias_patterns(self, site_id: str, path: str) -> Page | None:
        """First page, by ascending ID, whose tokenized alias matches ``path``."""
        alias_map = await self.page_alias_map(site_id)

        for page_id in sorted(alias_map):
            pattern = alias_to_pattern(alias_map[page_id])
            if pattern is None:
                continue
            if pattern.match(path):
                logger.debug("Path %r matched alias %r of page %s", path, alias_map[page_id], page_id)
                return await self._pages.find_by_id(page_id)
        return None

    async def find_site_by_domain_and_path(self, domain: str, path: str) -> tuple[Site | None, str]:
        """Active site whose longest endpoint prefixes ``domain + path``.

        Returns the site with the matched endpoint, or ``(None, "")``.
        """
        sites = await self._sites.list(
            SiteQuery(status=EntityStatus.ACTIVE, columns=[COLUMN_ID, COLUMN_DOMAIN_NAMES])
        )

        endpoints: dict[str, Site] = {}
        for site in sites:
            for endpoint in site.domain_names:
                if endpoint:
                    endpoints[endpoint] = site

        page_path = domain + path
        for endpoint in sorted(endpoints, key=lambda value: (-len(value), value)):
            if page_path.startswith(endpoint):
                site = await self._sites.find_by_id(endpoints[endpoint].id)
                return site, endpoint
        return None, ""
