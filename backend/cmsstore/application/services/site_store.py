"""Site store: entity store plus lookup by domain name."""

from cmsstore.application.services.entity_store import EntityStore
from cmsstore.domain.entities import Site
from cmsstore.domain.exceptions import PreconditionError
from cmsstore.domain.queries import SiteQuery


class SiteStore(EntityStore[Site]):
    def __init__(self, *args, **kwargs):
        super().__init__(Site, SiteQuery, *args, **kwargs)

    async def find_by_domain_name(self, domain_name: str) -> Site | None:
        """Site whose domain names include ``domain_name`` (case-insensitive, whole entry)."""
        if not domain_name:
            raise PreconditionError("site domain name is empty")
        return await self._find_one(SiteQuery(domain_name=domain_name))
