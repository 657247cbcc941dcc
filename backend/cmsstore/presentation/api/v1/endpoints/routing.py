"""Route resolution endpoints: path to page, domain to site, handle to translation."""

from fastapi import APIRouter, Depends, Query

from cmsstore.application.schemas import EntityResponse, SiteResolution
from cmsstore.application.services import CmsStore
from cmsstore.domain.exceptions import EntityNotFoundError
from cmsstore.infrastructure.dependencies import get_cms_store

router = APIRouter(tags=["Routing"])


@router.get("/pages/resolve", response_model=EntityResponse)
async def resolve_page(
    site_id: str = Query(..., min_length=1),
    path: str = Query(...),
    cms: CmsStore = Depends(get_cms_store),
) -> EntityResponse:
    """Page of the site whose alias (exact or with route tokens) matches ``path``."""
    page = await cms.router.find_page_by_alias(site_id, path)
    if page is None:
        raise EntityNotFoundError("page", path)
    return EntityResponse.from_entity(page)


@router.get("/sites/resolve", response_model=SiteResolution)
async def resolve_site(
    domain: str = Query(..., min_length=1),
    path: str = Query("/"),
    cms: CmsStore = Depends(get_cms_store),
) -> SiteResolution:
    site, endpoint = await cms.router.find_site_by_domain_and_path(domain, path)
    if site is None:
        return SiteResolution()
    return SiteResolution(site=EntityResponse.from_entity(site), endpoint=endpoint)


@router.get("/translations/lookup/{handle_or_id}", response_model=EntityResponse)
async def lookup_translation(
    handle_or_id: str,
    language: str = Query(""),
    cms: CmsStore = Depends(get_cms_store),
) -> EntityResponse:
    translation = await cms.translations.find_by_handle_or_id(handle_or_id, language)
    if translation is None:
        raise EntityNotFoundError("translation", handle_or_id)
    return EntityResponse.from_entity(translation)
