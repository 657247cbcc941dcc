"""FastAPI dependency injection: wires infrastructure to application layer."""

from fastapi import HTTPException, Request, status

from cmsstore.application.services import CmsStore


async def get_cms_store(request: Request) -> CmsStore:
    """Provides the CmsStore built during application startup."""
    store: CmsStore | None = getattr(request.app.state, "cms_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="CMS store is not initialized",
        )
    return store
