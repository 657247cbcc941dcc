"""Health check endpoint: reports the enabled store features, no database call."""

from fastapi import APIRouter, Request

from cmsstore.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    settings = get_settings()
    store = getattr(request.app.state, "cms_store", None)
    options = store.options if store is not None else None
    return {
        "status": "healthy" if store is not None else "starting",
        "version": settings.app_version,
        "environment": settings.app_env,
        "features": {
            "menus": bool(options and options.menus_enabled),
            "translations": bool(options and options.translations_enabled),
            "versioning": bool(options and options.versioning_enabled),
        },
    }
