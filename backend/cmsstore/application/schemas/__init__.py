from .entities import CountResponse, EntityResponse, EntityWrite, SiteResolution, VersionResponse

__all__ = [
    "CountResponse",
    "EntityResponse",
    "EntityWrite",
    "SiteResolution",
    "VersionResponse",
]
