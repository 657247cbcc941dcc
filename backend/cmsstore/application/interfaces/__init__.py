from .row_gateway import RowGateway
from .version_repository import VersionRepository

__all__ = [
    "RowGateway",
    "VersionRepository",
]
