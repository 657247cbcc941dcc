from .row_gateway import SQLAlchemyRowGateway
from .version_repository import SQLAlchemyVersionRepository

__all__ = [
    "SQLAlchemyRowGateway",
    "SQLAlchemyVersionRepository",
]
