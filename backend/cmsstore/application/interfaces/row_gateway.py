"""Abstract row gateway (port): string-keyed rows in, string-keyed rows out."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from cmsstore.domain.queries import EntityQuery


class RowGateway(ABC):
    """Port for one entity table, implemented in the infrastructure layer.

    Rows are plain ``{column: str}`` maps; the gateway owns the translation
    between query specifications and backend statements.
    """

    @abstractmethod
    async def insert(self, row: Mapping[str, str]) -> None:
        """Insert one full row."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, changes: Mapping[str, str]) -> int:
        """Write only ``changes`` to the row with ``entity_id``. Returns rows affected."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> int:
        """Physically remove the row. Returns rows affected."""
        ...

    @abstractmethod
    async def select(self, query: EntityQuery) -> list[dict[str, str]]:
        """Rows matching the (already validated) query."""
        ...

    @abstractmethod
    async def count(self, query: EntityQuery) -> int:
        """Number of rows matching the query, paging ignored."""
        ...
