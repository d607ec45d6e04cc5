"""Abstract repository interface (port) for Record persistence."""

from abc import ABC, abstractmethod

from records_api.domain.entities import Record
from records_api.domain.result import Result


class RecordRepository(ABC):
    """Port for record persistence, implemented in the infrastructure layer.

    Every operation returns a ``Result``; expected failures (missing id,
    duplicate id, unreachable store) come back as ``Err`` values.
    """

    @abstractmethod
    async def list_all(
        self,
        *,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Result[list[Record]]:
        """Retrieve records; an empty collection is a success."""
        ...

    @abstractmethod
    async def create(self, record: Record) -> Result[Record]:
        """Insert a new record. Fails with CONFLICT if the id is taken."""
        ...

    @abstractmethod
    async def read(self, record_id: str) -> Result[Record]:
        """Retrieve a single record. Fails with NOT_FOUND if absent."""
        ...

    @abstractmethod
    async def update(self, record_id: str, record: Record) -> Result[Record]:
        """Replace the whole record stored at ``record_id``.

        Absent ids fail with NOT_FOUND under the strict policy and are
        created under the upsert policy.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> Result[None]:
        """Remove a record. Absent ids fail with NOT_FOUND unless deletes are idempotent."""
        ...

    @abstractmethod
    async def delete_all(self) -> Result[None]:
        """Empty the collection."""
        ...
