"""In-memory fakes implementing the application ports, shared by the test suites."""

from pydantic import BaseModel

from records_api.application.interfaces import RecordFetchClient, RecordRepository
from records_api.domain.entities import Record
from records_api.domain.exceptions import OperationError
from records_api.domain.policies import DeletePolicy, UpdatePolicy
from records_api.domain.result import Err, FetchResult, Ok, Result


class FakeRecordRepository(RecordRepository):
    """In-memory fake repository for unit testing."""

    def __init__(
        self,
        *,
        update_policy: UpdatePolicy = UpdatePolicy.STRICT,
        delete_policy: DeletePolicy = DeletePolicy.STRICT,
    ):
        self._records: dict[str, Record] = {}
        self._update_policy = update_policy
        self._delete_policy = delete_policy

    async def list_all(
        self,
        *,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Result[list[Record]]:
        records = sorted(self._records.values(), key=lambda r: r.id)
        if name is not None:
            records = [r for r in records if r.name == name]
        return Ok(records[skip : skip + limit])

    async def create(self, record: Record) -> Result[Record]:
        if record.id in self._records:
            return Err(OperationError.conflict("Record", record.id))
        self._records[record.id] = record
        return Ok(record)

    async def read(self, record_id: str) -> Result[Record]:
        if record_id not in self._records:
            return Err(OperationError.not_found("Record", record_id))
        return Ok(self._records[record_id])

    async def update(self, record_id: str, record: Record) -> Result[Record]:
        if record_id not in self._records and self._update_policy is UpdatePolicy.STRICT:
            return Err(OperationError.not_found("Record", record_id))
        self._records[record_id] = record
        return Ok(record)

    async def delete(self, record_id: str) -> Result[None]:
        if record_id not in self._records:
            if self._delete_policy is DeletePolicy.IDEMPOTENT:
                return Ok(None)
            return Err(OperationError.not_found("Record", record_id))
        del self._records[record_id]
        return Ok(None)

    async def delete_all(self) -> Result[None]:
        self._records.clear()
        return Ok(None)


class FakeFetchClient(RecordFetchClient):
    """Fetch client that answers each URL with a preconfigured result."""

    def __init__(self, responses: dict[str, FetchResult] | None = None):
        self._responses = responses or {}
        self.calls: list[tuple[str, type[BaseModel]]] = []

    def respond(self, url: str, result: FetchResult) -> None:
        self._responses[url] = result

    async def fetch(self, url: str, schema: type[BaseModel]) -> FetchResult:
        self.calls.append((url, schema))
        if url not in self._responses:
            return Err(OperationError.upstream_failure(f"No canned response for {url}"))
        return self._responses[url]
