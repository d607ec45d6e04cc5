"""Application service (use case) for Record operations.

Composes the record store and the remote fetch client behind one API.
Results from either collaborator are returned unchanged so that callers
see the error exactly as it was produced at its origin.
"""

import logging
from collections.abc import Mapping
from urllib.parse import quote

from records_api.application.interfaces import RecordFetchClient, RecordRepository
from records_api.application.schemas.remote import Volume, VolumeSearchResponse
from records_api.domain.entities import Record
from records_api.domain.exceptions import OperationError
from records_api.domain.result import Err, FetchResult, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_URL_TEMPLATE = "https://www.googleapis.com/books/v1/volumes?q={search}:{term}"


class RecordService:
    """Orchestrates record CRUD and remote lookups. Holds no mutable state."""

    def __init__(
        self,
        repository: RecordRepository,
        fetch_client: RecordFetchClient,
        url_template: str = DEFAULT_URL_TEMPLATE,
    ):
        self._repository = repository
        self._fetch_client = fetch_client
        self._url_template = url_template

    # ── Persistence ──────────────────────────────────────────────────

    async def list_records(
        self,
        *,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Result[list[Record]]:
        return await self._repository.list_all(name=name, skip=skip, limit=limit)

    async def create_record(self, record: Record) -> Result[Record]:
        return await self._repository.create(record)

    async def get_record(self, record_id: str) -> Result[Record]:
        return await self._repository.read(record_id)

    async def update_record(self, record_id: str, record: Record) -> Result[Record]:
        return await self._repository.update(record_id, record)

    async def delete_record(self, record_id: str) -> Result[None]:
        return await self._repository.delete(record_id)

    async def delete_all_records(self) -> Result[None]:
        return await self._repository.delete_all()

    # ── Remote lookups ───────────────────────────────────────────────

    def build_url(self, search_params: Mapping[str, str]) -> Result[str]:
        """Fill the URL template with percent-encoded search parameters.

        A template naming a parameter that was not supplied, or using
        positional fields, yields INVALID_INPUT.
        """
        encoded = {key: quote(str(value), safe="") for key, value in search_params.items()}
        try:
            return Ok(self._url_template.format(**encoded))
        except KeyError as exc:
            return Err(OperationError.invalid_input(f"Missing search parameter {exc}"))
        except (IndexError, ValueError) as exc:
            logger.warning("Malformed remote URL template %r: %s", self._url_template, exc)
            return Err(OperationError.invalid_input("Malformed remote URL template"))

    async def fetch_and_wrap(
        self,
        url_override: str | None = None,
        search_params: Mapping[str, str] | None = None,
    ) -> FetchResult[Record]:
        """Fetch a volume search and wrap its first hit into a Record.

        Client errors are passed through as-is. A search with no hits
        yields NOT_FOUND.
        """
        if url_override is not None:
            url = url_override
        else:
            built = self.build_url(search_params or {})
            if isinstance(built, Err):
                return built
            url = built.value
        logger.debug("Fetching remote volume: %s", url)

        result = await self._fetch_client.fetch(url, VolumeSearchResponse)
        if isinstance(result, Err):
            return result

        if not result.value.items:
            return Err(OperationError.not_found("Remote volume", url))
        return Ok(_volume_to_record(result.value.items[0]))

    async def import_remote(
        self,
        url_override: str | None = None,
        search_params: Mapping[str, str] | None = None,
    ) -> Result[Record]:
        """Fetch a remote volume and store it as a new record."""
        fetched = await self.fetch_and_wrap(url_override, search_params)
        if isinstance(fetched, Err):
            return fetched

        created = await self._repository.create(fetched.value)
        if isinstance(created, Ok):
            logger.info("Imported remote volume as record '%s'", created.value.id)
        return created


def _volume_to_record(volume: Volume) -> Record:
    info = volume.volume_info
    return Record(
        id=volume.id,
        name=info.title,
        description=info.description or "",
        page_count=info.page_count or 0,
    )
