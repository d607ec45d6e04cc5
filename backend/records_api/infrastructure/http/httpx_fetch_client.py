"""Remote fetch client implementing the RecordFetchClient interface.

Issues a single GET per call using httpx and decodes the JSON body into
the pydantic model the caller asks for. No retries and no caching.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from records_api.application.interfaces import RecordFetchClient
from records_api.domain.exceptions import OperationError
from records_api.domain.result import Err, FetchResult, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class HttpxFetchClient(RecordFetchClient):
    """Infrastructure adapter that fetches JSON documents over HTTP.

    An injected ``httpx.AsyncClient`` is reused across calls and left open;
    otherwise a client is created and closed per call.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch(self, url: str, schema: type[T]) -> FetchResult[T]:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(url, headers=self._get_headers())
        except httpx.TimeoutException:
            logger.warning("Remote fetch timed out: %s", url)
            return Err(OperationError.upstream_failure(f"Timed out fetching {url}"))
        except httpx.HTTPError as exc:
            logger.warning("Remote fetch failed: %s (%s)", url, exc)
            return Err(OperationError.upstream_failure(
                f"Could not reach upstream: {type(exc).__name__}"
            ))
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            logger.warning("Remote fetch returned %d: %s", response.status_code, url)
            return Err(OperationError.upstream_failure(
                f"Upstream responded with status {response.status_code}"
            ))

        return self._decode(response, schema)

    def _decode(self, response: httpx.Response, schema: type[T]) -> FetchResult[T]:
        """Parse the response body into ``schema``."""
        try:
            return Ok(schema.model_validate_json(response.content))
        except ValidationError as exc:
            logger.warning(
                "Could not decode upstream body as %s: %d error(s)",
                schema.__name__,
                exc.error_count(),
            )
            return Err(OperationError.decode_failure(
                f"Upstream body is not a valid {schema.__name__}"
            ))
