"""Abstract remote fetch interface (port) for outbound JSON lookups."""

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

from records_api.domain.result import FetchResult

T = TypeVar("T", bound=BaseModel)


class RecordFetchClient(ABC):
    """Port — defines what the application layer needs from a remote JSON source."""

    @abstractmethod
    async def fetch(self, url: str, schema: type[T]) -> FetchResult[T]:
        """Issue a single GET and decode the JSON body into ``schema``.

        Args:
            url: Fully built request URL.
            schema: Pydantic model describing the expected body.

        Returns:
            ``Ok`` with the decoded model, or ``Err`` carrying an
            UPSTREAM_FAILURE (transport error, timeout, non-2xx status) or a
            DECODE_FAILURE (body is not valid JSON for ``schema``).
        """
        ...
