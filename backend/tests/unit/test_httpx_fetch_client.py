"""Unit tests for the HttpxFetchClient."""

import httpx
import pytest

from records_api.application.schemas import VolumeSearchResponse
from records_api.domain.exceptions import ErrorKind
from records_api.domain.result import Err, Ok
from records_api.infrastructure.http import HttpxFetchClient

URL = "https://volumes.test/search?q=isbn:123"


# ── Helpers ──


def _volume_body() -> dict:
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "id": "vol-1",
                "etag": "ignored",
                "volumeInfo": {
                    "title": "Dune",
                    "description": "Spice",
                    "pageCount": 412,
                    "authors": ["Frank Herbert"],
                },
            }
        ],
    }


def _client_for(handler) -> HttpxFetchClient:
    return HttpxFetchClient(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_fetch_decodes_body_into_schema():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_volume_body())

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Ok)
    assert result.value.total_items == 1
    assert result.value.items[0].id == "vol-1"
    assert result.value.items[0].volume_info.page_count == 412
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.host == "volumes.test"
    assert seen[0].url.path == "/search"


@pytest.mark.asyncio
async def test_non_success_status_is_upstream_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.UPSTREAM_FAILURE
    assert result.error.status_hint == 502
    assert "503" in result.error.reason


@pytest.mark.asyncio
async def test_transport_error_is_upstream_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.UPSTREAM_FAILURE


@pytest.mark.asyncio
async def test_timeout_is_upstream_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.UPSTREAM_FAILURE
    assert "Timed out" in result.error.reason


@pytest.mark.asyncio
async def test_invalid_json_is_decode_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE_FAILURE
    assert result.error.status_hint == 500


@pytest.mark.asyncio
async def test_wrong_shape_is_decode_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": [{"id": "vol-1"}]})

    result = await _client_for(handler).fetch(URL, VolumeSearchResponse)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DECODE_FAILURE


@pytest.mark.asyncio
async def test_injected_client_is_left_open():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_volume_body())

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxFetchClient(http_client=http_client)

    await client.fetch(URL, VolumeSearchResponse)
    await client.fetch(URL, VolumeSearchResponse)

    assert not http_client.is_closed
    await http_client.aclose()
