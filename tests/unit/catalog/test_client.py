"""Tests for the catalog HTTP client."""

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from podexplorer.catalog.client import CatalogClient, parse_catalog, parse_detail
from podexplorer.utils.errors import MalformedDataError, TransportError

API_BASE_URL = "https://podcast-api.test"


@pytest.fixture
def client(mock_transport: httpx.MockTransport) -> CatalogClient:
    return CatalogClient(API_BASE_URL, timeout=5, transport=mock_transport)


class TestParsing:
    """Tests for payload validation helpers."""

    def test_parse_catalog_rejects_non_list(self) -> None:
        with pytest.raises(MalformedDataError, match="Expected a list"):
            parse_catalog({"podcasts": []})

    def test_parse_catalog_rejects_missing_fields(self) -> None:
        with pytest.raises(MalformedDataError, match="missing required fields"):
            parse_catalog([{"id": "1", "title": "Only a title"}])

    def test_parse_catalog_empty_list(self) -> None:
        assert parse_catalog([]) == []

    def test_parse_detail_rejects_non_object(self) -> None:
        with pytest.raises(MalformedDataError, match="Expected a podcast object"):
            parse_detail([1, 2, 3])

    def test_parse_detail_rejects_missing_title(self, make_detail_payload: Any) -> None:
        payload = make_detail_payload()
        del payload["title"]

        with pytest.raises(MalformedDataError):
            parse_detail(payload)


class TestCatalogClient:
    """Tests for CatalogClient requests."""

    def test_base_url_trailing_slash_is_stripped(self) -> None:
        client = CatalogClient("https://podcast-api.test/")
        assert client.base_url == "https://podcast-api.test"

    @pytest.mark.asyncio
    async def test_fetch_catalog(self, client: CatalogClient) -> None:
        async with client:
            podcasts = await client.fetch_catalog()

        assert len(podcasts) == 20
        assert podcasts[0].title == "Quiet Hours"

    @pytest.mark.asyncio
    async def test_fetch_detail(self, client: CatalogClient) -> None:
        async with client:
            detail = await client.fetch_detail("10716")

        assert detail.id == "10716"
        assert detail.season_numbers == [1, 2]

    @pytest.mark.asyncio
    async def test_fetch_detail_not_found(self, client: CatalogClient) -> None:
        async with client:
            with pytest.raises(TransportError, match="Failed to fetch podcast: 404") as exc:
                await client.fetch_detail("missing")

        assert exc.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error_status(
        self, client: CatalogClient, api_routes: dict[str, Any]
    ) -> None:
        api_routes["/"] = 503

        async with client:
            with pytest.raises(TransportError) as exc:
                await client.fetch_catalog()

        assert exc.value.status_code == 503

    @pytest.mark.asyncio
    async def test_invalid_json(self, client: CatalogClient, api_routes: dict[str, Any]) -> None:
        api_routes["/"] = "<html>maintenance</html>"

        async with client:
            with pytest.raises(MalformedDataError, match="not valid JSON"):
                await client.fetch_catalog()

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = CatalogClient(API_BASE_URL, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(TransportError, match="Failed to connect") as exc:
                await client.fetch_catalog()

        assert exc.value.status_code is None
        assert exc.value.suggestion is not None

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client = CatalogClient(API_BASE_URL, timeout=2, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(TransportError, match="timed out after 2 seconds"):
                await client.fetch_detail("10716")

    @pytest.mark.asyncio
    async def test_requests_detail_path(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(404)

        client = CatalogClient(API_BASE_URL, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(TransportError):
                await client.fetch_detail("abc")

        assert seen == ["/id/abc"]

    @pytest.mark.asyncio
    async def test_detail_id_is_percent_encoded(self) -> None:
        seen: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(404)

        client = CatalogClient(API_BASE_URL, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(TransportError):
                await client.fetch_detail("abc?x=1#frag")

        assert seen[0].raw_path == b"/id/abc%3Fx%3D1%23frag"
        assert seen[0].query == b""

    @pytest.mark.asyncio
    async def test_control_characters_in_id_stay_in_path(self) -> None:
        seen: list[bytes] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.raw_path)
            return httpx.Response(404)

        client = CatalogClient(API_BASE_URL, transport=httpx.MockTransport(handler))

        async with client:
            with pytest.raises(TransportError, match="404"):
                await client.fetch_detail("a\x00b")

        assert seen == [b"/id/a%00b"]

    @pytest.mark.asyncio
    async def test_invalid_url_is_a_transport_error(self, client: CatalogClient) -> None:
        client._client.get = AsyncMock(  # type: ignore[method-assign]
            side_effect=httpx.InvalidURL("Invalid non-printable ASCII character in URL")
        )

        async with client:
            with pytest.raises(TransportError, match="Invalid request URL for podcast"):
                await client.fetch_detail("10716")
