"""HTTP client for the podcast catalog API."""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from podexplorer.catalog.models import PodcastDetail, PodcastSummary
from podexplorer.utils.errors import MalformedDataError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://podcast-api.netlify.app"
DEFAULT_TIMEOUT = 30.0

_CATALOG_ADAPTER = TypeAdapter(list[PodcastSummary])


def parse_catalog(payload: Any) -> list[PodcastSummary]:
    """Validate a listing payload into podcast summaries.

    Raises:
        MalformedDataError: If the payload is not a list of valid summaries
    """
    if not isinstance(payload, list):
        raise MalformedDataError(
            f"Expected a list of podcasts, got {type(payload).__name__}"
        )
    try:
        return _CATALOG_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise MalformedDataError(
            f"Catalog payload is missing required fields ({e.error_count()} errors)"
        ) from e


def parse_detail(payload: Any) -> PodcastDetail:
    """Validate a detail payload into a podcast record.

    Raises:
        MalformedDataError: If the payload is not a valid podcast record
    """
    if not isinstance(payload, dict):
        raise MalformedDataError(
            f"Expected a podcast object, got {type(payload).__name__}"
        )
    try:
        return PodcastDetail.model_validate(payload)
    except ValidationError as e:
        raise MalformedDataError(
            f"Podcast payload is missing required fields ({e.error_count()} errors)"
        ) from e


class CatalogClient:
    """Fetches the podcast listing and single podcast records.

    Use as an async context manager so the underlying connection pool is
    closed when done:

        async with CatalogClient() as client:
            podcasts = await client.fetch_catalog()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; the listing lives at "/" and details at "/id/<id>"
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to mock the API in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_catalog(self) -> list[PodcastSummary]:
        """Fetch the full podcast listing.

        Raises:
            TransportError: On network failure or non-success status
            MalformedDataError: If the payload does not match the schema
        """
        payload = await self._get_json("/", what="podcasts")
        podcasts = parse_catalog(payload)
        logger.info(f"Fetched {len(podcasts)} podcasts from catalog")
        return podcasts

    async def fetch_detail(self, podcast_id: str) -> PodcastDetail:
        """Fetch one podcast with its seasons and episodes.

        Args:
            podcast_id: Catalog identifier of the podcast

        Raises:
            TransportError: On network failure or non-success status
            MalformedDataError: If the payload does not match the schema
        """
        payload = await self._get_json(f"/id/{quote(podcast_id, safe='')}", what="podcast")
        detail = parse_detail(payload)
        logger.info(f"Fetched podcast {podcast_id} with {detail.season_count} seasons")
        return detail

    async def _get_json(self, path: str, what: str) -> Any:
        """GET a path and decode its JSON body, mapping failures to our errors."""
        logger.debug(f"GET {self.base_url}{path}")
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request for {what} timed out after {self.timeout} seconds"
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Failed to connect to {self.base_url}: {e}",
                suggestion="Check your network connection or the api_base_url setting",
            ) from e
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid request URL for {what}: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Failed to fetch {what}: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedDataError(f"Response for {what} is not valid JSON: {e}") from e
