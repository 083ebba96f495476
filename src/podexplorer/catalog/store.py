"""Catalog store holding the raw podcast listing."""

import logging
from enum import Enum

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.models import PodcastSummary
from podexplorer.utils.errors import CatalogError

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Lifecycle of an asynchronous fetch."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class CatalogStore:
    """Holds the fetched catalog and exposes it unmodified.

    A successful load replaces the contents entirely. A failed load clears
    them and records the reason in ``error``; fetch errors never propagate
    out of ``load``.
    """

    def __init__(self, podcasts: list[PodcastSummary] | None = None) -> None:
        self._podcasts: tuple[PodcastSummary, ...] = tuple(podcasts or ())
        self.status = LoadStatus.READY if podcasts is not None else LoadStatus.IDLE
        self.error: str | None = None

    @property
    def podcasts(self) -> tuple[PodcastSummary, ...]:
        return self._podcasts

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    def replace(self, podcasts: list[PodcastSummary]) -> None:
        """Replace the stored catalog with a freshly fetched one."""
        self._podcasts = tuple(podcasts)
        self.status = LoadStatus.READY
        self.error = None

    def fail(self, reason: str) -> None:
        """Record a failed fetch; stale podcasts are not kept next to an error."""
        self._podcasts = ()
        self.status = LoadStatus.FAILED
        self.error = reason

    async def load(self, client: CatalogClient) -> bool:
        """Fetch the catalog and store the result.

        Args:
            client: Client used for the listing request

        Returns:
            True if the catalog was loaded, False if the fetch failed
        """
        self.status = LoadStatus.LOADING
        self.error = None
        try:
            podcasts = await client.fetch_catalog()
        except CatalogError as e:
            logger.warning(f"Catalog fetch failed: {e}")
            self.fail(str(e))
            return False

        self.replace(podcasts)
        return True
