"""Loader for a single podcast's detail record.

Each ``load`` supersedes the previous one. Completions are matched against
the request token captured when they were issued; a response for a request
that is no longer current is dropped instead of being applied.
"""

import itertools
import logging

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.models import PodcastDetail
from podexplorer.catalog.store import LoadStatus
from podexplorer.utils.errors import CatalogError

logger = logging.getLogger(__name__)


class DetailLoader:
    """State machine: idle -> loading -> ready(detail) | failed(reason)."""

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.status = LoadStatus.IDLE
        self.detail: PodcastDetail | None = None
        self.error: str | None = None
        self.current_id: str | None = None
        self._tokens = itertools.count(1)
        self._current_token = 0

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY

    async def load(self, podcast_id: str) -> PodcastDetail | None:
        """Fetch a podcast and apply it if the request is still current.

        Args:
            podcast_id: Catalog identifier of the podcast

        Returns:
            The detail record, or None if the fetch failed or a newer
            request superseded this one
        """
        token = next(self._tokens)
        self._current_token = token
        self.current_id = podcast_id
        self.status = LoadStatus.LOADING
        self.detail = None
        self.error = None

        try:
            detail = await self.client.fetch_detail(podcast_id)
        except CatalogError as e:
            if not self._is_current(token, podcast_id):
                logger.debug(f"Ignoring failure of stale request for podcast {podcast_id}")
                return None
            logger.warning(f"Failed to load podcast {podcast_id}: {e}")
            self.status = LoadStatus.FAILED
            self.error = str(e)
            return None

        if not self._is_current(token, podcast_id):
            logger.debug(f"Discarding stale response for podcast {podcast_id}")
            return None

        self.status = LoadStatus.READY
        self.detail = detail
        return detail

    def reset(self) -> None:
        """Return to idle and invalidate any request still in flight."""
        self._current_token = next(self._tokens)
        self.current_id = None
        self.status = LoadStatus.IDLE
        self.detail = None
        self.error = None

    def _is_current(self, token: int, podcast_id: str) -> bool:
        return token == self._current_token and podcast_id == self.current_id
