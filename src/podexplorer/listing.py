"""Page-level container wiring the catalog store to the query pipeline."""

import logging

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.models import PodcastSummary
from podexplorer.catalog.store import CatalogStore, LoadStatus
from podexplorer.query.pipeline import DEFAULT_PAGE_SIZE, QueryResult, derive
from podexplorer.query.state import QueryState, QueryStore

logger = logging.getLogger(__name__)


class ListingView:
    """Owns the catalog and the shared query, keeping the derived page current.

    Controls mutate ``query``; every change re-runs the pipeline and feeds the
    resulting page count back so the store can clamp ``set_page`` requests.
    """

    def __init__(
        self,
        store: CatalogStore | None = None,
        query: QueryStore | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.store = store or CatalogStore()
        self.query = query or QueryStore()
        self.page_size = page_size
        self._result = derive(self.store.podcasts, self.query.state, page_size)
        self._unsubscribe = self.query.subscribe(self._on_query_change)
        self.query.sync(self._result.total_pages)

    @property
    def result(self) -> QueryResult:
        return self._result

    @property
    def page_items(self) -> tuple[PodcastSummary, ...]:
        return self._result.page_items

    @property
    def total_count(self) -> int:
        return self._result.total_count

    @property
    def total_pages(self) -> int:
        return self._result.total_pages

    @property
    def page(self) -> int:
        return self._result.page

    @property
    def status(self) -> LoadStatus:
        return self.store.status

    @property
    def error(self) -> str | None:
        return self.store.error

    async def load(self, client: CatalogClient) -> bool:
        """Fetch the catalog and re-derive the visible page."""
        loaded = await self.store.load(client)
        self.refresh()
        return loaded

    def refresh(self) -> QueryResult:
        """Re-run the pipeline against the current catalog and query."""
        self._result = derive(self.store.podcasts, self.query.state, self.page_size)
        logger.debug(
            f"Derived page {self._result.page}/{self._result.total_pages} "
            f"({self._result.total_count} matches)"
        )
        self.query.sync(self._result.total_pages)
        return self._result

    def close(self) -> None:
        """Stop listening to the query store."""
        self._unsubscribe()

    def _on_query_change(self, state: QueryState) -> None:
        self.refresh()
