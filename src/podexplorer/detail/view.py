"""Detail-level container combining the loader and the season selector."""

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.models import PodcastDetail
from podexplorer.detail.loader import DetailLoader
from podexplorer.detail.seasons import SeasonSelector


class DetailView:
    """State for one podcast page; discarded when navigating away."""

    def __init__(self, client: CatalogClient) -> None:
        self.loader = DetailLoader(client)
        self.seasons = SeasonSelector()

    async def open(self, podcast_id: str) -> PodcastDetail | None:
        """Load a podcast and select its first season once it is ready."""
        self.seasons.clear()
        detail = await self.loader.load(podcast_id)
        if detail is not None:
            self.seasons.attach(detail)
        return detail

    def select_season(self, number: int) -> bool:
        return self.seasons.select(number)

    def close(self) -> None:
        self.loader.reset()
        self.seasons.clear()
