"""Season selection for a loaded podcast detail."""

import logging

from podexplorer.catalog.models import Episode, PodcastDetail, Season

logger = logging.getLogger(__name__)


class SeasonSelector:
    """Tracks which season of the current detail is selected.

    With no detail attached (or a detail without seasons) nothing is
    selected. Selecting a number the detail does not have is ignored.
    """

    def __init__(self, detail: PodcastDetail | None = None) -> None:
        self.detail: PodcastDetail | None = None
        self.selected: int | None = None
        if detail is not None:
            self.attach(detail)

    def attach(self, detail: PodcastDetail) -> None:
        """Switch to a newly loaded detail and select its first season."""
        self.detail = detail
        self.selected = detail.seasons[0].number if detail.seasons else None

    def clear(self) -> None:
        self.detail = None
        self.selected = None

    @property
    def has_seasons(self) -> bool:
        return self.detail is not None and bool(self.detail.seasons)

    @property
    def season_numbers(self) -> list[int]:
        return self.detail.season_numbers if self.detail else []

    def select(self, number: int) -> bool:
        """Select a season by number.

        Returns:
            True if the selection changed to ``number`` (or already was it),
            False if the current detail has no such season
        """
        if number not in self.season_numbers:
            logger.debug(f"Ignoring selection of unknown season {number}")
            return False
        self.selected = number
        return True

    @property
    def current_season(self) -> Season | None:
        """The selected season, or None when nothing matches."""
        if self.detail is None or self.selected is None:
            return None
        for season in self.detail.seasons:
            if season.number == self.selected:
                return season
        return None

    @property
    def episodes(self) -> list[Episode]:
        season = self.current_season
        return list(season.episodes) if season else []
