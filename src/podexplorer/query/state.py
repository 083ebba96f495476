"""Shared query state: search term, genre filter, sort option and page.

The store is an explicit container passed to every control that reads or
changes the listing query. Mutators are synchronous; listeners run after
each change that actually alters the state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

logger = logging.getLogger(__name__)

ALL_GENRES: Literal["all"] = "all"

GenreFilter = int | Literal["all"]


class SortOption(str, Enum):
    """Available orderings for the podcast listing."""

    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
    UPDATED_NEWEST = "updated-newest"
    UPDATED_OLDEST = "updated-oldest"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.TITLE_ASC: "Title A-Z",
    SortOption.TITLE_DESC: "Title Z-A",
    SortOption.UPDATED_NEWEST: "Newest updated",
    SortOption.UPDATED_OLDEST: "Oldest updated",
}


@dataclass(frozen=True)
class QueryState:
    """Snapshot of the listing query."""

    search_term: str = ""
    genre_filter: GenreFilter = ALL_GENRES
    sort_option: SortOption = SortOption.TITLE_ASC
    page: int = 1


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a page number into ``[1, total_pages]`` (never below 1)."""
    return max(1, min(page, max(1, total_pages)))


QueryListener = Callable[[QueryState], None]


class QueryStore:
    """Mutable holder of the current QueryState.

    Changing the search term, genre filter or sort order returns the page to
    1. ``set_page`` clamps against the page count most recently reported by
    the pipeline through ``sync``.
    """

    def __init__(self, state: QueryState | None = None) -> None:
        self._state = state or QueryState()
        self._total_pages = 1
        self._listeners: list[QueryListener] = []

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def search_term(self) -> str:
        return self._state.search_term

    @property
    def genre_filter(self) -> GenreFilter:
        return self._state.genre_filter

    @property
    def sort_option(self) -> SortOption:
        return self._state.sort_option

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    def subscribe(self, listener: QueryListener) -> Callable[[], None]:
        """Register a listener called with the new state after each change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_search_term(self, term: str) -> None:
        self._update(search_term=term, page=1)

    def set_genre_filter(self, genre: GenreFilter | str) -> None:
        """Filter by a genre id, or pass "all" to clear the filter."""
        self._update(genre_filter=_normalize_genre(genre), page=1)

    def set_sort_option(self, option: SortOption | str) -> None:
        """Change the ordering.

        Raises:
            ValueError: If the option is not a known sort value
        """
        self._update(sort_option=SortOption(option), page=1)

    def set_page(self, page: int) -> None:
        """Move to a page, silently clamping out-of-range requests."""
        self._update(page=clamp_page(page, self._total_pages))

    def next_page(self) -> None:
        self.set_page(self._state.page + 1)

    def previous_page(self) -> None:
        self.set_page(self._state.page - 1)

    def reset(self) -> None:
        """Restore the default query."""
        self._total_pages = 1
        self._set_state(QueryState())

    def sync(self, total_pages: int) -> None:
        """Record the page count of the latest derivation and re-clamp the page."""
        self._total_pages = max(1, total_pages)
        clamped = clamp_page(self._state.page, self._total_pages)
        if clamped != self._state.page:
            logger.debug(f"Clamping page {self._state.page} to {clamped}")
            self._set_state(replace(self._state, page=clamped))

    def _update(self, **changes: object) -> None:
        self._set_state(replace(self._state, **changes))

    def _set_state(self, new_state: QueryState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)


def _normalize_genre(genre: GenreFilter | str) -> GenreFilter:
    if isinstance(genre, bool):
        raise ValueError(f"Invalid genre filter: {genre!r}")
    if isinstance(genre, int):
        return genre
    text = str(genre).strip().lower()
    if text == ALL_GENRES:
        return ALL_GENRES
    try:
        return int(text)
    except ValueError as e:
        raise ValueError(f"Invalid genre filter: {genre!r}") from e
