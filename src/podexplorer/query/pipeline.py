"""Pure derivation of the visible podcast page from catalog and query state.

Stages run in a fixed order (search, genre, sort, paginate) so the same
inputs always land the same podcasts on the same page.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from podexplorer.catalog.models import PodcastSummary
from podexplorer.query.state import ALL_GENRES, GenreFilter, QueryState, SortOption, clamp_page
from podexplorer.utils.datetime import ensure_utc

DEFAULT_PAGE_SIZE = 8


@dataclass(frozen=True)
class QueryResult:
    """One derived page of the listing."""

    page_items: tuple[PodcastSummary, ...]
    total_count: int
    total_pages: int
    page: int

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


def filter_by_search(
    podcasts: Iterable[PodcastSummary], term: str
) -> list[PodcastSummary]:
    """Keep podcasts whose title contains the term, ignoring case.

    A blank term matches everything; any other term is matched as given,
    surrounding spaces included.
    """
    if not term.strip():
        return list(podcasts)
    needle = term.casefold()
    return [p for p in podcasts if needle in p.title.casefold()]


def filter_by_genre(
    podcasts: Iterable[PodcastSummary], genre: GenreFilter
) -> list[PodcastSummary]:
    """Keep podcasts tagged with the genre; "all" keeps everything."""
    if genre == ALL_GENRES:
        return list(podcasts)
    return [p for p in podcasts if genre in p.genre_ids]


def sort_podcasts(
    podcasts: Iterable[PodcastSummary], option: SortOption
) -> list[PodcastSummary]:
    """Stable sort; equal keys keep their incoming order."""
    if option == SortOption.TITLE_ASC:
        return sorted(podcasts, key=_title_key)
    if option == SortOption.TITLE_DESC:
        return sorted(podcasts, key=_title_key, reverse=True)
    if option == SortOption.UPDATED_NEWEST:
        return sorted(podcasts, key=_updated_key, reverse=True)
    if option == SortOption.UPDATED_OLDEST:
        return sorted(podcasts, key=_updated_key)
    raise ValueError(f"Unknown sort option: {option!r}")


def count_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items (at least 1)."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return max(1, math.ceil(total_count / page_size))


def paginate(
    podcasts: Sequence[PodcastSummary], page: int, page_size: int
) -> tuple[PodcastSummary, ...]:
    """Slice one page out of an already filtered and sorted sequence."""
    page = clamp_page(page, count_pages(len(podcasts), page_size))
    start = (page - 1) * page_size
    return tuple(podcasts[start : start + page_size])


def derive(
    podcasts: Iterable[PodcastSummary],
    state: QueryState,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> QueryResult:
    """Compute the visible page for the current query.

    Args:
        podcasts: Raw catalog, in the order it was fetched
        state: Current search, genre, sort and page
        page_size: Podcasts per page

    Returns:
        QueryResult with the page's podcasts, the count of all matches, the
        page count and the (clamped) page actually shown
    """
    matches = filter_by_search(podcasts, state.search_term)
    matches = filter_by_genre(matches, state.genre_filter)
    ordered = sort_podcasts(matches, state.sort_option)

    total_pages = count_pages(len(ordered), page_size)
    page = clamp_page(state.page, total_pages)
    return QueryResult(
        page_items=paginate(ordered, page, page_size),
        total_count=len(ordered),
        total_pages=total_pages,
        page=page,
    )


def _title_key(podcast: PodcastSummary) -> str:
    return podcast.title.casefold()


def _updated_key(podcast: PodcastSummary) -> float:
    return ensure_utc(podcast.updated_at).timestamp()
