"""Listing query: shared state and the derivation pipeline."""

from podexplorer.query.pipeline import (
    DEFAULT_PAGE_SIZE,
    QueryResult,
    count_pages,
    derive,
    filter_by_genre,
    filter_by_search,
    paginate,
    sort_podcasts,
)
from podexplorer.query.state import (
    ALL_GENRES,
    GenreFilter,
    QueryState,
    QueryStore,
    SortOption,
    clamp_page,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "QueryResult",
    "derive",
    "filter_by_search",
    "filter_by_genre",
    "sort_podcasts",
    "paginate",
    "count_pages",
    "ALL_GENRES",
    "GenreFilter",
    "QueryState",
    "QueryStore",
    "SortOption",
    "clamp_page",
]
