"""Podcast catalog: data models, genre table, API client and store."""

from podexplorer.catalog.client import CatalogClient, parse_catalog, parse_detail
from podexplorer.catalog.genres import GENRES, UNKNOWN_GENRE, find_genre_by_title, genre_title
from podexplorer.catalog.models import Episode, Genre, PodcastDetail, PodcastSummary, Season
from podexplorer.catalog.store import CatalogStore, LoadStatus

__all__ = [
    "CatalogClient",
    "CatalogStore",
    "LoadStatus",
    "parse_catalog",
    "parse_detail",
    "GENRES",
    "UNKNOWN_GENRE",
    "genre_title",
    "find_genre_by_title",
    "Genre",
    "PodcastSummary",
    "PodcastDetail",
    "Season",
    "Episode",
]
