"""Data models for the podcast catalog and detail payloads.

Field names follow Python conventions; the API's JSON names are accepted
through aliases (``genres``, ``updated``, ``seasons``, ``season``, ``file``,
``episode``) so payloads validate directly at the fetch boundary.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

logger = logging.getLogger(__name__)

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


class Genre(BaseModel):
    """A catalog genre from the static reference table."""

    model_config = _MODEL_CONFIG

    id: int
    title: str


class Episode(BaseModel):
    """A single episode inside a season."""

    model_config = _MODEL_CONFIG

    title: str
    description: str = ""
    audio_file: HttpUrl | None = Field(default=None, alias="file")
    number: int | None = Field(default=None, alias="episode")

    @field_validator("audio_file", mode="before")
    @classmethod
    def blank_audio_is_missing(cls, value: Any) -> Any:
        """Treat empty audio strings as an absent file."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def has_audio(self) -> bool:
        return self.audio_file is not None


class Season(BaseModel):
    """A season of a podcast with its ordered episodes."""

    model_config = _MODEL_CONFIG

    number: int = Field(alias="season")
    title: str = ""
    image: HttpUrl | None = None
    episodes: list[Episode] = Field(default_factory=list)

    @field_validator("episodes", mode="before")
    @classmethod
    def missing_episodes_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def episode_count(self) -> int:
        return len(self.episodes)


class _PodcastBase(BaseModel):
    """Fields shared by listing summaries and detail records."""

    model_config = _MODEL_CONFIG

    id: str
    title: str
    description: str
    image: HttpUrl
    genre_ids: list[int] = Field(default_factory=list, alias="genres")

    @field_validator("genre_ids", mode="before")
    @classmethod
    def coerce_genres(cls, value: Any) -> Any:
        """Accept a missing genre list and genre titles in place of ids."""
        if value is None:
            return []
        if not isinstance(value, list):
            return value

        # Imported here: the genre table depends on Genre defined above
        from podexplorer.catalog.genres import find_genre_by_title

        ids: list[Any] = []
        for item in value:
            if isinstance(item, str) and not item.strip().isdigit():
                genre = find_genre_by_title(item)
                if genre is None:
                    logger.debug(f"Dropping unknown genre title {item!r}")
                    continue
                ids.append(genre.id)
            else:
                ids.append(item)
        return ids

    def genre_titles(self) -> list[str]:
        """Resolve genre ids to display titles (unknown ids get a placeholder)."""
        from podexplorer.catalog.genres import genre_title

        return [genre_title(genre_id) for genre_id in self.genre_ids]


class PodcastSummary(_PodcastBase):
    """A podcast as returned by the catalog listing."""

    updated_at: datetime = Field(alias="updated")
    season_count: int = Field(alias="seasons", ge=0)


class PodcastDetail(_PodcastBase):
    """A single podcast with its nested seasons and episodes."""

    updated_at: datetime | None = Field(default=None, alias="updated")
    seasons: list[Season] = Field(default_factory=list)

    @field_validator("seasons", mode="before")
    @classmethod
    def missing_seasons_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def season_count(self) -> int:
        return len(self.seasons)

    @property
    def episode_count(self) -> int:
        """Total number of episodes across all seasons."""
        return sum(season.episode_count for season in self.seasons)

    @property
    def season_numbers(self) -> list[int]:
        return [season.number for season in self.seasons]
