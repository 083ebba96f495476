"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, HttpUrl

from podexplorer.catalog.client import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from podexplorer.query.pipeline import DEFAULT_PAGE_SIZE
from podexplorer.query.state import SortOption

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
ThemeName = Literal["auto", "dark", "light"]


class GlobalConfig(BaseModel):
    """Global Podcast Explorer configuration."""

    version: str = "1"
    api_base_url: HttpUrl = Field(default=DEFAULT_API_BASE_URL, validate_default=True)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=100)
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)  # seconds
    default_sort: SortOption = SortOption.TITLE_ASC
    log_level: LogLevel = "WARNING"
    theme: ThemeName = "auto"

    @property
    def base_url(self) -> str:
        """API base URL without a trailing slash."""
        return str(self.api_base_url).rstrip("/")
