"""Utility functions and helpers for Podcast Explorer."""

from podexplorer.utils.errors import (
    CatalogError,
    ConfigError,
    InvalidConfigError,
    MalformedDataError,
    NotFoundError,
    PodExplorerError,
    TransportError,
)
from podexplorer.utils.paths import get_config_dir

__all__ = [
    # Errors
    "PodExplorerError",
    "ConfigError",
    "InvalidConfigError",
    "NotFoundError",
    "CatalogError",
    "TransportError",
    "MalformedDataError",
    # Paths
    "get_config_dir",
]
