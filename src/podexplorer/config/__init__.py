"""Configuration management for Podcast Explorer."""

from podexplorer.config.manager import ConfigManager
from podexplorer.config.schema import GlobalConfig

__all__ = ["ConfigManager", "GlobalConfig"]
