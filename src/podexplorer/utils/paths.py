"""XDG-compliant paths for Podcast Explorer files."""

import os
from pathlib import Path

import platformdirs

APP_NAME = "podexplorer"

# Overrides the platform config directory (useful for tests and portable setups)
CONFIG_DIR_ENV = "PODEXPLORER_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to the config directory (not created)
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir(APP_NAME))
