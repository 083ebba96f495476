"""Reading and writing the Podcast Explorer config file."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podexplorer.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from podexplorer.config.schema import GlobalConfig
from podexplorer.utils.errors import InvalidConfigError
from podexplorer.utils.paths import get_config_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


class ConfigManager:
    """Owns ``config.yaml`` inside the config directory.

    The file is created with commented defaults the first time it is read.

    Args:
        config_dir: Directory holding the config file. Defaults to the
            platform config dir (or ``PODEXPLORER_CONFIG_DIR``).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.config_file = self.config_dir / CONFIG_FILENAME

    def load_config(self) -> GlobalConfig:
        """Read and validate the config file.

        Raises:
            InvalidConfigError: If the file is not YAML or fails validation
        """
        if not self.config_file.exists():
            logger.debug(f"No config at {self.config_file}; writing defaults")
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG.model_copy()

        data = self._read_yaml()
        try:
            return GlobalConfig.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e.error_count()} bad value(s)",
                suggestion="Fix the file or delete it to restore defaults",
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Write the config back, replacing comments with plain YAML."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            yaml.safe_dump(
                config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False
            )
        logger.debug(f"Saved configuration to {self.config_file}")

    def set_value(self, key: str, value: str) -> GlobalConfig:
        """Set one top-level key from a command-line string and persist it.

        The string goes through the schema, so numbers and enum values are
        converted (or rejected) exactly as when loading the file.

        Raises:
            KeyError: If ``key`` is not a config field
            InvalidConfigError: If the value does not validate
        """
        if key not in GlobalConfig.model_fields:
            raise KeyError(key)

        data = self.load_config().model_dump(mode="json")
        data[key] = value
        try:
            updated = GlobalConfig.model_validate(data)
        except ValidationError as e:
            reason = e.errors()[0]["msg"]
            raise InvalidConfigError(f"Invalid value for {key}: {reason}") from e

        self.save_config(updated)
        return updated

    def _read_yaml(self) -> dict[str, Any]:
        try:
            data = yaml.safe_load(self.config_file.read_text())
        except yaml.YAMLError as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: not valid YAML ({e})",
                suggestion="Fix the file or delete it to restore defaults",
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: expected a mapping of keys",
                suggestion="Fix the file or delete it to restore defaults",
            )
        return data

    def _create_default_config(self) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
