"""
Config loader - discovers and loads build configs.

Configs can come from:
1. Built-in library (shipped with package)
2. Project configs (user's project/tokens-config directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.models.config import BuildConfig, ConfigMetadata

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Discovers and loads build configs.

    Configs are loaded from YAML files in the library and project directories.
    Project configs override library configs with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the config loader.

        Args:
            library_path: Path to built-in config library
            project_path: Path to project configs directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, BuildConfig] = {}

    def list_configs(self) -> list[ConfigMetadata]:
        """
        List all available configs.

        Returns configs from both library and project, with project
        configs taking precedence.
        """
        configs: dict[str, ConfigMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                config = self._load_config_file(path)
                if config:
                    configs[config.name] = ConfigMetadata.from_config(config)

        return sorted(configs.values(), key=lambda m: m.name)

    def get_config(self, name: str) -> BuildConfig | None:
        """
        Get a config by name.

        Project configs take precedence over library configs.

        Args:
            name: Config name

        Returns:
            BuildConfig if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            config_file = directory / f"{name}.yaml"
            if config_file.exists():
                config = self._load_config_file(config_file)
                if config:
                    self._cache[name] = config
                    return config

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library config to the project for customization.

        Args:
            name: Config name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.CONFIG_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        self._cache.pop(name, None)

        return dest_file

    def save_config(self, config: BuildConfig) -> Path:
        """Write a config into the project directory."""
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{config.name}.yaml"
        path.write_text(yaml.safe_dump(config.to_yaml_dict(), sort_keys=False))
        self._cache[config.name] = config
        return path

    def _load_config_file(self, path: Path) -> BuildConfig | None:
        """Load a config from a YAML file; unreadable files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_config(data or {}, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning("Skipping invalid config file: %s", path, exc_info=True)
            return None

    def _parse_config(self, data: dict[str, Any], default_name: str) -> BuildConfig:
        """Parse a config from YAML data."""
        data = dict(data)
        data.setdefault("name", default_name)
        return BuildConfig.model_validate(data)

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
