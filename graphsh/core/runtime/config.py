"""Configuration management with hierarchical loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from graphsh.core.paths import get_paths
from graphsh.models.config import AppConfig

logger = logging.getLogger(__name__)

# Fields written back by save_config(); everything else stays at its default
USER_FIELDS = {
    "engine",
    "channel_size",
    "bulk_size",
    "builder_size",
    "prompt",
    "history",
}


class ConfigManager:
    """Manages hierarchical configuration loading and merging."""

    def __init__(self, working_dir: Path | None = None):
        """Initialize config manager.

        Args:
            working_dir: Current working directory (defaults to cwd)
        """
        self.working_dir = working_dir or Path.cwd()
        self._config: AppConfig | None = None

    def load_config(self, overrides: dict[str, Any] | None = None) -> AppConfig:
        """Load and merge configuration from multiple sources.

        Priority (highest to lowest):
        1. Explicit overrides (command-line options)
        2. Local project config (.graphsh/settings.json)
        3. Global user config (~/.graphsh/settings.json)
        4. Default values

        Args:
            overrides: Values that win over every file; None entries are ignored
        """
        config_data: dict = {}

        paths = get_paths(self.working_dir)
        for config_file in (paths.global_settings, paths.project_settings):
            config_data.update(self._read_settings(config_file))

        if overrides:
            config_data.update({k: v for k, v in overrides.items() if v is not None})

        self._config = AppConfig(**config_data)
        return self._config

    def get_config(self) -> AppConfig:
        """Get current config, loading if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config

    def save_config(self, config: AppConfig, global_config: bool = False) -> None:
        """Save configuration to file.

        Args:
            config: Configuration to save
            global_config: If True, save to global config; otherwise save to local project
        """
        paths = get_paths(self.working_dir)
        config_path = paths.global_settings if global_config else paths.project_settings
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {k: v for k, v in config.model_dump().items() if k in USER_FIELDS and v is not None}
        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def _read_settings(config_file: Path) -> dict:
        if not config_file.exists():
            return {}
        with open(config_file) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", config_file)
            return {}
        logger.debug("Loaded settings from %s", config_file)
        return data
