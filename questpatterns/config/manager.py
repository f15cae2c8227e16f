"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "QUESTPATTERNS_"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_FORMAT": ("logging", "format"),
    f"{ENV_PREFIX}RESCUE_REACTION": ("strategy", "rescue_reaction"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, later ones winning:
    - schema defaults
    - a YAML or JSON file (chosen by suffix)
    - environment variable overrides

    The configuration is loaded lazily on first access and validated
    with the pydantic schemas.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

        logger.info("Configuration loaded successfully")
        return app_config

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Read raw configuration from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply QUESTPATTERNS_* environment variables on top of config data."""
        environ = self._environ if self._environ is not None else os.environ
        result = dict(config_data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = environ.get(env_name)
            if value is None:
                continue
            section_data = dict(result.get(section) or {})
            section_data[key] = value
            result[section] = section_data
            logger.debug("Applied environment override %s", env_name)
        return result

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)
