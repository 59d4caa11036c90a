"""Configuration manager.

Loading order, later entries winning:
    1. schema defaults (AppConfig)
    2. the configuration file (JSON or YAML), when one is given
    3. GOF_PATTERNS_* environment overrides

String values from the file are expanded with expand_env_vars before
validation.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from gofpatterns.config.schemas.app_schema import AppConfig, validate_config
from gofpatterns.config.utils.env_expansion import expand_config_env_vars
from gofpatterns.domain.core.exceptions import ConfigurationError
from gofpatterns.infrastructure.logging.logger import get_logger
from gofpatterns.infrastructure.patterns.lazy_singleton import LazySingleton

CONFIG_PATH_ENV = "GOF_PATTERNS_CONFIG"

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "GOF_PATTERNS_LOG_LEVEL": ("logging", "level"),
    "GOF_PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "GOF_PATTERNS_LOG_FILE": ("logging", "file_path"),
    "GOF_PATTERNS_OUTPUT_FORMAT": ("output", "default_format"),
}

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yml", ".yaml"}


class ConfigurationManager:
    """Loads, validates and caches the application configuration."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional JSON or YAML file; falls back to $GOF_PATTERNS_CONFIG
            environ: Environment mapping for overrides and ${VAR} expansion, os.environ by default
        """
        self._environ = environ if environ is not None else os.environ
        self.config_path = config_path or self._environ.get(CONFIG_PATH_ENV) or None
        self._config: Optional[AppConfig] = None
        self.logger = get_logger(__name__)

    def get_config(self) -> AppConfig:
        """Return the validated configuration, loading it on first call."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        self._config = None
        return self.get_config()

    def load(self) -> AppConfig:
        """
        Build the configuration from file and environment.

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        raw: Dict[str, Any] = {}
        if self.config_path:
            raw = expand_config_env_vars(self._read_file(Path(self.config_path)), self._environ)

        raw = self._apply_env_overrides(raw)
        config = validate_config(raw)
        self.logger.debug(
            "Configuration loaded",
            config_path=self.config_path,
            log_level=config.logging.level.value,
        )
        return config

    def _read_file(self, path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()
        try:
            with path.open("r", encoding="utf-8") as f:
                if suffix in _JSON_SUFFIXES:
                    data = json.load(f)
                elif suffix in _YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported configuration file type '{suffix}'",
                        details={"supported": sorted(_JSON_SUFFIXES | _YAML_SUFFIXES)},
                    )
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data

    def _apply_env_overrides(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(raw)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if not value:
                continue
            section_data = dict(merged.get(section) or {})
            section_data[key] = value
            merged[section] = section_data
            self.logger.debug("Applied environment override", variable=env_name)
        return merged


_default_manager: LazySingleton[ConfigurationManager] = LazySingleton(ConfigurationManager)


def get_config_manager() -> ConfigurationManager:
    """Return the process-wide configuration manager."""
    return _default_manager.get()


def reset_config_manager() -> None:
    """Forget the process-wide manager. Only meant for test isolation."""
    _default_manager.reset()
