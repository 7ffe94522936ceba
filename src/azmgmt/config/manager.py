"""Configuration loading for azmgmt.

Settings come from, lowest precedence first:

1. Schema defaults (``AppConfig``)
2. ``azmgmt_config.json`` in the config directory, or an explicit file
3. ``AZMGMT_`` prefixed environment variables, nested with ``__``
   (for example ``AZMGMT_POLLING__INTERVAL_SECONDS=5``)
4. Overrides passed by the caller (the CLI flags)
"""

from pathlib import Path
from typing import Any, Optional, Union

from dynaconf import Dynaconf
from pydantic import ValidationError

from azmgmt.config.platform_dirs import get_config_location
from azmgmt.config.schemas.app_schema import AppConfig
from azmgmt.domain.base.exceptions import ConfigurationError

CONFIG_FILENAME = "azmgmt_config.json"
ENV_PREFIX = "AZMGMT"


def _lower_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key).lower(): _lower_keys(item) for key, item in value.items()}
    return value


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        elif value is not None:
            merged[key] = value
    return merged


class ConfigurationManager:
    """Loads raw settings through dynaconf and validates them into ``AppConfig``."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None) -> None:
        self.config_file = Path(config_file) if config_file else get_config_location() / CONFIG_FILENAME
        if config_file and not self.config_file.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_file}",
                {"config_file": str(self.config_file)},
            )
        self._settings = Dynaconf(
            settings_files=[str(self.config_file)],
            envvar_prefix=ENV_PREFIX,
            environments=False,
            load_dotenv=True,
        )
        self._config: Optional[AppConfig] = None

    def raw_settings(self) -> dict[str, Any]:
        """Return the merged file and environment settings for known sections only."""
        try:
            data = _lower_keys(self._settings.as_dict())
        except Exception as e:
            raise ConfigurationError(
                f"Cannot read configuration from {self.config_file}: {e}",
                {"config_file": str(self.config_file)},
            ) from e
        return {key: value for key, value in data.items() if key in AppConfig.model_fields}

    def load(self, overrides: Optional[dict[str, Any]] = None) -> AppConfig:
        """Validate settings plus ``overrides`` and cache the result."""
        data = _deep_merge(self.raw_settings(), _lower_keys(overrides or {}))
        try:
            self._config = AppConfig(**data)
        except ValidationError as e:
            problems = [
                f"{' -> '.join(str(x) for x in error['loc'])}: {error['msg']}" for error in e.errors()
            ]
            raise ConfigurationError(
                f"Invalid configuration in {self.config_file}: {'; '.join(problems)}",
                {"errors": problems},
            ) from e
        return self._config

    def get_config(self) -> AppConfig:
        if self._config is None:
            return self.load()
        return self._config


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> AppConfig:
    """Load and validate the application configuration."""
    return ConfigurationManager(config_file).load(overrides)
