"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubeglance.constants.defaults import CONFIG_ENV_VAR, CONFIG_PATH_DEFAULT
from kubeglance.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves ``AppSettings`` as YAML."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings file path, honoring ``$KUBEGLANCE_CONFIG``."""
        return Path(os.environ.get(CONFIG_ENV_VAR) or CONFIG_PATH_DEFAULT).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings from disk.

        A missing file yields default settings.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                or does not validate.
        """
        settings_path = path or cls.config_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings from {settings_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings in {settings_path} must be a mapping")

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

        logger.info("Loaded settings from %s", settings_path)
        return settings

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> AppSettings:
        """Load settings, falling back to defaults on any load error."""
        try:
            return cls.load(path)
        except ConfigLoadError as exc:
            logger.warning("Falling back to default settings: %s", exc)
            return AppSettings()

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk and return the path written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = path or cls.config_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(
                yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write settings to {settings_path}: {exc}") from exc

        logger.debug("Saved settings to %s", settings_path)
        return settings_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
