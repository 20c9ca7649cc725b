"""Application state and settings models."""

from kubeglance.models.state.app_settings import (
    AppSettings,
    ColorPalette,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubeglance.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "ColorPalette",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
