"""Application settings models."""

from pydantic import BaseModel, ConfigDict, field_validator
from rich.color import Color, ColorParseError

from kubeglance.constants.defaults import (
    COMPLETED_COLOR_DEFAULT,
    CREATING_COLOR_DEFAULT,
    ERROR_COLOR_DEFAULT,
    HIGHLIGHT_COLOR_DEFAULT,
    KILL_COLOR_DEFAULT,
    PENDING_COLOR_DEFAULT,
    SHOW_WIDE_COLUMNS_DEFAULT,
    STANDARD_COLOR_DEFAULT,
)
from kubeglance.constants.enums import ColorCategory


class ColorPalette(BaseModel):
    """Color name per row color category.

    Names are anything ``rich`` can parse: named colors, ``#rrggbb`` or
    ``rgb(r,g,b)``.
    """

    model_config = ConfigDict(frozen=True)

    pending: str = PENDING_COLOR_DEFAULT
    creating: str = CREATING_COLOR_DEFAULT
    highlight: str = HIGHLIGHT_COLOR_DEFAULT
    completed: str = COMPLETED_COLOR_DEFAULT
    standard: str = STANDARD_COLOR_DEFAULT
    error: str = ERROR_COLOR_DEFAULT
    kill: str = KILL_COLOR_DEFAULT

    @field_validator("*")
    @classmethod
    def _check_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as exc:
            raise ValueError(f"unknown color {value!r}") from exc
        return value

    def color_for(self, category: ColorCategory) -> str:
        """Return the color name configured for a category."""
        return getattr(self, category.value)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # UI preferences
    show_wide_columns: bool = SHOW_WIDE_COLUMNS_DEFAULT

    # Row colors
    palette: ColorPalette = ColorPalette()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
