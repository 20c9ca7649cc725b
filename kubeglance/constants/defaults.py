"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Palette defaults (one color per ColorCategory)
# ============================================================================

PENDING_COLOR_DEFAULT: Final = "dark_orange"
CREATING_COLOR_DEFAULT: Final = "dodger_blue1"
HIGHLIGHT_COLOR_DEFAULT: Final = "aquamarine1"
COMPLETED_COLOR_DEFAULT: Final = "light_slate_grey"
STANDARD_COLOR_DEFAULT: Final = "light_sky_blue1"
ERROR_COLOR_DEFAULT: Final = "orange_red1"
KILL_COLOR_DEFAULT: Final = "medium_purple"

# ============================================================================
# UI defaults
# ============================================================================

SHOW_WIDE_COLUMNS_DEFAULT: Final = False

# ============================================================================
# Settings location
# ============================================================================

CONFIG_ENV_VAR: Final = "KUBEGLANCE_CONFIG"
CONFIG_PATH_DEFAULT: Final = "~/.config/kubeglance/settings.yaml"

__all__ = [
    "COMPLETED_COLOR_DEFAULT",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "CREATING_COLOR_DEFAULT",
    "ERROR_COLOR_DEFAULT",
    "HIGHLIGHT_COLOR_DEFAULT",
    "KILL_COLOR_DEFAULT",
    "PENDING_COLOR_DEFAULT",
    "SHOW_WIDE_COLUMNS_DEFAULT",
    "STANDARD_COLOR_DEFAULT",
]
