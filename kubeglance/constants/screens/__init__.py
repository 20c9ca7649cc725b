"""Table-specific constants."""

from kubeglance.constants.screens.pods import (
    COL_STATUS,
    COL_VALID,
)

__all__ = [
    "COL_STATUS",
    "COL_VALID",
]
