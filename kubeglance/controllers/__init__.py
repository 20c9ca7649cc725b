"""Controllers module for kubeglance.

This module provides the pod row controllers that turn pod snapshots into
table rows.
"""

from __future__ import annotations

from kubeglance.controllers.pods import (
    POD_HEADER,
    PodConversionError,
    PodRenderer,
    PodRow,
    PodWithMetrics,
    RowResult,
)

__all__ = [
    "POD_HEADER",
    "PodConversionError",
    "PodRenderer",
    "PodRow",
    "PodWithMetrics",
    "RowResult",
]
