"""All enum definitions for kubeglance.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Kubernetes Enums
# =============================================================================

class QoSClass(Enum):
    """Kubernetes QoS class values."""

    GUARANTEED = "Guaranteed"
    BURSTABLE = "Burstable"
    BEST_EFFORT = "BestEffort"


# =============================================================================
# Display Enums
# =============================================================================

class ColorCategory(Enum):
    """Color categories a pod row can be painted with."""

    PENDING = "pending"
    CREATING = "creating"
    HIGHLIGHT = "highlight"
    COMPLETED = "completed"
    STANDARD = "standard"
    ERROR = "error"
    KILL = "kill"


__all__ = [
    "ColorCategory",
    "QoSClass",
]
