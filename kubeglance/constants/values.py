"""Scalar constants for kubeglance.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Display sentinels
# ============================================================================

NA_VALUE: Final = "n/a"
MISSING_VALUE: Final = "<none>"
ZERO_VALUE: Final = "0"
PORT_FORWARD_MARKER: Final = "●"

# ============================================================================
# Pod status labels
# ============================================================================

STATUS_PENDING: Final = "Pending"
STATUS_RUNNING: Final = "Running"
STATUS_COMPLETED: Final = "Completed"
STATUS_TERMINATING: Final = "Terminating"
STATUS_UNKNOWN: Final = "Unknown"
STATUS_CONTAINER_CREATING: Final = "ContainerCreating"
STATUS_POD_INITIALIZING: Final = "PodInitializing"
STATUS_INITIALIZED: Final = "Initialized"

# Pod status reason set by the node controller when a node stops reporting.
REASON_NODE_LOST: Final = "NodeLost"

# ============================================================================
# Units
# ============================================================================

MEGABYTE: Final = 1024 * 1024

__all__ = [
    "MEGABYTE",
    "MISSING_VALUE",
    "NA_VALUE",
    "PORT_FORWARD_MARKER",
    "REASON_NODE_LOST",
    "STATUS_COMPLETED",
    "STATUS_CONTAINER_CREATING",
    "STATUS_INITIALIZED",
    "STATUS_PENDING",
    "STATUS_POD_INITIALIZING",
    "STATUS_RUNNING",
    "STATUS_TERMINATING",
    "STATUS_UNKNOWN",
    "ZERO_VALUE",
]
