"""Constants module for kubeglance.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (sentinels, status labels, units)
- defaults.py: Default values for settings
- screens/: Table/column constants
"""

from kubeglance.constants.defaults import (
    CONFIG_ENV_VAR,
    CONFIG_PATH_DEFAULT,
    SHOW_WIDE_COLUMNS_DEFAULT,
)
from kubeglance.constants.enums import (
    ColorCategory,
    QoSClass,
)
from kubeglance.constants.values import (
    MEGABYTE,
    MISSING_VALUE,
    NA_VALUE,
    PORT_FORWARD_MARKER,
    REASON_NODE_LOST,
    STATUS_COMPLETED,
    STATUS_CONTAINER_CREATING,
    STATUS_INITIALIZED,
    STATUS_PENDING,
    STATUS_POD_INITIALIZING,
    STATUS_RUNNING,
    STATUS_TERMINATING,
    STATUS_UNKNOWN,
    ZERO_VALUE,
)

__all__ = [
    # Settings
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "MEGABYTE",
    "MISSING_VALUE",
    # Sentinels
    "NA_VALUE",
    "PORT_FORWARD_MARKER",
    "REASON_NODE_LOST",
    "SHOW_WIDE_COLUMNS_DEFAULT",
    # Status labels
    "STATUS_COMPLETED",
    "STATUS_CONTAINER_CREATING",
    "STATUS_INITIALIZED",
    "STATUS_PENDING",
    "STATUS_POD_INITIALIZING",
    "STATUS_RUNNING",
    "STATUS_TERMINATING",
    "STATUS_UNKNOWN",
    "ZERO_VALUE",
    # Enums
    "ColorCategory",
    "QoSClass",
]
