"""Pod table constants - column names of the pod row."""

from typing import Final

# ============================================================================
# Column names
# ============================================================================

COL_NAMESPACE: Final = "NAMESPACE"
COL_NAME: Final = "NAME"
COL_PF: Final = "PF"
COL_READY: Final = "READY"
COL_RESTARTS: Final = "RESTARTS"
COL_STATUS: Final = "STATUS"
COL_CPU_RL: Final = "CPU(R:L)"
COL_MEM_RL: Final = "MEM(R:L)"
COL_CPU: Final = "CPU"
COL_MEM: Final = "MEM"
COL_CPU_PCT_REQ: Final = "%CPU/R"
COL_MEM_PCT_REQ: Final = "%MEM/R"
COL_CPU_PCT_LIM: Final = "%CPU/L"
COL_MEM_PCT_LIM: Final = "%MEM/L"
COL_IP: Final = "IP"
COL_NODE: Final = "NODE"
COL_QOS: Final = "QOS"
COL_LABELS: Final = "LABELS"
COL_VALID: Final = "VALID"
COL_AGE: Final = "AGE"

__all__ = [
    "COL_AGE",
    "COL_CPU",
    "COL_CPU_PCT_LIM",
    "COL_CPU_PCT_REQ",
    "COL_CPU_RL",
    "COL_IP",
    "COL_LABELS",
    "COL_MEM",
    "COL_MEM_PCT_LIM",
    "COL_MEM_PCT_REQ",
    "COL_MEM_RL",
    "COL_NAME",
    "COL_NAMESPACE",
    "COL_NODE",
    "COL_PF",
    "COL_QOS",
    "COL_READY",
    "COL_RESTARTS",
    "COL_STATUS",
    "COL_VALID",
]
