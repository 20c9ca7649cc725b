"""Core pod models."""

from kubeglance.models.core.pod_info import (
    ContainerSpec,
    ContainerState,
    ContainerStatus,
    PodInfo,
    ResourceList,
    RunningState,
    TerminatedState,
    WaitingState,
)
from kubeglance.models.core.pod_metrics_info import ContainerUsage, PodMetricsInfo
from kubeglance.models.core.resource_quantity import (
    DisplayMetric,
    ResourceQuantity,
    ResourceTotals,
)

__all__ = [
    "ContainerSpec",
    "ContainerState",
    "ContainerStatus",
    "ContainerUsage",
    "DisplayMetric",
    "PodInfo",
    "PodMetricsInfo",
    "ResourceList",
    "ResourceQuantity",
    "ResourceTotals",
    "RunningState",
    "TerminatedState",
    "WaitingState",
]
