"""Pod row controllers: status, health, resources, metrics and colors."""

from kubeglance.controllers.pods.colors import (
    is_happy,
    pod_color_category,
    pod_row_style,
    row_color_category,
)
from kubeglance.controllers.pods.health import ContainerHealth, container_health, diagnose
from kubeglance.controllers.pods.metrics import current_usage, gather_pod_metrics
from kubeglance.controllers.pods.parsers import (
    PodConversionError,
    PodMetricsParser,
    PodParser,
)
from kubeglance.controllers.pods.phase import pod_phase
from kubeglance.controllers.pods.renderer import (
    POD_HEADER,
    PodRenderer,
    PodRow,
    PodWithMetrics,
    RowResult,
    map_qos,
)
from kubeglance.controllers.pods.resources import (
    pod_limits,
    pod_requests,
    pod_resource_totals,
)

__all__ = [
    "POD_HEADER",
    "ContainerHealth",
    "PodConversionError",
    "PodMetricsParser",
    "PodParser",
    "PodRenderer",
    "PodRow",
    "PodWithMetrics",
    "RowResult",
    "container_health",
    "current_usage",
    "diagnose",
    "gather_pod_metrics",
    "is_happy",
    "map_qos",
    "pod_color_category",
    "pod_limits",
    "pod_phase",
    "pod_requests",
    "pod_resource_totals",
    "pod_row_style",
    "row_color_category",
]
