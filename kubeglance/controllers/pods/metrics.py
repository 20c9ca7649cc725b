"""Pod usage metrics and usage percentages."""

from __future__ import annotations

from kubeglance.controllers.pods.resources import pod_resource_totals
from kubeglance.models.core.pod_info import PodInfo
from kubeglance.models.core.pod_metrics_info import PodMetricsInfo
from kubeglance.models.core.resource_quantity import (
    DisplayMetric,
    ResourceQuantity,
    ResourceTotals,
)
from kubeglance.utils.formatting import to_mb, to_mc, to_mi, to_percentage_str


def current_usage(metrics: PodMetricsInfo | None) -> ResourceQuantity:
    """Sum usage over every container in the snapshot.

    Entries are not matched against the pod's declared containers; the
    snapshot is taken as already scoped to the pod.
    """
    total = ResourceQuantity()
    if metrics is None:
        return total
    for usage in metrics.containers:
        total = total + ResourceQuantity(cpu=usage.cpu, memory=usage.memory)
    return total


def gather_pod_metrics(
    pod: PodInfo, metrics: PodMetricsInfo | None
) -> tuple[DisplayMetric, ResourceTotals | None]:
    """Build display metrics for a pod.

    Args:
        pod: Typed pod descriptor
        metrics: Usage snapshot, or None when the metrics API has no data

    Returns:
        Display metrics and the pod's resource totals. Without a snapshot
        every metric is n/a and the totals are None.
    """
    if metrics is None:
        return DisplayMetric(), None

    usage = current_usage(metrics)
    totals = pod_resource_totals(pod)
    usage_mb = to_mb(usage.memory)
    return (
        DisplayMetric(
            cpu=to_mc(usage.cpu),
            mem=to_mi(usage_mb),
            cpu_pct_req=to_percentage_str(usage.cpu, totals.requests.cpu),
            mem_pct_req=to_percentage_str(usage_mb, to_mb(totals.requests.memory)),
            cpu_pct_lim=to_percentage_str(usage.cpu, totals.limits.cpu),
            mem_pct_lim=to_percentage_str(usage_mb, to_mb(totals.limits.memory)),
        ),
        totals,
    )
