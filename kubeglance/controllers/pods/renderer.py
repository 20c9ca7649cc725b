"""Pod row renderer.

Turns a raw pod document and its optional metrics snapshot into the
fixed-order field list of the pod table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from kubeglance.constants.enums import QoSClass
from kubeglance.constants.screens import pods as cols
from kubeglance.constants.values import NA_VALUE, PORT_FORWARD_MARKER
from kubeglance.controllers.pods.health import container_health, diagnose
from kubeglance.controllers.pods.metrics import gather_pod_metrics
from kubeglance.controllers.pods.parsers import (
    PodConversionError,
    PodMetricsParser,
    PodParser,
)
from kubeglance.controllers.pods.phase import pod_phase
from kubeglance.models.core.header import Header, HeaderColumn
from kubeglance.models.core.resource_quantity import ResourceTotals
from kubeglance.models.state.app_settings import AppSettings
from kubeglance.utils.formatting import (
    as_status,
    map_to_str,
    na,
    to_age,
    to_mb,
    to_mc,
    to_mi,
)

logger = logging.getLogger(__name__)

POD_HEADER = Header(
    (
        HeaderColumn(cols.COL_NAMESPACE),
        HeaderColumn(cols.COL_NAME),
        HeaderColumn(cols.COL_PF),
        HeaderColumn(cols.COL_READY),
        HeaderColumn(cols.COL_RESTARTS, align_right=True),
        HeaderColumn(cols.COL_STATUS),
        HeaderColumn(cols.COL_CPU_RL, align_right=True, metrics=True, wide=True),
        HeaderColumn(cols.COL_MEM_RL, align_right=True, metrics=True, wide=True),
        HeaderColumn(cols.COL_CPU, align_right=True, metrics=True),
        HeaderColumn(cols.COL_MEM, align_right=True, metrics=True),
        HeaderColumn(cols.COL_CPU_PCT_REQ, align_right=True, metrics=True),
        HeaderColumn(cols.COL_MEM_PCT_REQ, align_right=True, metrics=True),
        HeaderColumn(cols.COL_CPU_PCT_LIM, align_right=True, metrics=True),
        HeaderColumn(cols.COL_MEM_PCT_LIM, align_right=True, metrics=True),
        HeaderColumn(cols.COL_IP),
        HeaderColumn(cols.COL_NODE),
        HeaderColumn(cols.COL_QOS, wide=True),
        HeaderColumn(cols.COL_LABELS, wide=True),
        HeaderColumn(cols.COL_VALID, wide=True),
        HeaderColumn(cols.COL_AGE, time=True),
    )
)

_QOS_SHORT_CODES: dict[str, str] = {
    QoSClass.GUARANTEED.value: "GA",
    QoSClass.BURSTABLE.value: "BU",
}


@dataclass(frozen=True)
class PodWithMetrics:
    """A raw pod document and its raw PodMetrics document, if any."""

    raw: Mapping[str, Any]
    metrics: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class PodRow:
    """One rendered pod row."""

    id: str
    fields: tuple[str, ...]


@dataclass
class RowResult:
    """Result wrapper for rendering one row of a batch."""

    success: bool
    row: PodRow | None = None
    error: str | None = None


def map_qos(qos_class: str) -> str:
    """Return the short code of a QoS class; anything unknown is BestEffort."""
    return _QOS_SHORT_CODES.get(qos_class, "BE")


def to_resources_mc(totals: ResourceTotals | None) -> str:
    """Format CPU request:limit in millicores."""
    if totals is None:
        return NA_VALUE
    return f"{to_mc(totals.requests.cpu)}:{to_mc(totals.limits.cpu)}"


def to_resources_mi(totals: ResourceTotals | None) -> str:
    """Format memory request:limit in MiB."""
    if totals is None:
        return NA_VALUE
    return f"{to_mi(to_mb(totals.requests.memory))}:{to_mi(to_mb(totals.limits.memory))}"


class PodRenderer:
    """Renders pods into pod table rows."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._pod_parser = PodParser()
        self._metrics_parser = PodMetricsParser()
        self._settings = settings

    def header(self, wide: bool | None = None) -> Header:
        """Return the pod table header.

        Args:
            wide: Include wide columns; defaults to the ``show_wide_columns``
                setting, or to the full header when no settings were given
        """
        if wide is None:
            wide = self._settings is None or self._settings.show_wide_columns
        return POD_HEADER.visible(wide)

    def render(self, item: PodWithMetrics, now: datetime | None = None) -> PodRow:
        """Render one pod.

        Args:
            item: Raw pod and optional raw metrics documents
            now: Reference time for the age column (defaults to current time)

        Returns:
            PodRow with fields in ``POD_HEADER`` order.

        Raises:
            PodConversionError: If either document cannot be converted.
        """
        if not isinstance(item, PodWithMetrics):
            raise PodConversionError(
                f"Expected PodWithMetrics, but got {type(item).__name__}"
            )

        pod = self._pod_parser.parse(item.raw)
        metrics = self._metrics_parser.parse(item.metrics)

        statuses = pod.container_statuses
        health = container_health(statuses)
        current, totals = gather_pod_metrics(pod, metrics)
        phase = pod_phase(pod)

        return PodRow(
            id=pod.fqn,
            fields=(
                pod.namespace,
                pod.name,
                PORT_FORWARD_MARKER,
                f"{health.ready}/{len(statuses)}",
                str(health.restarts),
                phase,
                to_resources_mc(totals),
                to_resources_mi(totals),
                current.cpu,
                current.mem,
                current.cpu_pct_req,
                current.mem_pct_req,
                current.cpu_pct_lim,
                current.mem_pct_lim,
                na(pod.pod_ip),
                na(pod.node_name),
                map_qos(pod.qos_class),
                map_to_str(pod.labels),
                as_status(diagnose(phase, health.ready, len(statuses))),
                to_age(pod.creation_timestamp, now),
            ),
        )

    def render_rows(
        self, items: Iterable[PodWithMetrics], now: datetime | None = None
    ) -> list[RowResult]:
        """Render a batch of pods, isolating conversion failures per row."""
        results: list[RowResult] = []
        for index, item in enumerate(items):
            try:
                row = self.render(item, now)
            except PodConversionError as exc:
                logger.warning("Skipping pod row %d: %s", index, exc)
                results.append(RowResult(success=False, error=str(exc)))
                continue
            results.append(RowResult(success=True, row=row))
        return results
