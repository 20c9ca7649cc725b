"""Pod metrics parser - converts raw PodMetrics documents into usage snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from kubeglance.controllers.pods.parsers.pod_parser import (
    PodConversionError,
    entries,
    section,
)
from kubeglance.models.core.pod_metrics_info import ContainerUsage, PodMetricsInfo
from kubeglance.utils.resource_parser import cpu_millicores, memory_bytes


class PodMetricsParser:
    """Parses ``metrics.k8s.io/v1beta1`` PodMetrics documents."""

    def _parse_usage(self, raw: Mapping[str, Any], owner: str) -> ContainerUsage:
        usage = section(raw, "usage", owner)
        try:
            cpu = cpu_millicores(usage["cpu"]) if "cpu" in usage else 0
            memory = memory_bytes(usage["memory"]) if "memory" in usage else 0
        except ValueError as exc:
            raise PodConversionError(f"{owner}: {exc}") from exc
        return ContainerUsage(name=raw.get("name", ""), cpu=cpu, memory=memory)

    def parse(self, raw: Any) -> PodMetricsInfo | None:
        """Convert a raw PodMetrics document into a PodMetricsInfo.

        Returns:
            PodMetricsInfo object, or None when no document was supplied.

        Raises:
            PodConversionError: If the document is malformed or type-mismatched.
        """
        if raw is None:
            return None
        if not isinstance(raw, Mapping):
            raise PodConversionError(
                f"Expected pod metrics mapping, but got {type(raw).__name__}"
            )

        metadata = section(raw, "metadata", "pod metrics")
        owner = f"pod metrics {metadata.get('namespace', '')}/{metadata.get('name', '')}"
        try:
            return PodMetricsInfo(
                namespace=metadata.get("namespace") or "",
                name=metadata.get("name") or "",
                containers=tuple(
                    self._parse_usage(co, f"{owner} container {index}")
                    for index, co in enumerate(entries(raw, "containers", owner))
                ),
            )
        except ValidationError as exc:
            raise PodConversionError(f"{owner}: {exc}") from exc
