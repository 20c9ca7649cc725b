"""Pod parser - converts raw pod documents into typed PodInfo models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from kubeglance.models.core.pod_info import (
    ContainerSpec,
    ContainerStatus,
    PodInfo,
    ResourceList,
    RunningState,
    TerminatedState,
    WaitingState,
)
from kubeglance.utils.resource_parser import cpu_millicores, memory_bytes


class PodConversionError(ValueError):
    """Raised when a raw pod or pod metrics document cannot be converted."""


def section(raw: Mapping[str, Any], key: str, owner: str) -> Mapping[str, Any]:
    """Return a nested mapping, treating a missing or null value as empty."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise PodConversionError(
            f"{owner}: expected mapping for {key!r}, but got {type(value).__name__}"
        )
    return value


def entries(raw: Mapping[str, Any], key: str, owner: str) -> list[Mapping[str, Any]]:
    """Return a list of mappings, treating a missing or null value as empty."""
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PodConversionError(
            f"{owner}: expected list for {key!r}, but got {type(value).__name__}"
        )
    for index, entry in enumerate(value):
        if not isinstance(entry, Mapping):
            raise PodConversionError(
                f"{owner}: expected mapping for {key}[{index}], but got {type(entry).__name__}"
            )
    return value


class PodParser:
    """Parses raw pod documents (``kubectl get pod -o json`` shape)."""

    # Checked in this order when a malformed state carries more than one key.
    _STATE_KEYS = ("terminated", "waiting", "running")

    def _parse_resource_list(self, raw: Any, owner: str) -> ResourceList:
        """Parse a requests or limits mapping into a ResourceList."""
        if raw is None:
            return ResourceList()
        if not isinstance(raw, Mapping):
            raise PodConversionError(
                f"{owner}: expected resource mapping, but got {type(raw).__name__}"
            )

        try:
            cpu = cpu_millicores(raw["cpu"]) if "cpu" in raw else None
            memory = memory_bytes(raw["memory"]) if "memory" in raw else None
        except ValueError as exc:
            raise PodConversionError(f"{owner}: {exc}") from exc

        other = tuple(sorted(str(name) for name in raw if name not in ("cpu", "memory")))
        return ResourceList(cpu=cpu, memory=memory, other=other)

    def _parse_container(self, raw: Mapping[str, Any], owner: str) -> ContainerSpec:
        """Parse one container spec entry."""
        name = raw.get("name", "")
        resources = section(raw, "resources", owner)
        return ContainerSpec(
            name=name,
            requests=self._parse_resource_list(resources.get("requests"), f"{owner} requests"),
            limits=self._parse_resource_list(resources.get("limits"), f"{owner} limits"),
        )

    def _parse_state(
        self, raw: Mapping[str, Any], owner: str
    ) -> WaitingState | RunningState | TerminatedState | None:
        """Parse a container state mapping into its tagged variant."""
        state = section(raw, "state", owner)
        for key in self._STATE_KEYS:
            if state.get(key) is None:
                continue
            detail = section(state, key, owner)
            if key == "terminated":
                return TerminatedState(
                    reason=detail.get("reason") or "",
                    exit_code=detail.get("exitCode") or 0,
                    signal=detail.get("signal") or 0,
                )
            if key == "waiting":
                return WaitingState(reason=detail.get("reason") or "")
            return RunningState()
        return None

    def _parse_status(self, raw: Mapping[str, Any], owner: str) -> ContainerStatus:
        """Parse one container status entry."""
        return ContainerStatus(
            name=raw.get("name", ""),
            ready=raw.get("ready") or False,
            restart_count=raw.get("restartCount") or 0,
            state=self._parse_state(raw, owner),
        )

    def parse(self, raw: Any) -> PodInfo:
        """Convert a raw pod document into a PodInfo.

        Args:
            raw: Pod mapping with ``metadata``, ``spec`` and ``status`` sections

        Returns:
            PodInfo object.

        Raises:
            PodConversionError: If the document is malformed or type-mismatched.
        """
        if not isinstance(raw, Mapping):
            raise PodConversionError(f"Expected pod mapping, but got {type(raw).__name__}")

        metadata = section(raw, "metadata", "pod")
        owner = f"pod {metadata.get('namespace', '')}/{metadata.get('name', '')}"
        spec = section(raw, "spec", owner)
        status = section(raw, "status", owner)

        try:
            return PodInfo(
                namespace=metadata.get("namespace") or "",
                name=metadata.get("name"),
                phase=status.get("phase") or "",
                reason=status.get("reason") or "",
                deletion_requested=metadata.get("deletionTimestamp") is not None,
                containers=tuple(
                    self._parse_container(co, f"{owner} container {index}")
                    for index, co in enumerate(entries(spec, "containers", owner))
                ),
                init_containers=tuple(
                    self._parse_container(co, f"{owner} init container {index}")
                    for index, co in enumerate(entries(spec, "initContainers", owner))
                ),
                container_statuses=tuple(
                    self._parse_status(cs, f"{owner} container status {index}")
                    for index, cs in enumerate(entries(status, "containerStatuses", owner))
                ),
                init_container_statuses=tuple(
                    self._parse_status(cs, f"{owner} init container status {index}")
                    for index, cs in enumerate(entries(status, "initContainerStatuses", owner))
                ),
                pod_ip=status.get("podIP") or "",
                node_name=spec.get("nodeName") or "",
                qos_class=status.get("qosClass") or "",
                labels=metadata.get("labels") or {},
                creation_timestamp=metadata.get("creationTimestamp"),
            )
        except ValidationError as exc:
            raise PodConversionError(f"{owner}: {exc}") from exc
