"""Shared fixtures for kubeglance tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

RawDict = dict[str, Any]


def _container(name: str, requests: RawDict | None = None, limits: RawDict | None = None) -> RawDict:
    resources: RawDict = {}
    if requests is not None:
        resources["requests"] = requests
    if limits is not None:
        resources["limits"] = limits
    return {"name": name, "image": f"registry.local/{name}:1.0", "resources": resources}


@pytest.fixture
def make_container() -> Callable[..., RawDict]:
    """Factory for raw container spec entries."""
    return _container


@pytest.fixture
def make_raw_pod() -> Callable[..., RawDict]:
    """Factory for raw pod documents shaped like ``kubectl get pod -o json``."""

    def _make(
        name: str = "web-7d9f",
        namespace: str = "default",
        phase: str = "Running",
        containers: list[RawDict] | None = None,
        init_containers: list[RawDict] | None = None,
        container_statuses: list[RawDict] | None = None,
        init_container_statuses: list[RawDict] | None = None,
        **status_fields: Any,
    ) -> RawDict:
        spec: RawDict = {
            "containers": containers if containers is not None else [_container("web")],
            "nodeName": "node-a",
        }
        if init_containers is not None:
            spec["initContainers"] = init_containers
        status: RawDict = {
            "phase": phase,
            "podIP": "10.0.0.12",
            "qosClass": "Burstable",
            "containerStatuses": container_statuses or [],
            **status_fields,
        }
        if init_container_statuses is not None:
            status["initContainerStatuses"] = init_container_statuses
        return {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {
                "name": name,
                "namespace": namespace,
                "labels": {"app": "web", "tier": "frontend"},
                "creationTimestamp": "2024-01-01T00:00:00Z",
            },
            "spec": spec,
            "status": status,
        }

    return _make


@pytest.fixture
def running_status() -> Callable[..., RawDict]:
    """Factory for a ready, running container status."""

    def _make(name: str = "web", ready: bool = True, restart_count: int = 0) -> RawDict:
        return {
            "name": name,
            "ready": ready,
            "restartCount": restart_count,
            "state": {"running": {"startedAt": "2024-01-01T00:00:05Z"}},
        }

    return _make


@pytest.fixture
def now() -> datetime:
    """Fixed reference time, 3h4m after the default pod creation time."""
    return datetime(2024, 1, 1, 3, 4, tzinfo=timezone.utc)
