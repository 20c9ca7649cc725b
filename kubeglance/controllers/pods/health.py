"""Container health counting and pod readiness diagnosis."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from kubeglance.constants.values import STATUS_COMPLETED
from kubeglance.models.core.pod_info import ContainerStatus, TerminatedState


class ContainerHealth(NamedTuple):
    """Ready/terminated counts and restart total of a container sequence."""

    ready: int = 0
    terminated: int = 0
    restarts: int = 0


def container_health(statuses: Iterable[ContainerStatus]) -> ContainerHealth:
    """Fold container statuses into ready, terminated and restart counts.

    A container counts as terminated whatever its exit code.
    """
    ready = terminated = restarts = 0
    for status in statuses:
        if isinstance(status.state, TerminatedState):
            terminated += 1
        if status.ready:
            ready += 1
        restarts += status.restart_count
    return ContainerHealth(ready=ready, terminated=terminated, restarts=restarts)


def diagnose(phase: str, ready: int, total: int) -> str | None:
    """Return a readiness diagnostic, or None when the pod looks healthy.

    Completed pods are always healthy. Any other pod is healthy only when it
    has containers and all of them are ready.
    """
    if phase == STATUS_COMPLETED:
        return None
    if ready != total or total == 0:
        return f"container ready check failed: {ready} of {total}"
    return None
