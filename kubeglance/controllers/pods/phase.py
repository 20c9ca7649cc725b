"""Pod phase derivation.

The displayed status follows kubectl's STATUS column: the pod phase or
reason, overridden by the first failing or pending init container, then by
regular container states, and finally by deletion.
"""

from __future__ import annotations

from kubeglance.constants.values import (
    REASON_NODE_LOST,
    STATUS_COMPLETED,
    STATUS_POD_INITIALIZING,
    STATUS_RUNNING,
    STATUS_TERMINATING,
    STATUS_UNKNOWN,
)
from kubeglance.models.core.pod_info import (
    ContainerStatus,
    PodInfo,
    RunningState,
    TerminatedState,
    WaitingState,
)


def init_container_label(status: ContainerStatus, index: int, init_count: int) -> str | None:
    """Return the status label of one init container.

    None when the init container terminated successfully and the scan
    should move on to the next one.
    """
    state = status.state
    if isinstance(state, TerminatedState):
        if state.exit_code == 0:
            return None
        if state.reason:
            return f"Init:{state.reason}"
        if state.signal != 0:
            return f"Init:Signal:{state.signal}"
        return f"Init:ExitCode:{state.exit_code}"
    if isinstance(state, WaitingState) and state.reason and state.reason != STATUS_POD_INITIALIZING:
        return f"Init:{state.reason}"
    return f"Init:{index}/{init_count}"


def init_container_phase(pod: PodInfo) -> str | None:
    """Return the label of the first init container still blocking the pod."""
    init_count = len(pod.init_containers)
    for index, status in enumerate(pod.init_container_statuses):
        label = init_container_label(status, index, init_count)
        if label is not None:
            return label
    return None


def container_phase(statuses: tuple[ContainerStatus, ...], label: str) -> tuple[str, bool]:
    """Scan regular containers from last to first.

    Every matching container overwrites the label, so the lowest indexed
    match wins.

    Returns:
        The resulting label and whether a ready, running container was seen.
    """
    running = False
    for status in reversed(statuses):
        state = status.state
        if isinstance(state, WaitingState) and state.reason:
            label = state.reason
        elif isinstance(state, TerminatedState) and state.reason:
            label = state.reason
        elif isinstance(state, TerminatedState):
            if state.signal != 0:
                label = f"Signal:{state.signal}"
            else:
                label = f"ExitCode:{state.exit_code}"
        elif status.ready and isinstance(state, RunningState):
            running = True
    return label, running


def pod_phase(pod: PodInfo) -> str:
    """Derive the display status of a pod."""
    label = pod.phase
    if pod.reason:
        if pod.deletion_requested and pod.reason == REASON_NODE_LOST:
            return STATUS_UNKNOWN
        label = pod.reason

    init_label = init_container_phase(pod)
    if init_label is not None:
        return init_label

    label, running = container_phase(pod.container_statuses, label)
    if running and label == STATUS_COMPLETED:
        label = STATUS_RUNNING
    if pod.deletion_requested:
        return STATUS_TERMINATING
    return label
