"""Pod descriptor models.

These models are the typed form of a raw pod document. They are built by
``PodParser`` and consumed by the pod row controllers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class WaitingState(BaseModel):
    """Container is waiting to start."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["waiting"] = "waiting"
    reason: str = ""


class RunningState(BaseModel):
    """Container is running."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["running"] = "running"


class TerminatedState(BaseModel):
    """Container has terminated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["terminated"] = "terminated"
    reason: str = ""
    exit_code: int = 0
    signal: int = 0


ContainerState = Annotated[
    WaitingState | RunningState | TerminatedState,
    Field(discriminator="kind"),
]


class ContainerStatus(BaseModel):
    """Live status of one container."""

    model_config = ConfigDict(frozen=True)

    name: str
    ready: bool = False
    restart_count: int = Field(default=0, ge=0)
    state: ContainerState | None = None


class ResourceList(BaseModel):
    """Declared resource quantities of one container (requests or limits)."""

    model_config = ConfigDict(frozen=True)

    cpu: int | None = None  # millicores
    memory: int | None = None  # bytes
    other: tuple[str, ...] = ()  # names of any other declared resources

    @property
    def is_empty(self) -> bool:
        """Whether nothing at all is declared in this list."""
        return self.cpu is None and self.memory is None and not self.other


class ContainerSpec(BaseModel):
    """Declared spec of one container."""

    model_config = ConfigDict(frozen=True)

    name: str
    requests: ResourceList = ResourceList()
    limits: ResourceList = ResourceList()


class PodInfo(BaseModel):
    """Typed pod descriptor: spec, live status and metadata of one pod."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str
    phase: str = ""
    reason: str = ""
    deletion_requested: bool = False
    containers: tuple[ContainerSpec, ...] = ()
    init_containers: tuple[ContainerSpec, ...] = ()
    container_statuses: tuple[ContainerStatus, ...] = ()
    init_container_statuses: tuple[ContainerStatus, ...] = ()
    pod_ip: str = ""
    node_name: str = ""
    qos_class: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    creation_timestamp: datetime | None = None

    @property
    def fqn(self) -> str:
        """Fully qualified ``namespace/name`` of the pod."""
        if not self.namespace:
            return self.name
        return f"{self.namespace}/{self.name}"
