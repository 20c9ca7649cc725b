"""Point-in-time pod usage snapshot models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContainerUsage(BaseModel):
    """Usage of one container at sampling time."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu: int = 0  # millicores
    memory: int = 0  # bytes


class PodMetricsInfo(BaseModel):
    """Usage snapshot of one pod as reported by the metrics API."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str = ""
    containers: tuple[ContainerUsage, ...] = ()
