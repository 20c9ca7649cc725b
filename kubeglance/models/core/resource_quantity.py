"""Resource quantity and display metric models."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from kubeglance.constants.values import NA_VALUE


@dataclass(frozen=True)
class ResourceQuantity:
    """CPU/memory pair in millicores and bytes."""

    cpu: int = 0  # millicores
    memory: int = 0  # bytes

    def __add__(self, other: ResourceQuantity) -> ResourceQuantity:
        if not isinstance(other, ResourceQuantity):
            return NotImplemented
        return ResourceQuantity(cpu=self.cpu + other.cpu, memory=self.memory + other.memory)

    @property
    def is_zero(self) -> bool:
        return self.cpu == 0 and self.memory == 0


@dataclass(frozen=True)
class ResourceTotals:
    """Pod scoped request and limit totals."""

    requests: ResourceQuantity = field(default_factory=ResourceQuantity)
    limits: ResourceQuantity = field(default_factory=ResourceQuantity)


class DisplayMetric(BaseModel):
    """Formatted current usage and usage percentages of one pod."""

    model_config = ConfigDict(frozen=True)

    cpu: str = NA_VALUE
    mem: str = NA_VALUE
    cpu_pct_req: str = NA_VALUE
    mem_pct_req: str = NA_VALUE
    cpu_pct_lim: str = NA_VALUE
    mem_pct_lim: str = NA_VALUE
