"""Pod resource request/limit aggregation.

Requests and limits are summed per scope (regular containers, then init
containers) and the two scopes are added together. A scope is all or
nothing: as soon as one container in it has nothing usable declared, the
scope total drops to zero rather than reporting a partial sum.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kubeglance.models.core.pod_info import ContainerSpec, PodInfo, ResourceList
from kubeglance.models.core.resource_quantity import ResourceQuantity, ResourceTotals

Extractor = Callable[[ContainerSpec], ResourceQuantity | None]


class ResourceAccumulator:
    """Running CPU/memory total that resets and stops on an undefined container."""

    def __init__(self) -> None:
        self.total = ResourceQuantity()
        self.short_circuited = False

    def add(self, quantity: ResourceQuantity | None) -> bool:
        """Add one container's quantity.

        Returns:
            False once the accumulator has short-circuited and further
            containers must not be consulted.
        """
        if self.short_circuited:
            return False
        if quantity is None:
            self.total = ResourceQuantity()
            self.short_circuited = True
            return False
        self.total = self.total + quantity
        return True


def _to_quantity(resources: ResourceList) -> ResourceQuantity:
    return ResourceQuantity(cpu=resources.cpu or 0, memory=resources.memory or 0)


def container_requests(container: ContainerSpec) -> ResourceQuantity | None:
    """Return what a container asks for.

    Requests win; a container declaring only limits is taken at its limits.
    None when the container declares neither.
    """
    if not container.requests.is_empty:
        return _to_quantity(container.requests)
    if not container.limits.is_empty:
        return _to_quantity(container.limits)
    return None


def container_limits(container: ContainerSpec) -> ResourceQuantity | None:
    """Return a container's limits, or None when it declares none."""
    if container.limits.is_empty:
        return None
    return _to_quantity(container.limits)


def aggregate(containers: Iterable[ContainerSpec], extract: Extractor) -> ResourceQuantity:
    """Sum one scope of containers with the reset-on-undefined rule."""
    accumulator = ResourceAccumulator()
    for container in containers:
        if not accumulator.add(extract(container)):
            break
    return accumulator.total


def pod_requests(pod: PodInfo) -> ResourceQuantity:
    """Return pod requests: regular scope plus init scope."""
    return aggregate(pod.containers, container_requests) + aggregate(
        pod.init_containers, container_requests
    )


def pod_limits(pod: PodInfo) -> ResourceQuantity:
    """Return pod limits: regular scope plus init scope."""
    return aggregate(pod.containers, container_limits) + aggregate(
        pod.init_containers, container_limits
    )


def pod_resource_totals(pod: PodInfo) -> ResourceTotals:
    """Return pod request and limit totals."""
    return ResourceTotals(requests=pod_requests(pod), limits=pod_limits(pod))
