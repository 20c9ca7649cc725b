"""Tests for pod resource aggregation."""

from __future__ import annotations

from itertools import permutations

from kubeglance.controllers.pods.resources import (
    ResourceAccumulator,
    aggregate,
    container_limits,
    container_requests,
    pod_limits,
    pod_requests,
    pod_resource_totals,
)
from kubeglance.models.core.pod_info import ContainerSpec, PodInfo, ResourceList
from kubeglance.models.core.resource_quantity import ResourceQuantity, ResourceTotals

MI = 1024 * 1024


def _container(
    name: str = "c",
    requests: ResourceList | None = None,
    limits: ResourceList | None = None,
) -> ContainerSpec:
    return ContainerSpec(
        name=name,
        requests=requests or ResourceList(),
        limits=limits or ResourceList(),
    )


class TestContainerExtraction:
    """Tests for per-container request/limit extraction."""

    def test_requests_preferred(self) -> None:
        container = _container(
            requests=ResourceList(cpu=100, memory=64 * MI),
            limits=ResourceList(cpu=500, memory=128 * MI),
        )
        assert container_requests(container) == ResourceQuantity(100, 64 * MI)

    def test_requests_fall_back_to_limits(self) -> None:
        container = _container(limits=ResourceList(cpu=500, memory=128 * MI))
        assert container_requests(container) == ResourceQuantity(500, 128 * MI)

    def test_nothing_declared_is_undefined(self) -> None:
        assert container_requests(_container()) is None
        assert container_limits(_container()) is None

    def test_partial_request_counts_missing_as_zero(self) -> None:
        container = _container(requests=ResourceList(cpu=100))
        assert container_requests(container) == ResourceQuantity(100, 0)

    def test_other_resources_make_list_defined(self) -> None:
        container = _container(requests=ResourceList(other=("ephemeral-storage",)))
        assert container_requests(container) == ResourceQuantity(0, 0)

    def test_limits_do_not_fall_back_to_requests(self) -> None:
        container = _container(requests=ResourceList(cpu=100, memory=64 * MI))
        assert container_limits(container) is None


class TestResourceAccumulator:
    """Tests for ResourceAccumulator."""

    def test_adds(self) -> None:
        accumulator = ResourceAccumulator()
        assert accumulator.add(ResourceQuantity(100, 10)) is True
        assert accumulator.add(ResourceQuantity(50, 5)) is True
        assert accumulator.total == ResourceQuantity(150, 15)
        assert accumulator.short_circuited is False

    def test_resets_and_stops_on_undefined(self) -> None:
        accumulator = ResourceAccumulator()
        accumulator.add(ResourceQuantity(100, 10))

        assert accumulator.add(None) is False
        assert accumulator.add(ResourceQuantity(50, 5)) is False
        assert accumulator.total == ResourceQuantity()
        assert accumulator.short_circuited is True


class TestAggregate:
    """Tests for scope aggregation."""

    def test_sum(self) -> None:
        containers = [
            _container(requests=ResourceList(cpu=100, memory=64 * MI)),
            _container(requests=ResourceList(cpu=250, memory=128 * MI)),
        ]
        assert aggregate(containers, container_requests) == ResourceQuantity(350, 192 * MI)

    def test_undefined_container_zeroes_scope(self) -> None:
        containers = [
            _container(requests=ResourceList(cpu=100, memory=64 * MI)),
            _container(),
            _container(requests=ResourceList(cpu=250, memory=128 * MI)),
        ]
        assert aggregate(containers, container_requests) == ResourceQuantity()

    def test_undefined_first_container_zeroes_scope(self) -> None:
        containers = [_container(), _container(requests=ResourceList(cpu=250, memory=MI))]
        assert aggregate(containers, container_requests).is_zero

    def test_order_independent(self) -> None:
        containers = [
            _container(requests=ResourceList(cpu=100, memory=64 * MI)),
            _container(requests=ResourceList(cpu=250)),
            _container(limits=ResourceList(cpu=1000, memory=512 * MI)),
        ]
        expected = ResourceQuantity(1350, 576 * MI)
        for ordering in permutations(containers):
            assert aggregate(ordering, container_requests) == expected

    def test_empty_scope(self) -> None:
        assert aggregate([], container_limits) == ResourceQuantity()


class TestPodTotals:
    """Tests for pod level request/limit totals."""

    def test_regular_and_init_scopes_added(self) -> None:
        pod = PodInfo(
            name="p",
            containers=(
                _container(
                    requests=ResourceList(cpu=200, memory=128 * MI),
                    limits=ResourceList(cpu=400, memory=256 * MI),
                ),
            ),
            init_containers=(
                _container(
                    requests=ResourceList(cpu=50, memory=32 * MI),
                    limits=ResourceList(cpu=100, memory=64 * MI),
                ),
            ),
        )

        assert pod_requests(pod) == ResourceQuantity(250, 160 * MI)
        assert pod_limits(pod) == ResourceQuantity(500, 320 * MI)
        assert pod_resource_totals(pod) == ResourceTotals(
            requests=ResourceQuantity(250, 160 * MI),
            limits=ResourceQuantity(500, 320 * MI),
        )

    def test_init_scope_added_when_regular_scope_resets(self) -> None:
        pod = PodInfo(
            name="p",
            containers=(
                _container(requests=ResourceList(cpu=200, memory=128 * MI)),
                _container(),
            ),
            init_containers=(_container(requests=ResourceList(cpu=50, memory=32 * MI)),),
        )
        assert pod_requests(pod) == ResourceQuantity(50, 32 * MI)

    def test_requests_only_pod_has_zero_limits(self) -> None:
        pod = PodInfo(
            name="p",
            containers=(_container(requests=ResourceList(cpu=200, memory=128 * MI)),),
        )
        assert pod_limits(pod) == ResourceQuantity()
        assert pod_requests(pod) == ResourceQuantity(200, 128 * MI)
