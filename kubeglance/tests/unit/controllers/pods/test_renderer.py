"""Tests for the pod row renderer."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from kubeglance.controllers.pods.parsers import PodConversionError
from kubeglance.controllers.pods.renderer import (
    POD_HEADER,
    PodRenderer,
    PodWithMetrics,
    map_qos,
)
from kubeglance.models.state.app_settings import AppSettings


@pytest.fixture
def renderer() -> PodRenderer:
    """Create PodRenderer instance."""
    return PodRenderer()


@pytest.fixture
def web_pod(make_raw_pod, make_container, running_status) -> dict:
    """A burstable two-container pod with one completed init container."""
    return make_raw_pod(
        containers=[
            make_container(
                "web",
                requests={"cpu": "250m", "memory": "128Mi"},
                limits={"cpu": "500m", "memory": "256Mi"},
            ),
            make_container(
                "sidecar",
                requests={"cpu": "50m", "memory": "64Mi"},
                limits={"cpu": "100m", "memory": "128Mi"},
            ),
        ],
        init_containers=[
            make_container(
                "migrate",
                requests={"cpu": "100m", "memory": "32Mi"},
                limits={"cpu": "200m", "memory": "64Mi"},
            ),
        ],
        container_statuses=[
            running_status("web", restart_count=1),
            running_status("sidecar", restart_count=2),
        ],
        init_container_statuses=[
            {
                "name": "migrate",
                "ready": False,
                "restartCount": 0,
                "state": {"terminated": {"reason": "Completed", "exitCode": 0}},
            }
        ],
    )


@pytest.fixture
def web_metrics() -> dict:
    """Usage snapshot matching ``web_pod``."""
    return {
        "metadata": {"name": "web-7d9f", "namespace": "default"},
        "containers": [
            {"name": "web", "usage": {"cpu": "120m", "memory": "100Mi"}},
            {"name": "sidecar", "usage": {"cpu": "80m", "memory": "12Mi"}},
        ],
    }


class TestPodHeader:
    """Tests for the pod table header."""

    def test_column_order(self, renderer: PodRenderer) -> None:
        assert renderer.header().names() == [
            "NAMESPACE",
            "NAME",
            "PF",
            "READY",
            "RESTARTS",
            "STATUS",
            "CPU(R:L)",
            "MEM(R:L)",
            "CPU",
            "MEM",
            "%CPU/R",
            "%MEM/R",
            "%CPU/L",
            "%MEM/L",
            "IP",
            "NODE",
            "QOS",
            "LABELS",
            "VALID",
            "AGE",
        ]

    def test_narrow_header_hides_wide_columns(self, renderer: PodRenderer) -> None:
        names = renderer.header(wide=False).names()
        assert len(names) == 15
        assert "QOS" not in names
        assert "CPU(R:L)" not in names

    def test_header_follows_wide_columns_setting(self) -> None:
        narrow = PodRenderer(AppSettings(show_wide_columns=False))
        wide = PodRenderer(AppSettings(show_wide_columns=True))

        assert "LABELS" not in narrow.header().names()
        assert "LABELS" in wide.header().names()
        assert narrow.header(wide=True) == POD_HEADER


class TestPodRenderer:
    """Tests for PodRenderer.render."""

    def test_render_with_metrics(
        self, renderer: PodRenderer, web_pod: dict, web_metrics: dict, now: datetime
    ) -> None:
        row = renderer.render(PodWithMetrics(raw=web_pod, metrics=web_metrics), now)

        assert row.id == "default/web-7d9f"
        assert row.fields == (
            "default",
            "web-7d9f",
            "●",
            "2/2",
            "3",
            "Running",
            "400:800",
            "224:448",
            "200",
            "112",
            "50",
            "50",
            "25",
            "25",
            "10.0.0.12",
            "node-a",
            "BU",
            "app=web tier=frontend",
            "",
            "3h4m",
        )
        assert len(row.fields) == len(POD_HEADER)

    def test_render_without_metrics(self, renderer: PodRenderer, web_pod: dict, now: datetime) -> None:
        row = renderer.render(PodWithMetrics(raw=web_pod), now)
        fields = dict(zip(POD_HEADER.names(), row.fields))

        for column in ("CPU(R:L)", "MEM(R:L)", "CPU", "MEM", "%CPU/R", "%MEM/R", "%CPU/L", "%MEM/L"):
            assert fields[column] == "n/a"
        assert fields["STATUS"] == "Running"

    def test_render_not_ready_pod(
        self, renderer: PodRenderer, make_raw_pod, running_status, now: datetime
    ) -> None:
        raw = make_raw_pod(
            container_statuses=[
                running_status("web"),
                {
                    "name": "worker",
                    "ready": False,
                    "restartCount": 7,
                    "state": {"waiting": {"reason": "CrashLoopBackOff"}},
                },
            ],
        )
        raw["status"]["podIP"] = ""
        raw["spec"].pop("nodeName")
        raw["status"]["qosClass"] = "BestEffort"
        raw["metadata"]["labels"] = {}

        fields = dict(zip(POD_HEADER.names(), renderer.render(PodWithMetrics(raw=raw), now).fields))

        assert fields["READY"] == "1/2"
        assert fields["RESTARTS"] == "7"
        assert fields["STATUS"] == "CrashLoopBackOff"
        assert fields["IP"] == "n/a"
        assert fields["NODE"] == "n/a"
        assert fields["QOS"] == "BE"
        assert fields["LABELS"] == "<none>"
        assert fields["VALID"] == "container ready check failed: 1 of 2"

    def test_render_rejects_wrong_type(self, renderer: PodRenderer, web_pod: dict) -> None:
        with pytest.raises(PodConversionError, match="Expected PodWithMetrics"):
            renderer.render(web_pod)  # type: ignore[arg-type]

    def test_render_rejects_bad_metrics(self, renderer: PodRenderer, web_pod: dict) -> None:
        with pytest.raises(PodConversionError):
            renderer.render(PodWithMetrics(raw=web_pod, metrics={"containers": "web"}))


class TestRenderRows:
    """Tests for PodRenderer.render_rows."""

    def test_bad_row_does_not_abort_batch(
        self,
        renderer: PodRenderer,
        web_pod: dict,
        now: datetime,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        items = [
            PodWithMetrics(raw=web_pod),
            PodWithMetrics(raw={"metadata": {"name": 42}}),
            PodWithMetrics(raw=web_pod),
        ]

        with caplog.at_level(logging.WARNING, logger="kubeglance.controllers.pods.renderer"):
            results = renderer.render_rows(items, now)

        assert [result.success for result in results] == [True, False, True]
        assert results[0].row is not None
        assert results[0].row.id == "default/web-7d9f"
        assert results[1].row is None
        assert results[1].error
        assert "Skipping pod row 1" in caplog.text

    @pytest.mark.parametrize("cpu", ["1e999999", "1e5000"])
    def test_out_of_range_quantity_does_not_abort_batch(
        self, renderer: PodRenderer, make_raw_pod, make_container, now: datetime, cpu: str
    ) -> None:
        huge = make_raw_pod(name="huge", containers=[make_container("web", requests={"cpu": cpu})])
        good = make_raw_pod(containers=[make_container("web", requests={"cpu": "1"})])
        items = [
            PodWithMetrics(raw=huge, metrics={"containers": []}),
            PodWithMetrics(raw=good, metrics={"containers": []}),
        ]

        results = renderer.render_rows(items, now)

        assert [result.success for result in results] == [False, True]
        assert "out of range" in results[0].error

    def test_empty_batch(self, renderer: PodRenderer) -> None:
        assert renderer.render_rows([]) == []


class TestMapQos:
    """Tests for map_qos."""

    @pytest.mark.parametrize(
        ("qos_class", "expected"),
        [
            ("Guaranteed", "GA"),
            ("Burstable", "BU"),
            ("BestEffort", "BE"),
            ("", "BE"),
            ("Platinum", "BE"),
        ],
    )
    def test_map_qos(self, qos_class: str, expected: str) -> None:
        assert map_qos(qos_class) == expected
