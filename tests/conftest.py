"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest
import structlog
from structlog.testing import capture_logs

from podstatus.config import get_settings
from podstatus.errors import ListFailure
from podstatus.k8s.models import ContainerState, ContainerStatus, RawPod

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClusterClient:
    """In-memory ClusterClient that records which namespaces were queried."""

    def __init__(self, pods=None, events=None, fail_with: Exception | None = None) -> None:
        self.pods = list(pods or [])
        self.events = list(events or [])
        self.fail_with = fail_with
        self.pod_queries: list[str] = []
        self.event_queries: list[str] = []
        self.closed = False

    async def list_pods(self, namespace: str) -> list[RawPod]:
        self.pod_queries.append(namespace)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.pods)

    async def list_events(self, namespace: str):
        self.event_queries.append(namespace)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.events)

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def running(name: str = "app", restarts: int = 0) -> ContainerStatus:
    return ContainerStatus(name=name, state=ContainerState.RUNNING, restart_count=restarts)


def waiting(reason: str, name: str = "app", restarts: int = 0) -> ContainerStatus:
    return ContainerStatus(name=name, state=ContainerState.WAITING, restart_count=restarts, waiting_reason=reason)


def make_pod(name: str, phase: str = "Running", age: float = 60.0, containers=(), now: datetime = NOW) -> RawPod:
    return RawPod(
        name=name,
        phase=phase,
        start_time=now - timedelta(seconds=age),
        container_statuses=tuple(containers),
        namespace="default",
    )


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog output so tests stay quiet and can assert on log events."""
    with capture_logs() as logs:
        yield logs
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from PODSTATUS_* variables in the outer environment."""
    for key in list(os.environ):
        if key.upper().startswith("PODSTATUS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_client():
    return FakeClusterClient(
        pods=[
            make_pod("web-1", containers=[running("nginx", 1), running("sidecar", 0)]),
            make_pod("worker-1", containers=[running("worker", 2), waiting("CrashLoopBackOff", "init", 5)]),
            make_pod("job-1", phase="Succeeded", containers=[]),
        ]
    )


@pytest.fixture
def failing_client():
    return FakeClusterClient(fail_with=ListFailure("default", "pods", RuntimeError("connection refused")))
