"""Shared fixtures and factories for rcdash tests.

Provides a recording in-memory WorkloadSource so tests can assert both the
results and the exact sequence of list calls, without a Kubernetes cluster.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from rcdash.models.selectors import LabelSelector
from rcdash.models.workloads import ControllerSnapshot, PodSnapshot, ServiceSnapshot

# ---------------------------------------------------------------------------
# Snapshot factories
# ---------------------------------------------------------------------------


def make_controller(
    name: str = "frontend",
    namespace: str = "mock",
    desired: int = 3,
    current: int = 3,
    selector: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
) -> ControllerSnapshot:
    """Create a ControllerSnapshot with sensible defaults for testing."""
    return ControllerSnapshot(
        namespace=namespace,
        name=name,
        desired_replicas=desired,
        current_replicas=current,
        selector={"app": "test"} if selector is None else selector,
        labels={"app": "test"} if labels is None else labels,
    )


def make_service(
    name: str = "frontend",
    namespace: str = "mock",
    selector: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
) -> ServiceSnapshot:
    """Create a ServiceSnapshot with sensible defaults for testing."""
    return ServiceSnapshot(
        namespace=namespace,
        name=name,
        selector={"app": "test"} if selector is None else selector,
        labels={"app": "test"} if labels is None else labels,
    )


def make_pod(
    phase: str = "Running",
    name: str = "frontend-x2kj",
    namespace: str = "mock",
    labels: dict[str, str] | None = None,
) -> PodSnapshot:
    """Create a PodSnapshot with sensible defaults for testing."""
    return PodSnapshot(
        namespace=namespace,
        name=name,
        phase=phase,
        labels={"app": "test"} if labels is None else labels,
    )


# ---------------------------------------------------------------------------
# Recording fake source
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Action:
    """One call made against the fake source."""

    verb: str
    resource: str
    namespace: str
    selector: LabelSelector


@dataclass
class FakeWorkloadSource:
    """In-memory WorkloadSource that records every call.

    Objects are filtered by namespace and by ``selector.matches(labels)``,
    the same AND-of-requirements semantics the API server applies.
    Set ``error`` to make every call raise it after being recorded.
    """

    controllers: list[ControllerSnapshot] = field(default_factory=list)
    services: list[ServiceSnapshot] = field(default_factory=list)
    pods: list[PodSnapshot] = field(default_factory=list)
    error: Exception | None = None
    actions: list[Action] = field(default_factory=list)

    def _record(self, resource: str, namespace: str, selector: LabelSelector) -> None:
        self.actions.append(Action("list", resource, namespace, selector))
        if self.error is not None:
            raise self.error

    async def list_controllers(self, namespace: str, selector: LabelSelector) -> list[ControllerSnapshot]:
        self._record("replicationcontrollers", namespace, selector)
        return [c for c in self.controllers if c.namespace == namespace and selector.matches(c.labels)]

    async def list_services(self, namespace: str, selector: LabelSelector) -> list[ServiceSnapshot]:
        self._record("services", namespace, selector)
        return [s for s in self.services if s.namespace == namespace and selector.matches(s.labels)]

    async def list_pods(self, namespace: str, selector: LabelSelector) -> list[PodSnapshot]:
        self._record("pods", namespace, selector)
        return [p for p in self.pods if p.namespace == namespace and selector.matches(p.labels)]


@pytest.fixture
def fake_source() -> FakeWorkloadSource:
    """An empty recording source; tests populate it directly."""
    return FakeWorkloadSource()
