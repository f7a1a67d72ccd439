"""Workload snapshots and the pod summary record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class PodPhase(StrEnum):
    """Pod lifecycle phase as reported in ``status.phase``."""

    RUNNING = "Running"
    PENDING = "Pending"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PodSnapshot:
    """Read-only view of a pod. ``phase`` is kept as the raw API string."""

    namespace: str
    name: str
    phase: str
    labels: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ControllerSnapshot:
    """Read-only view of a replication controller.

    ``desired_replicas`` comes from ``spec.replicas`` and ``current_replicas``
    from ``status.replicas``. ``selector`` is the equality map the controller
    uses to find its pods.
    """

    namespace: str
    name: str
    desired_replicas: int = 0
    current_replicas: int = 0
    selector: dict[str, str] = field(default_factory=dict, hash=False)
    labels: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ServiceSnapshot:
    """Read-only view of a service.

    Hashed on namespace and name only; the label maps still take part in
    equality, so equal snapshots collapse in a set.
    """

    namespace: str
    name: str
    selector: dict[str, str] = field(default_factory=dict, hash=False)
    labels: dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def selector_key(self) -> frozenset[tuple[str, str]]:
        """Order-independent identity of the selector map.

        Services sharing a selector_key are duplicates for deletion purposes,
        whatever their names or namespaces.
        """
        return frozenset(self.selector.items())


@dataclass(frozen=True)
class PodInfo:
    """Pod counts of one replication controller."""

    current: int
    desired: int
    running: int = 0
    pending: int = 0
    failed: int = 0
