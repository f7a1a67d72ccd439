"""The data-source interface the replication helpers read from."""

from __future__ import annotations

from typing import Protocol

from rcdash.models.selectors import LabelSelector
from rcdash.models.workloads import ControllerSnapshot, PodSnapshot, ServiceSnapshot


class WorkloadSource(Protocol):
    """Read-only access to replication controllers, services and pods.

    Implementations match objects against *selector* as an AND of its
    requirements and raise on transport failure. An empty result is a plain
    empty list.
    """

    async def list_controllers(self, namespace: str, selector: LabelSelector) -> list[ControllerSnapshot]: ...

    async def list_services(self, namespace: str, selector: LabelSelector) -> list[ServiceSnapshot]: ...

    async def list_pods(self, namespace: str, selector: LabelSelector) -> list[PodSnapshot]: ...
