"""Pod phase summary for a replication controller."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rcdash.labels import to_label_selector
from rcdash.models.workloads import ControllerSnapshot, PodInfo, PodPhase, PodSnapshot
from rcdash.observability.logging import get_logger

if TYPE_CHECKING:
    from rcdash.source.base import WorkloadSource

_logger = get_logger("replication.podinfo")


def get_pod_info(controller: ControllerSnapshot, pods: Iterable[PodSnapshot]) -> PodInfo:
    """Count running, pending and failed pods against the controller's replicas.

    *pods* must already be the controller's own pods; no ownership check is
    made here. Phases other than Running, Pending and Failed are not counted.
    Replica counts are copied from the controller as-is.
    """
    running = pending = failed = 0
    for pod in pods:
        if pod.phase == PodPhase.RUNNING:
            running += 1
        elif pod.phase == PodPhase.PENDING:
            pending += 1
        elif pod.phase == PodPhase.FAILED:
            failed += 1

    return PodInfo(
        current=controller.current_replicas,
        desired=controller.desired_replicas,
        running=running,
        pending=pending,
        failed=failed,
    )


async def collect_pod_info(source: WorkloadSource, controller: ControllerSnapshot) -> PodInfo:
    """List the pods selected by *controller* and summarise them."""
    selector = to_label_selector(controller.selector)
    pods = await source.list_pods(controller.namespace, selector)
    _logger.debug(
        "controller_pods_listed",
        controller=controller.name,
        namespace=controller.namespace,
        pods=len(pods),
    )
    return get_pod_info(controller, pods)
