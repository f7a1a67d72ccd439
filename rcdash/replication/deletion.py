"""Find the services to delete together with a set of replication controllers.

Sibling-selector policy: when several controllers match the deletion
selector, the service query is built from the FIRST controller's selector
only. Controllers sharing a deletion selector are assumed to share the same
service selector; this is not verified. A sibling with a divergent selector
will not contribute its services to the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rcdash.labels import to_label_selector
from rcdash.observability.logging import get_logger

if TYPE_CHECKING:
    from rcdash.models.selectors import LabelSelector
    from rcdash.models.workloads import ServiceSnapshot
    from rcdash.source.base import WorkloadSource

_logger = get_logger("replication.deletion")


async def get_services_for_deletion(
    source: WorkloadSource,
    selector: LabelSelector,
    namespace: str,
) -> list[ServiceSnapshot]:
    """Return the services that should be deleted with the selected controllers.

    Always issues exactly two list calls, in order: controllers matching
    *selector*, then services. If controllers were found, services are listed
    by the first controller's own selector; otherwise by *selector* itself,
    since services can outlive their controllers. The service list is
    returned as the source gave it.

    Raises:
        SelectorError: the first controller's selector map is not a valid
            label selector.
        Any error raised by *source* is propagated unchanged.
    """
    controllers = await source.list_controllers(namespace, selector)

    if controllers:
        first = controllers[0]
        service_selector = to_label_selector(first.selector)
        _logger.debug(
            "services_by_controller_selector",
            namespace=namespace,
            controllers=len(controllers),
            controller=first.name,
            selector=str(service_selector),
        )
    else:
        service_selector = selector
        _logger.debug("services_by_deletion_selector", namespace=namespace, selector=str(selector))

    services = await source.list_services(namespace, service_selector)
    _logger.debug("deletion_candidates", namespace=namespace, services=len(services))
    return services
