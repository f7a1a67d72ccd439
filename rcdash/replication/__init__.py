"""Replication controller reporting and cleanup helpers.

Exposes:
    get_pod_info              -- summarise pod phases for one controller.
    collect_pod_info          -- list a controller's pods and summarise them.
    get_services_for_deletion -- services to remove alongside a set of controllers.
"""

from rcdash.replication.deletion import get_services_for_deletion
from rcdash.replication.podinfo import collect_pod_info, get_pod_info

__all__ = ["collect_pod_info", "get_pod_info", "get_services_for_deletion"]
