"""Data sources for rcdash.

Exposes:
    WorkloadSource        -- Protocol every data source implements.
    KubeWorkloadSource    -- kubernetes-asyncio CoreV1Api backed source.
    build_workload_source -- configure the client and build a KubeWorkloadSource.
"""

from rcdash.source.base import WorkloadSource
from rcdash.source.kube import KubeWorkloadSource, build_workload_source

__all__ = ["KubeWorkloadSource", "WorkloadSource", "build_workload_source"]
