"""WorkloadSource backed by the kubernetes-asyncio CoreV1Api.

Each list method issues exactly one namespaced list call with the selector
rendered as the ``label_selector`` query parameter. ``ApiException`` and
connection errors are not caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rcdash.models.workloads import ControllerSnapshot, PodSnapshot, ServiceSnapshot
from rcdash.observability.logging import get_logger

if TYPE_CHECKING:
    from rcdash.models.config import RcdashConfig
    from rcdash.models.selectors import LabelSelector

_logger = get_logger("source.kube")


def _labels(obj: Any) -> dict[str, str]:
    metadata = getattr(obj, "metadata", None)
    return dict(getattr(metadata, "labels", None) or {})


def _meta(obj: Any) -> tuple[str, str]:
    metadata = getattr(obj, "metadata", None)
    return (getattr(metadata, "namespace", None) or "", getattr(metadata, "name", None) or "")


def controller_from_api(obj: Any) -> ControllerSnapshot:
    """Convert a V1ReplicationController into a ControllerSnapshot."""
    namespace, name = _meta(obj)
    spec = getattr(obj, "spec", None)
    status = getattr(obj, "status", None)
    return ControllerSnapshot(
        namespace=namespace,
        name=name,
        desired_replicas=getattr(spec, "replicas", None) or 0,
        current_replicas=getattr(status, "replicas", None) or 0,
        selector=dict(getattr(spec, "selector", None) or {}),
        labels=_labels(obj),
    )


def service_from_api(obj: Any) -> ServiceSnapshot:
    """Convert a V1Service into a ServiceSnapshot."""
    namespace, name = _meta(obj)
    spec = getattr(obj, "spec", None)
    return ServiceSnapshot(
        namespace=namespace,
        name=name,
        selector=dict(getattr(spec, "selector", None) or {}),
        labels=_labels(obj),
    )


def pod_from_api(obj: Any) -> PodSnapshot:
    """Convert a V1Pod into a PodSnapshot. A missing phase becomes ``Unknown``."""
    namespace, name = _meta(obj)
    status = getattr(obj, "status", None)
    return PodSnapshot(
        namespace=namespace,
        name=name,
        phase=getattr(status, "phase", None) or "Unknown",
        labels=_labels(obj),
    )


class KubeWorkloadSource:
    """Lists replication controllers, services and pods through CoreV1Api.

    Args:
        core_v1:           a ``kubernetes_asyncio.client.CoreV1Api`` (or anything
                           with the same list methods).
        default_namespace: namespace used when a caller passes ``""``.

    Usable as an async context manager; leaving it closes the underlying
    ApiClient connection pool.
    """

    def __init__(self, core_v1: Any, default_namespace: str = "default") -> None:
        self._core_v1 = core_v1
        self._default_namespace = default_namespace

    async def __aenter__(self) -> KubeWorkloadSource:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the kubernetes-asyncio ApiClient behind the CoreV1Api."""
        api_client = getattr(self._core_v1, "api_client", None)
        if api_client is None:
            return
        _logger.debug("closing k8s api client")
        await api_client.close()

    def _list_kwargs(self, namespace: str, selector: LabelSelector) -> dict[str, str]:
        kwargs = {"namespace": namespace or self._default_namespace}
        if not selector.empty():
            kwargs["label_selector"] = str(selector)
        return kwargs

    async def list_controllers(self, namespace: str, selector: LabelSelector) -> list[ControllerSnapshot]:
        kwargs = self._list_kwargs(namespace, selector)
        _logger.debug("list_replication_controllers", **kwargs)
        result = await self._core_v1.list_namespaced_replication_controller(**kwargs)
        return [controller_from_api(item) for item in result.items or []]

    async def list_services(self, namespace: str, selector: LabelSelector) -> list[ServiceSnapshot]:
        kwargs = self._list_kwargs(namespace, selector)
        _logger.debug("list_services", **kwargs)
        result = await self._core_v1.list_namespaced_service(**kwargs)
        return [service_from_api(item) for item in result.items or []]

    async def list_pods(self, namespace: str, selector: LabelSelector) -> list[PodSnapshot]:
        kwargs = self._list_kwargs(namespace, selector)
        _logger.debug("list_pods", **kwargs)
        result = await self._core_v1.list_namespaced_pod(**kwargs)
        return [pod_from_api(item) for item in result.items or []]


async def build_workload_source(config: RcdashConfig) -> KubeWorkloadSource:
    """Configure kubernetes-asyncio and return a source over a new CoreV1Api.

    Tries the in-cluster service account first (when enabled), then the
    kubeconfig file and context named in *config*.
    The caller owns the returned source and must ``close()`` it (or use it
    with ``async with``) to release the ApiClient session.
    """
    # Imported lazily: kubernetes-asyncio probes the environment on import.
    import kubernetes_asyncio.config as k8s_config  # type: ignore[import-untyped]
    from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

    kube = config.kube
    loaded = False
    if kube.in_cluster:
        try:
            # load_incluster_config() is synchronous in kubernetes-asyncio
            k8s_config.load_incluster_config()
            loaded = True
            _logger.info("k8s client configured from in-cluster service account")
        except k8s_config.ConfigException:
            _logger.debug("in-cluster config unavailable, falling back to kubeconfig")
    if not loaded:
        await k8s_config.load_kube_config(
            config_file=kube.kubeconfig or None,
            context=kube.context or None,
        )
        _logger.info("k8s client configured from kubeconfig", context=kube.context or "<current>")

    return KubeWorkloadSource(k8s_client.CoreV1Api(), default_namespace=config.namespace)
