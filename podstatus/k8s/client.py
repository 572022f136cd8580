"""
Async Kubernetes client wrapping kubernetes-asyncio.

Supports both in-cluster config (running inside a pod) and a kubeconfig
file (local/dev). The mode is always chosen by the caller.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable

import structlog

from podstatus.errors import ClientSetupError, ListFailure
from podstatus.k8s.models import ContainerState, ContainerStatus, Event, RawPod

logger = structlog.get_logger()


class ConnectionMode(str, Enum):
    # Authenticate with the pod's service account. Needs view access, e.g.
    # kubectl create clusterrolebinding default-view --clusterrole=view --serviceaccount=default:default
    IN_CLUSTER = "in-cluster"
    # Authenticate with a kubeconfig file, from outside the cluster
    KUBECONFIG = "kubeconfig"


@runtime_checkable
class PodLister(Protocol):
    """Anything that can list the pods of a namespace."""

    async def list_pods(self, namespace: str) -> list[RawPod]: ...


@runtime_checkable
class EventLister(Protocol):
    """Anything that can list the events of a namespace."""

    async def list_events(self, namespace: str) -> list[Event]: ...


@runtime_checkable
class ClusterClient(PodLister, EventLister, Protocol):
    """Full read-only cluster capability, as provided by KubernetesClient."""


class KubernetesClient:
    """
    Read-only async Kubernetes client.

    Wraps kubernetes-asyncio CoreV1Api and converts API objects into the
    typed records in podstatus.k8s.models.

    Usage:
        async with await KubernetesClient.connect(ConnectionMode.KUBECONFIG) as client:
            pods = await client.list_pods("default")
    """

    def __init__(self, core_v1, api_client=None, request_timeout: float | None = None) -> None:
        self._core_v1 = core_v1
        self._api_client = api_client
        self._request_timeout = request_timeout

    @classmethod
    async def connect(
        cls,
        mode: ConnectionMode,
        kubeconfig: str | None = None,
        context: str | None = None,
        request_timeout: float | None = None,
    ) -> "KubernetesClient":
        """Load credentials for the given mode and build the API clients."""
        from kubernetes_asyncio import client as k8s_client
        from kubernetes_asyncio import config as k8s_config

        mode = ConnectionMode(mode)
        configuration = k8s_client.Configuration()
        try:
            if mode is ConnectionMode.IN_CLUSTER:
                k8s_config.load_incluster_config(client_configuration=configuration)
                logger.info("k8s_client_initialized", mode=mode.value)
            else:
                await k8s_config.load_kube_config(
                    config_file=kubeconfig,
                    context=context,
                    client_configuration=configuration,
                )
                logger.info("k8s_client_initialized", mode=mode.value, path=kubeconfig or "~/.kube/config",
                            context=context)
        except Exception as e:
            logger.warning("k8s_client_init_failed", mode=mode.value, error=str(e))
            raise ClientSetupError(f"could not load {mode.value} configuration: {e}") from e

        api_client = k8s_client.ApiClient(configuration)
        return cls(k8s_client.CoreV1Api(api_client), api_client=api_client, request_timeout=request_timeout)

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        if self._api_client is not None:
            await self._api_client.close()
            self._api_client = None

    async def __aenter__(self) -> "KubernetesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _call_options(self) -> dict[str, Any]:
        if self._request_timeout is None:
            return {}
        return {"_request_timeout": self._request_timeout}

    # ── Pod Operations ─────────────────────────────────────────────────────────

    async def list_pods(self, namespace: str) -> list[RawPod]:
        """List pods in a namespace, keeping the API server's ordering."""
        try:
            resp = await self._core_v1.list_namespaced_pod(namespace=namespace, **self._call_options())
        except Exception as e:
            logger.warning("k8s_list_failed", resource="pods", namespace=namespace, error=str(e))
            raise ListFailure(namespace, "pods", e) from e
        return [self._pod_from_api(p) for p in resp.items]

    # ── Event Operations ──────────────────────────────────────────────────────

    async def list_events(self, namespace: str) -> list[Event]:
        """List events in a namespace."""
        try:
            resp = await self._core_v1.list_namespaced_event(namespace=namespace, **self._call_options())
        except Exception as e:
            logger.warning("k8s_list_failed", resource="events", namespace=namespace, error=str(e))
            raise ListFailure(namespace, "events", e) from e
        return [self._event_from_api(e) for e in resp.items]

    # ── Converters ────────────────────────────────────────────────────────────

    @staticmethod
    def _pod_from_api(pod) -> RawPod:
        status = pod.status
        return RawPod(
            name=pod.metadata.name,
            namespace=pod.metadata.namespace,
            phase=status.phase or "Unknown",
            start_time=status.start_time,
            container_statuses=tuple(
                KubernetesClient._container_from_api(cs) for cs in (status.container_statuses or [])
            ),
        )

    @staticmethod
    def _container_from_api(cs) -> ContainerStatus:
        state = cs.state
        waiting_reason = None
        if state is None:
            kind = ContainerState.UNKNOWN
        elif state.waiting is not None:
            kind = ContainerState.WAITING
            waiting_reason = state.waiting.reason
        elif state.running is not None:
            kind = ContainerState.RUNNING
        elif state.terminated is not None:
            kind = ContainerState.TERMINATED
        else:
            kind = ContainerState.UNKNOWN
        return ContainerStatus(
            name=cs.name,
            state=kind,
            restart_count=cs.restart_count or 0,
            waiting_reason=waiting_reason,
        )

    @staticmethod
    def _event_from_api(e) -> Event:
        involved = e.involved_object
        return Event(
            name=e.metadata.name,
            namespace=e.metadata.namespace,
            reason=e.reason or "",
            message=e.message or "",
            type=e.type or "",
            count=e.count or 0,
            involved_object=f"{involved.kind}/{involved.name}" if involved else "",
            last_timestamp=e.last_timestamp or e.event_time,
        )
