"""
Pod summaries: a simplified status / restarts / age view of each pod.

A pod only counts as Running when none of its containers is waiting; the
first waiting container's reason (CrashLoopBackOff, ImagePullBackOff, ...)
is reported instead of the pod phase.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import structlog

from podstatus.errors import ListFailure
from podstatus.k8s.client import PodLister
from podstatus.k8s.models import ContainerStatus, RawPod

logger = structlog.get_logger()

DEFAULT_NAMESPACE = "default"


@dataclass(frozen=True)
class PodSummary:
    """Status summary of a single pod."""
    name: str
    status: str
    restart_count: int
    uptime_seconds: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "restart_count": self.restart_count,
            "uptime_seconds": self.uptime_seconds,
        }


def resolve_namespace(namespace: str | None) -> str:
    return namespace or DEFAULT_NAMESPACE


def derive_status(container_statuses: Sequence[ContainerStatus], phase: str) -> str:
    """Return the first waiting container's reason, or the pod phase if none is waiting."""
    for cs in container_statuses:
        if cs.is_waiting:
            return cs.waiting_reason or ""
    return phase


def sum_restarts(container_statuses: Sequence[ContainerStatus]) -> int:
    """Total restart count across all containers of a pod."""
    return sum(cs.restart_count for cs in container_statuses)


def summarize_pod(pod: RawPod, now: datetime) -> PodSummary:
    return PodSummary(
        name=pod.name,
        status=derive_status(pod.container_statuses, pod.phase),
        restart_count=sum_restarts(pod.container_statuses),
        uptime_seconds=(now - pod.start_time).total_seconds(),
    )


async def summarize_pods(
    client: PodLister,
    namespace: str | None = "",
    *,
    now: datetime | None = None,
) -> list[PodSummary]:
    """
    List the pods of a namespace and summarize each one.

    An empty namespace means "default". Summaries come back in the order the
    cluster listed the pods. If the list call fails, ListFailure propagates
    and nothing is returned.
    """
    namespace = resolve_namespace(namespace)
    logger.info("listing_pods", namespace=namespace)

    try:
        pods = await client.list_pods(namespace)
    except ListFailure as e:
        logger.warning("pod_list_failed", namespace=namespace, error=str(e))
        raise

    if now is None:
        now = datetime.now(timezone.utc)
    summaries = [summarize_pod(pod, now) for pod in pods]
    logger.info("pods_summarized", namespace=namespace, count=len(summaries))
    return summaries
