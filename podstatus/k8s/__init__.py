"""Async Kubernetes client layer and the records it returns."""

from podstatus.k8s.client import ClusterClient, ConnectionMode, EventLister, KubernetesClient, PodLister
from podstatus.k8s.models import ContainerState, ContainerStatus, Event, RawPod

__all__ = [
    "ClusterClient", "ConnectionMode", "EventLister", "KubernetesClient", "PodLister",
    "ContainerState", "ContainerStatus", "Event", "RawPod",
]
