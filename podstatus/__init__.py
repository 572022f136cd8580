"""Pod status summaries for a Kubernetes namespace."""

from podstatus.errors import ClientSetupError, ListFailure, PodStatusError
from podstatus.events import fetch_events
from podstatus.k8s import ClusterClient, ConnectionMode, EventLister, KubernetesClient, PodLister
from podstatus.summary import PodSummary, derive_status, sum_restarts, summarize_pods

__version__ = "0.1.0"

__all__ = [
    "ClientSetupError", "ListFailure", "PodStatusError",
    "ClusterClient", "ConnectionMode", "EventLister", "KubernetesClient", "PodLister",
    "PodSummary", "derive_status", "sum_restarts", "summarize_pods",
    "fetch_events",
]
