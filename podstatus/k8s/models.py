"""
Typed records returned by a cluster client.

These are snapshots of what the API server reported; nothing here talks to
the cluster.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ContainerState(str, Enum):
    WAITING = "waiting"
    RUNNING = "running"
    TERMINATED = "terminated"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ContainerStatus:
    """Lifecycle state and restart counter of one container in a pod."""
    name: str
    state: ContainerState
    restart_count: int = 0
    waiting_reason: str | None = None   # e.g. CrashLoopBackOff, ImagePullBackOff

    def __post_init__(self) -> None:
        if self.restart_count < 0:
            raise ValueError(f"restart_count must be >= 0, got {self.restart_count} for container {self.name!r}")

    @property
    def is_waiting(self) -> bool:
        return self.state is ContainerState.WAITING


@dataclass(frozen=True)
class RawPod:
    """A pod as listed by the cluster, with container statuses in reported order."""
    name: str
    phase: str
    start_time: datetime
    container_statuses: tuple[ContainerStatus, ...] = field(default_factory=tuple)
    namespace: str | None = None

    def __post_init__(self) -> None:
        if self.start_time is None:
            raise ValueError(f"pod {self.name!r} has no start time")
        if self.start_time.tzinfo is None:
            raise ValueError(f"pod {self.name!r} start time must be timezone aware")
        # Accept any sequence but store an immutable one
        object.__setattr__(self, "container_statuses", tuple(self.container_statuses))


@dataclass(frozen=True)
class Event:
    """A cluster event (Warning/Normal) recorded against some object."""
    name: str
    namespace: str
    reason: str
    message: str
    type: str
    count: int = 0
    involved_object: str = ""    # Kind/name
    last_timestamp: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "reason": self.reason,
            "message": self.message,
            "type": self.type,
            "count": self.count,
            "involved_object": self.involved_object,
            "last_timestamp": self.last_timestamp.isoformat() if self.last_timestamp else None,
        }
