"""Host backends."""

from hostkit.host.local import LocalHost
from hostkit.host.models import Handle, IntervalState, MeshState, ThreadState
from hostkit.host.protocol import Host, Scheduler, WorldHost

__all__ = [
    "Host",
    "Scheduler",
    "WorldHost",
    "LocalHost",
    "Handle",
    "MeshState",
    "IntervalState",
    "ThreadState",
]
