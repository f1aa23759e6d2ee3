"""Lifecycle tracking and shutdown.

Architecture Note:
    lifecycle/ is the only stateful piece of hostkit. It never talks to the
    engine directly; every side effect goes through the injected Host.
"""

from hostkit.lifecycle.models import (
    RegistryState,
    ShutdownFailure,
    ShutdownPhase,
    ShutdownReport,
)
from hostkit.lifecycle.registry import LifecycleRegistry

__all__ = [
    "LifecycleRegistry",
    "RegistryState",
    "ShutdownPhase",
    "ShutdownFailure",
    "ShutdownReport",
]
