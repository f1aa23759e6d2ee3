"""hostkit: lifecycle and logging helpers for game-host scripts.

Usage:
    from hostkit import ScriptContext, LocalHost, Vector3, Rotator

    with ScriptContext(host=LocalHost()) as ctx:
        crate = ctx.create_object("crate", Vector3(0, 0, 0), Rotator())
        ctx.create_interval(lambda: ctx.print("tick"), 1000)
        ctx.printf("spawned {obj}", {"obj": crate})
    # interval cleared and crate deleted on exit
"""

__version__ = "0.1.0"

# Core primitives
from hostkit.core import (
    NO_ROTATION,
    ONE,
    ZERO,
    AttachmentRule,
    CallSite,
    CollisionType,
    ComponentMobility,
    DetachmentRule,
    Role,
    Rotator,
    Vector3,
    format_template,
)

# Configuration
from hostkit.config import HostSettings

# Errors
from hostkit.errors import HostkitError, RegistryClosedError, UnknownHandleError

# Host backends
from hostkit.host import Handle, Host, LocalHost, MeshState, Scheduler, WorldHost

# Lifecycle
from hostkit.lifecycle import (
    LifecycleRegistry,
    ShutdownFailure,
    ShutdownPhase,
    ShutdownReport,
)

# Logging
from hostkit.log import HostLogger, RoleFormatter, configure_logging

# Script facade
from hostkit.script import AttachOptions, DetachOptions, ScriptContext

__all__ = [
    # Version
    "__version__",
    # Core
    "Role",
    "Vector3",
    "Rotator",
    "ZERO",
    "ONE",
    "NO_ROTATION",
    "CollisionType",
    "ComponentMobility",
    "AttachmentRule",
    "DetachmentRule",
    "CallSite",
    "format_template",
    # Config
    "HostSettings",
    # Errors
    "HostkitError",
    "RegistryClosedError",
    "UnknownHandleError",
    # Host
    "Host",
    "Scheduler",
    "WorldHost",
    "LocalHost",
    "Handle",
    "MeshState",
    # Lifecycle
    "LifecycleRegistry",
    "ShutdownPhase",
    "ShutdownFailure",
    "ShutdownReport",
    # Logging
    "HostLogger",
    "RoleFormatter",
    "configure_logging",
    # Script
    "ScriptContext",
    "AttachOptions",
    "DetachOptions",
]
