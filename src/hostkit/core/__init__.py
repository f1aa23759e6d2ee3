"""Host-independent building blocks: value types, templates, call sites."""

from hostkit.core.callsite import UNKNOWN_SITE, CallSite
from hostkit.core.template import format_template
from hostkit.core.types import (
    NO_ROTATION,
    ONE,
    ZERO,
    AttachmentRule,
    CollisionType,
    ComponentMobility,
    DetachmentRule,
    Role,
    Rotator,
    Vector3,
)

__all__ = [
    "CallSite",
    "UNKNOWN_SITE",
    "format_template",
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
]
