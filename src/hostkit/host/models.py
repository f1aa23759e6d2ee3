"""Data models for the in-memory host.

Usage:
    handle = Handle(kind="mesh", index=3)
    state = host.objects[handle]   # MeshState
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hostkit.core.types import (
    NO_ROTATION,
    ONE,
    ZERO,
    CollisionType,
    ComponentMobility,
    Rotator,
    Vector3,
)


@dataclass(frozen=True, slots=True)
class Handle:
    """Opaque identifier issued by LocalHost for intervals, threads and meshes.

    Indices are unique per kind for the lifetime of the host and never reused.
    """

    kind: str
    index: int

    def __str__(self) -> str:
        return f"{self.kind}#{self.index}"


@dataclass(slots=True)
class MeshState:
    """Host-side state of a spawned static mesh.

    Attributes:
        model: Asset identifier the mesh was spawned from.
        position: World position at spawn (or last detach).
        rotation: World rotation at spawn.
        collision: Current collision profile.
        mobility: Root component mobility.
        parent: Character the mesh is attached to, None when free.
        bone: Bone on the parent's skeleton, None when free.
        relative_location: Offset from the bone while attached.
        relative_rotation: Rotation relative to the bone while attached.
        scale: Actor scale.
        welded: Whether the attachment welds simulated bodies.
        physics: Whether physics simulation was enabled on detach.
    """

    model: str
    position: Vector3
    rotation: Rotator
    collision: CollisionType
    mobility: ComponentMobility = ComponentMobility.STATIC
    parent: Any = None
    bone: str | None = None
    relative_location: Vector3 = ZERO
    relative_rotation: Rotator = NO_ROTATION
    scale: Vector3 = ONE
    welded: bool = False
    physics: bool = False

    @property
    def attached(self) -> bool:
        return self.parent is not None


@dataclass(slots=True)
class IntervalState:
    """Scheduling state of one LocalHost interval."""

    func: Callable[[], Any]
    period_ms: float
    next_due_ms: float
    fired: int = 0


@dataclass(slots=True)
class ThreadState:
    """A thread waiting for LocalHost to start it."""

    func: Callable[[], Any]
    finished: bool = False
