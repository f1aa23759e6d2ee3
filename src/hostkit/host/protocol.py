"""Host protocols: the scheduler and world-object calls hostkit consumes.

The host layer abstracts the engine runtime, enabling:
- LocalHost, an in-memory host with a virtual clock (default)
- Bindings to a real engine's scripting API

Usage:
    host = LocalHost()
    ctx = ScriptContext(host=host)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from hostkit.core.types import (
    AttachmentRule,
    CollisionType,
    ComponentMobility,
    DetachmentRule,
    Rotator,
    Vector3,
)


@runtime_checkable
class Scheduler(Protocol):
    """Interval and cooperative-thread primitives of the host."""

    def set_interval(self, func: Callable[[], Any], ms: float) -> Any:
        """Run func every ms milliseconds. Returns an interval handle."""
        ...

    def clear_interval(self, handle: Any) -> None:
        """Cancel an interval. Unknown handles are ignored."""
        ...

    def create_thread(self, func: Callable[[], Any]) -> Any:
        """Start func as a cooperative thread. Returns a thread handle."""
        ...

    def wait(self, ms: float) -> None:
        """Suspend the current thread for ms milliseconds."""
        ...

    def clear_thread(self, handle: Any) -> None:
        """Cancel a thread. Unknown handles are ignored."""
        ...


@runtime_checkable
class WorldHost(Protocol):
    """World-object primitives of the host."""

    def spawn_static_mesh(
        self,
        model: str,
        position: Vector3,
        rotation: Rotator,
        collision: CollisionType,
    ) -> Any:
        """Spawn a static mesh. Returns an object handle."""
        ...

    def attach_to_character(
        self,
        obj: Any,
        character: Any,
        bone: str,
        *,
        offset: Vector3,
        rotation: Rotator,
        scale: Vector3,
        collision: CollisionType,
        mobility: ComponentMobility,
        rule: AttachmentRule,
        weld: bool,
    ) -> None:
        """Attach obj to a bone of character's base mesh."""
        ...

    def detach(
        self,
        obj: Any,
        *,
        rule: DetachmentRule,
        physics: bool,
        collision: CollisionType,
    ) -> None:
        """Detach obj from whatever it is attached to."""
        ...

    def delete_entity(self, obj: Any) -> None:
        """Remove obj from the world."""
        ...


@runtime_checkable
class Host(Scheduler, WorldHost, Protocol):
    """Full host surface: scheduling plus world objects."""
