"""Local in-memory host implementation.

Simple dict-based host with a virtual millisecond clock, suitable for
offline runs and testing. Nothing is rendered; every call is recorded.

Usage:
    host = LocalHost()
    handle = host.set_interval(tick, 100)
    host.advance(250)  # tick runs at t=100 and t=200
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import Any

from hostkit.core.types import (
    AttachmentRule,
    CollisionType,
    ComponentMobility,
    DetachmentRule,
    Rotator,
    Vector3,
)
from hostkit.errors import UnknownHandleError
from hostkit.host.models import Handle, IntervalState, MeshState, ThreadState


class LocalHost:
    """In-memory host. Implements the Host protocol.

    Structure:
        _intervals[handle] = IntervalState  (ordered by creation)
        _threads[handle] = ThreadState      (pending until the next advance)
        _objects[handle] = MeshState

    Time only moves when advance() or wait() is called. Due intervals fire
    in deadline order; intervals due at the same instant fire in creation
    order. A callback may create or clear intervals and threads while the
    clock is advancing.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._counters: dict[str, Iterator[int]] = {}
        self._intervals: dict[Handle, IntervalState] = {}
        self._threads: dict[Handle, ThreadState] = {}
        self._objects: dict[Handle, MeshState] = {}
        self.deleted: list[Handle] = []
        """Handles passed to delete_entity, in call order."""

    def _issue(self, kind: str) -> Handle:
        counter = self._counters.setdefault(kind, itertools.count(1))
        return Handle(kind=kind, index=next(counter))

    def _mesh(self, obj: Any) -> MeshState:
        state = self._objects.get(obj)
        if state is None:
            raise UnknownHandleError(obj, kind="mesh")
        return state

    # Clock

    @property
    def now_ms(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now_ms

    def advance(self, ms: float) -> None:
        """Move the clock forward, starting pending threads and firing due intervals."""
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms} ms)")
        target = self._now_ms + ms
        self._run_pending_threads()

        while True:
            due = self._next_due(target)
            if due is None:
                break
            handle, state = due
            self._now_ms = max(self._now_ms, state.next_due_ms)
            state.next_due_ms += state.period_ms
            state.fired += 1
            state.func()
            self._run_pending_threads()

        self._now_ms = max(self._now_ms, target)

    def _next_due(self, target: float) -> tuple[Handle, IntervalState] | None:
        best: tuple[Handle, IntervalState] | None = None
        for handle, state in self._intervals.items():
            if state.next_due_ms > target:
                continue
            # strict < keeps creation order for equal deadlines
            if best is None or state.next_due_ms < best[1].next_due_ms:
                best = (handle, state)
        return best

    def _run_pending_threads(self) -> None:
        for handle in list(self._threads):
            state = self._threads.get(handle)
            if state is None or state.finished:
                continue
            state.finished = True
            try:
                state.func()
            finally:
                self._threads.pop(handle, None)

    # Scheduler

    def set_interval(self, func: Callable[[], Any], ms: float) -> Handle:
        if ms <= 0:
            raise ValueError(f"Interval period must be positive, got {ms}")
        handle = self._issue("interval")
        self._intervals[handle] = IntervalState(
            func=func, period_ms=float(ms), next_due_ms=self._now_ms + ms
        )
        return handle

    def clear_interval(self, handle: Any) -> None:
        self._intervals.pop(handle, None)

    def create_thread(self, func: Callable[[], Any]) -> Handle:
        handle = self._issue("thread")
        self._threads[handle] = ThreadState(func=func)
        return handle

    def wait(self, ms: float) -> None:
        if ms < 0:
            raise ValueError(f"Cannot wait a negative duration ({ms} ms)")
        self.advance(ms)

    def clear_thread(self, handle: Any) -> None:
        self._threads.pop(handle, None)

    def is_interval_active(self, handle: Any) -> bool:
        return handle in self._intervals

    def fired(self, handle: Handle) -> int:
        """Number of times an active interval has fired."""
        state = self._intervals.get(handle)
        if state is None:
            raise UnknownHandleError(handle, kind="interval")
        return state.fired

    @property
    def interval_count(self) -> int:
        return len(self._intervals)

    @property
    def pending_threads(self) -> int:
        return len(self._threads)

    # World objects

    def spawn_static_mesh(
        self,
        model: str,
        position: Vector3,
        rotation: Rotator,
        collision: CollisionType,
    ) -> Handle:
        handle = self._issue("mesh")
        self._objects[handle] = MeshState(
            model=model,
            position=Vector3.of(position),
            rotation=Rotator.of(rotation),
            collision=collision,
        )
        return handle

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
        state = self._mesh(obj)
        if character is obj:
            raise ValueError(f"Cannot attach {obj} to itself")
        state.collision = collision
        state.mobility = mobility
        state.parent = character
        state.bone = bone
        state.welded = weld
        if rule is AttachmentRule.SNAP_TO_TARGET:
            state.relative_location = Vector3()
            state.relative_rotation = Rotator()
        else:
            state.relative_location = Vector3.of(offset)
            state.relative_rotation = Rotator.of(rotation)
        state.scale = Vector3.of(scale)

    def detach(
        self,
        obj: Any,
        *,
        rule: DetachmentRule,
        physics: bool,
        collision: CollisionType,
    ) -> None:
        state = self._mesh(obj)
        if rule is DetachmentRule.KEEP_RELATIVE:
            state.position = state.relative_location
            state.rotation = state.relative_rotation
        state.parent = None
        state.bone = None
        state.welded = False
        state.physics = physics
        state.collision = collision

    def delete_entity(self, obj: Any) -> None:
        self._mesh(obj)
        del self._objects[obj]
        self.deleted.append(obj)
        for child in self._objects.values():
            if child.parent == obj:
                child.parent = None
                child.bone = None

    def exists(self, obj: Any) -> bool:
        return obj in self._objects

    @property
    def objects(self) -> dict[Handle, MeshState]:
        """Live meshes by handle (read-only view by convention)."""
        return dict(self._objects)
