"""ScriptContext: the per-script facade over host, registry and logger.

Usage:
    ctx = ScriptContext(host=LocalHost(), settings=HostSettings(role="client"))

    # Intervals and objects are torn down automatically on shutdown
    ctx.create_interval(lambda: ctx.print("tick"), 1000)
    pickaxe = ctx.create_object("pickaxe", Vector3(0, 0, 0), Rotator())
    ctx.attach_entity_to_character(pickaxe, player, "hand_r")

    ctx.on_shutdown(lambda: ctx.printf("bye {name}", {"name": "ada"}))
    ctx.shutdown()

    # Or scope the whole script
    with ScriptContext() as ctx:
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from hostkit.config import HostSettings
from hostkit.core.types import (
    NO_ROTATION,
    ZERO,
    AttachmentRule,
    CollisionType,
    ComponentMobility,
    DetachmentRule,
    Rotator,
    Vector3,
)
from hostkit.host.local import LocalHost
from hostkit.host.protocol import Host
from hostkit.lifecycle import LifecycleRegistry, ShutdownReport
from hostkit.log import HostLogger, configure_logging
from hostkit.script.models import AttachOptions, DetachOptions


class ScriptContext:
    """Everything a script needs from the host, with cleanup on shutdown.

    Owns the lifecycle registry and the logger; the host is injected.
    Spawn/attach/detach/delete are passthroughs to the host, with spawned
    objects and intervals tracked for the shutdown sweep.

    Args:
        host: Engine bindings. Defaults to a fresh LocalHost.
        settings: Role, log level and defaults. Defaults to HostSettings().
        registry: Lifecycle registry. Defaults to one bound to host.
        logger: Role-tagged logger. Defaults to one built from settings.
        configure_log: Install the console handler on construction.
    """

    def __init__(
        self,
        host: Host | None = None,
        settings: HostSettings | None = None,
        registry: LifecycleRegistry | None = None,
        logger: HostLogger | None = None,
        configure_log: bool = True,
    ):
        self._settings = settings or HostSettings()
        self._host = host if host is not None else LocalHost()
        self._logger = logger or HostLogger(self._settings)
        self._registry = registry or LifecycleRegistry(self._host, logger=self._logger)
        if configure_log:
            configure_logging(self._settings)

    @property
    def host(self) -> Host:
        return self._host

    @property
    def settings(self) -> HostSettings:
        return self._settings

    @property
    def registry(self) -> LifecycleRegistry:
        return self._registry

    @property
    def logger(self) -> HostLogger:
        return self._logger

    # Lifecycle

    def init(self) -> None:
        """Open (or reopen after shutdown) the lifecycle registry."""
        self._registry.init()

    def start_shutdown(self) -> ShutdownReport:
        """Run the registered shutdown callbacks only."""
        return self._registry.run_shutdown_callbacks()

    def on_shutdown(self, func: Callable[[], Any]) -> None:
        self._registry.on_shutdown(func)

    def shutdown(self) -> ShutdownReport:
        """Run shutdown callbacks, then clear intervals, then delete objects."""
        return self._registry.shutdown()

    def __enter__(self) -> ScriptContext:
        self.init()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.shutdown()

    # Scheduling

    def create_interval(self, func: Callable[[], Any], ms: float) -> Any:
        """Call func every ms milliseconds until cleared or shut down."""
        return self._registry.create_interval(func, ms, stacklevel=2)

    def clear_interval(self, handle: Any) -> None:
        self._registry.clear_interval(handle, stacklevel=2)

    def create_thread(self, func: Callable[[], Any]) -> Any:
        """Start func as a host thread. Threads are not tracked for shutdown."""
        return self._host.create_thread(func)

    def wait(self, ms: float) -> None:
        self._host.wait(ms)

    def clear_thread(self, handle: Any) -> None:
        self._host.clear_thread(handle)

    # Logging

    def print(self, *values: Any) -> None:
        """Log values at INFO tagged with role and the caller's location."""
        self._logger.log(*values, stacklevel=2)

    def printf(self, template: str, args: Mapping[Any, Any] | None = None) -> None:
        """Substitute ``{key}`` placeholders from args and log the result."""
        self._logger.printf(template, args, stacklevel=2)

    # World objects

    def create_object(
        self,
        model: str,
        position: Vector3 | tuple[float, float, float],
        rotation: Rotator | Vector3 | tuple[float, float, float],
    ) -> Any:
        """Spawn a static-collision mesh and track it for deletion on shutdown."""
        self._registry.require_open("create object")
        obj = self._host.spawn_static_mesh(
            model,
            Vector3.of(position),
            Rotator.of(rotation),
            CollisionType.STATIC_ONLY,
        )
        self._registry.track_object(obj, stacklevel=2)
        return obj

    def attach_entity_to_character(
        self,
        obj: Any,
        character: Any,
        bone: str | None = None,
        offset: Vector3 | tuple[float, float, float] = ZERO,
        rotation: Rotator | Vector3 | tuple[float, float, float] = NO_ROTATION,
        options: AttachOptions | None = None,
    ) -> None:
        """Weld obj to a bone of character, keeping the given relative transform.

        The object becomes movable. Bone defaults to ``settings.default_bone``.
        """
        options = options or AttachOptions()
        self._host.attach_to_character(
            obj,
            character,
            bone or self._settings.default_bone,
            offset=Vector3.of(offset),
            rotation=Rotator.of(rotation),
            scale=Vector3.of(options.scale),
            collision=options.collision,
            mobility=ComponentMobility.MOVABLE,
            rule=AttachmentRule.KEEP_RELATIVE,
            weld=True,
        )

    def detach_entity(self, obj: Any, options: DetachOptions | None = None) -> None:
        """Detach obj, keeping its world transform."""
        options = options or DetachOptions()
        self._host.detach(
            obj,
            rule=DetachmentRule.KEEP_WORLD,
            physics=options.physics,
            collision=options.collision,
        )

    def delete_object(self, obj: Any) -> None:
        """Delete obj from the world and stop tracking it."""
        self._registry.delete_object(obj, stacklevel=2)
