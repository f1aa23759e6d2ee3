"""Tests for ScriptContext, the script-facing facade."""

import inspect
import logging

import pytest

from hostkit import (
    AttachOptions,
    CallSite,
    CollisionType,
    ComponentMobility,
    DetachOptions,
    HostSettings,
    RegistryClosedError,
    Rotator,
    RoleFormatter,
    ScriptContext,
    Vector3,
)


def test_create_object_spawns_static_and_tracks(ctx, host):
    obj = ctx.create_object("pickaxe", (10, 0, 5), (0, 90, 0))

    state = host.objects[obj]
    assert state.model == "pickaxe"
    assert state.position == Vector3(10, 0, 5)
    assert state.rotation == Rotator(0, 90, 0)
    assert state.collision is CollisionType.STATIC_ONLY
    assert ctx.registry.is_tracked(obj)


def test_delete_object_untracks(ctx, host):
    obj = ctx.create_object("pickaxe", Vector3(), Rotator())

    ctx.delete_object(obj)

    assert not host.exists(obj)
    assert not ctx.registry.is_tracked(obj)


def test_attach_uses_defaults(ctx, host):
    """Default bone is hand_r, scale is unit, collision is off, object becomes movable."""
    obj = ctx.create_object("pickaxe", Vector3(), Rotator())

    ctx.attach_entity_to_character(obj, "player", offset=(1, 2, 3), rotation=(0, 0, 90))

    state = host.objects[obj]
    assert state.parent == "player"
    assert state.bone == "hand_r"
    assert state.relative_location == Vector3(1, 2, 3)
    assert state.relative_rotation == Rotator(0, 0, 90)
    assert state.scale == Vector3(1, 1, 1)
    assert state.collision is CollisionType.NO_COLLISION
    assert state.mobility is ComponentMobility.MOVABLE
    assert state.welded


def test_attach_honours_options_and_settings_bone(host):
    ctx = ScriptContext(
        host=host, settings=HostSettings(default_bone="spine_03"), configure_log=False
    )
    obj = ctx.create_object("backpack", Vector3(), Rotator())

    ctx.attach_entity_to_character(
        obj,
        "player",
        options=AttachOptions(scale=Vector3(0.5, 0.5, 0.5), collision=CollisionType.IGNORE_ONLY_PAWN),
    )

    state = host.objects[obj]
    assert state.bone == "spine_03"
    assert state.scale == Vector3(0.5, 0.5, 0.5)
    assert state.collision is CollisionType.IGNORE_ONLY_PAWN


def test_detach_defaults_and_options(ctx, host):
    obj = ctx.create_object("pickaxe", Vector3(), Rotator())
    ctx.attach_entity_to_character(obj, "player", "hand_l")

    ctx.detach_entity(obj)
    state = host.objects[obj]
    assert not state.attached
    assert state.physics is False
    assert state.collision is CollisionType.STATIC_ONLY

    ctx.attach_entity_to_character(obj, "player")
    ctx.detach_entity(obj, DetachOptions(physics=True, collision=CollisionType.NORMAL))
    assert state.physics is True
    assert state.collision is CollisionType.NORMAL


def test_threads_pass_through_untracked(ctx, host):
    ran = []
    handle = ctx.create_thread(lambda: ran.append(1))
    ctx.wait(0)

    ctx.clear_thread(handle)

    assert ran == [1]
    assert len(ctx.registry) == 0


def test_intervals_tracked_and_cleared(ctx, host):
    ticks = []
    handle = ctx.create_interval(lambda: ticks.append(1), 100)
    ctx.wait(250)

    ctx.clear_interval(handle)
    ctx.clear_interval(handle)
    ctx.wait(250)

    assert ticks == [1, 1]
    assert ctx.registry.intervals == ()


def test_print_reports_script_location(ctx, caplog):
    caplog.set_level(logging.INFO, logger="hostkit")

    line = inspect.currentframe().f_lineno + 1
    ctx.print("hello", 42)

    rendered = RoleFormatter().format(caplog.records[-1])
    assert rendered == f"[INFO] [SERVER] hello 42 (test_context.py:{line})"


def test_printf_reports_script_location(ctx, caplog):
    caplog.set_level(logging.INFO, logger="hostkit")

    line = inspect.currentframe().f_lineno + 1
    ctx.printf("{who} picked up {what}", {"who": "ada", "what": "pickaxe"})

    rendered = RoleFormatter().format(caplog.records[-1])
    assert rendered == f"[INFO] [SERVER] ada picked up pickaxe (test_context.py:{line})"


def test_start_shutdown_runs_only_callbacks(ctx, host):
    obj = ctx.create_object("crate", Vector3(), Rotator())
    calls = []
    ctx.on_shutdown(lambda: calls.append(1))

    report = ctx.start_shutdown()

    assert calls == [1]
    assert report.callbacks_run == 1
    assert host.exists(obj)


def test_shutdown_then_init_allows_reuse(ctx, host):
    first = ctx.create_object("crate", Vector3(), Rotator())
    ctx.shutdown()

    with pytest.raises(RegistryClosedError):
        ctx.create_object("crate", Vector3(), Rotator())
    assert list(host.objects) == []

    ctx.init()
    second = ctx.create_object("crate", Vector3(), Rotator())

    assert host.deleted == [first]
    assert ctx.registry.objects == (second,)


def test_context_manager_shuts_down_on_exit(host):
    with ScriptContext(host=host, configure_log=False) as ctx:
        obj = ctx.create_object("crate", Vector3(), Rotator())
        ctx.create_interval(lambda: None, 10)

    assert host.deleted == [obj]
    assert host.interval_count == 0


def test_context_manager_shuts_down_on_error(host):
    with pytest.raises(KeyError):
        with ScriptContext(host=host, configure_log=False) as ctx:
            obj = ctx.create_object("crate", Vector3(), Rotator())
            raise KeyError("script bug")

    assert host.deleted == [obj]


def test_tracked_resources_remember_script_location(ctx):
    """Sites recorded through the facade point at the script, not at context.py."""
    line = inspect.currentframe().f_lineno + 1
    handle = ctx.create_interval(lambda: None, 10)
    obj = ctx.create_object("crate", Vector3(), Rotator())

    assert ctx.registry.site_of(handle) == CallSite("test_context.py", line)
    assert ctx.registry.site_of(obj) == CallSite("test_context.py", line + 1)


def test_clearing_untracked_interval_logs_script_location(ctx, caplog):
    caplog.set_level(logging.DEBUG, logger="hostkit")
    handle = ctx.create_interval(lambda: None, 10)
    ctx.clear_interval(handle)

    line = inspect.currentframe().f_lineno + 1
    ctx.clear_interval(handle)

    record = caplog.records[-1]
    assert "was not tracked" in record.getMessage()
    assert record.callsite == CallSite("test_context.py", line)
