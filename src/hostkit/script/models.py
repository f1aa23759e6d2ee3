"""Option bundles for attach/detach calls."""

from __future__ import annotations

from dataclasses import dataclass

from hostkit.core.types import ONE, CollisionType, Vector3


@dataclass(frozen=True, slots=True)
class AttachOptions:
    """Extra settings for ScriptContext.attach_entity_to_character.

    Attributes:
        scale: Actor scale while attached.
        collision: Collision profile while attached.
    """

    scale: Vector3 = ONE
    collision: CollisionType = CollisionType.NO_COLLISION


@dataclass(frozen=True, slots=True)
class DetachOptions:
    """Extra settings for ScriptContext.detach_entity.

    Attributes:
        physics: Enable physics simulation once free.
        collision: Collision profile once free.
    """

    physics: bool = False
    collision: CollisionType = CollisionType.STATIC_ONLY
