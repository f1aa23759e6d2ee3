"""Value types shared with the scripting host.

Usage:
    position = Vector3(100.0, 0.0, 50.0)
    rotation = Rotator(yaw=90.0)
    collision = CollisionType.STATIC_ONLY
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Which side of the network the script runs on."""

    CLIENT = "client"
    SERVER = "server"

    @property
    def tag(self) -> str:
        """Upper-case label used in log lines."""
        return self.name


@dataclass(frozen=True, slots=True)
class Vector3:
    """Immutable 3D vector used for positions, offsets and scales."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, value: Vector3 | tuple[float, float, float]) -> Vector3:
        """Coerce a 3-tuple (or an existing vector) into a Vector3."""
        if isinstance(value, Vector3):
            return value
        x, y, z = value
        return cls(float(x), float(y), float(z))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Rotator:
    """Immutable rotation in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    @classmethod
    def of(cls, value: Rotator | Vector3 | tuple[float, float, float]) -> Rotator:
        """Coerce a 3-tuple or Vector3 (x=pitch, y=yaw, z=roll) into a Rotator."""
        if isinstance(value, Rotator):
            return value
        if isinstance(value, Vector3):
            return cls(value.x, value.y, value.z)
        pitch, yaw, roll = value
        return cls(float(pitch), float(yaw), float(roll))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.pitch, self.yaw, self.roll)


ZERO = Vector3()
ONE = Vector3(1.0, 1.0, 1.0)
NO_ROTATION = Rotator()


class CollisionType(Enum):
    """Collision profile applied to a spawned mesh."""

    NORMAL = "Normal"
    STATIC_ONLY = "StaticOnly"
    NO_COLLISION = "NoCollision"
    IGNORE_ONLY_PAWN = "IgnoreOnlyPawn"


class ComponentMobility(Enum):
    STATIC = "Static"
    STATIONARY = "Stationary"
    MOVABLE = "Movable"


class AttachmentRule(Enum):
    """How a transform is carried over when attaching to a parent."""

    KEEP_RELATIVE = "KeepRelative"
    KEEP_WORLD = "KeepWorld"
    SNAP_TO_TARGET = "SnapToTarget"


class DetachmentRule(Enum):
    """How a transform is carried over when detaching from a parent."""

    KEEP_RELATIVE = "KeepRelative"
    KEEP_WORLD = "KeepWorld"
