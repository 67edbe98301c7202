"""Components that entities can carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

import numpy as np

from starforge.ecs import Component
from starforge.mathhelper import identity4x4
from starforge.transform import Transform
from starforge.utils import Vector3f

__all__ = [
    "AABB",
    "CameraComponent",
    "Collider",
    "InputComponent",
    "KeyState",
    "LightComponent",
    "LightType",
    "Rigidbody",
    "SphereCollider",
    "Tag",
    "TagComponent",
]


@dataclass(eq=False)
class AABB(Component):
    """An axis-aligned bounding box."""

    min: Vector3f = field(default_factory=Vector3f)
    max: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class Collider(Component):
    """A box collider of ``size`` centred at the entity position plus ``offset``."""

    size: Vector3f = field(default_factory=lambda: Vector3f(1.0, 1.0, 1.0))
    offset: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class Rigidbody(Component):
    velocity: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class SphereCollider(Component):
    radius: float = 1.0
    offset: Vector3f = field(default_factory=Vector3f)


class Tag(Enum):
    NONE = 0
    PLAYER = 1
    ENEMY = 2


@dataclass(eq=False)
class TagComponent(Component):
    tag: Tag = Tag.NONE

    def is_tag(self, tag: Tag) -> bool:
        return self.tag is tag

    def compare_tag(self, other: "TagComponent") -> bool:
        return self.tag is other.tag


class KeyState(IntEnum):
    NONE = 0
    PUSH = 1
    DOWN = 2
    UP = 3


@dataclass(eq=False)
class InputComponent(Component):
    """Tracked key states by key code and the last mouse position."""

    key_states: dict[int, KeyState] = field(default_factory=dict)
    mouse_x: float = 0.0
    mouse_y: float = 0.0


@dataclass(eq=False)
class CameraComponent(Component):
    radius: float = 5.0
    proj: np.ndarray = field(default_factory=identity4x4)
    view: np.ndarray = field(default_factory=identity4x4)
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    theta: float = 0.0
    phi: float = 0.0
    camera_transform: Transform = field(default_factory=Transform)

    @property
    def position(self) -> np.ndarray:
        """The camera's world position."""
        return self.camera_transform.position


class LightType(Enum):
    POINT_LIGHT = 0
    SPOT_LIGHT = 1
    DIRECTIONAL_LIGHT = 2


@dataclass(eq=False)
class LightComponent(Component):
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, -1.0, 0.0]))
    color: np.ndarray = field(default_factory=lambda: np.zeros(4))
    strength: np.ndarray = field(default_factory=lambda: np.zeros(3))
    falloff_start: float = 10.0
    falloff_end: float = 10.0
    spot_power: float = 64.0
    sun_theta: float = 0.0
    sun_phi: float = 0.0
    light_type: LightType = LightType.POINT_LIGHT
    light_index: int = 0