"""Free-flying camera driven by keyboard and right-button mouse drags."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from starforge.components import CameraComponent, InputComponent, KeyState
from starforge.ecs import Entity, Manager, System
from starforge.input import InputSystem
from starforge.transform import perspective_fov_lh, quaternion_rotation_roll_pitch_yaw
from starforge.utils import SCREEN_HEIGHT, SCREEN_WIDTH, lerp

__all__ = [
    "ASPECT_RATIO",
    "BASE_FOV",
    "CameraSystem",
    "FAR_PLANE",
    "MOUSE_SENSITIVITY",
    "MOVE_SPEED",
    "NEAR_PLANE",
    "SPEED_FOV",
    "VK_LSHIFT",
    "VK_RBUTTON",
]

VK_RBUTTON = 0x02
VK_LSHIFT = 0xA0

BASE_FOV = 65.0
SPEED_FOV = 105.0
MOVE_SPEED = 0.2
MOUSE_SENSITIVITY = 0.005
ASPECT_RATIO = SCREEN_WIDTH / SCREEN_HEIGHT
NEAR_PLANE = 0.1
FAR_PLANE = 20000.0
_BLEND_RATE = 5.0
_BOOST_SPEED = 3.0
_BASE_SPEED = 1.0


class CameraSystem(System):
    """Moves and orients entities that carry both a camera and an input component."""

    def __init__(self, manager: Manager) -> None:
        self.manager = manager
        self.fov = BASE_FOV
        self.base_fov = BASE_FOV
        self.speed_fov = SPEED_FOV
        self.speed = _BASE_SPEED
        self._last_mouse: Optional[tuple[int, int]] = None

    def _is_camera(self, entity: Entity) -> bool:
        return self.manager.has_component(entity, InputComponent) and self.manager.has_component(
            entity, CameraComponent
        )

    def init(self) -> None:
        """Place each camera at its entity, set the projection and tilt it down."""
        for entity in self.manager.entities:
            if not self._is_camera(entity):
                continue
            camera = self.manager.get_component(entity, CameraComponent)
            x, y, z = (float(v) for v in entity.transform.position)
            camera.camera_transform.set_position(x, y, z)
            self.set_fov(self.fov)
            camera.camera_transform.phi = math.pi / 8

    def update(self, delta_time: float) -> None:
        """Apply mouse look, movement keys and the speed boost, then rebuild the view."""
        for entity in self.manager.entities:
            if not entity.is_alive():
                return
            if not self._is_camera(entity):
                continue
            self._update_camera(entity, delta_time)

    def _update_camera(self, entity: Entity, delta_time: float) -> None:
        inputs = self.manager.get_system(InputSystem)
        input_component = self.manager.get_component(entity, InputComponent)
        camera = self.manager.get_component(entity, CameraComponent)
        cam_transform = camera.camera_transform

        current = (int(input_component.mouse_x), int(input_component.mouse_y))
        if self._last_mouse is None:
            self._last_mouse = current

        if inputs.get_mouse_button_state(VK_RBUTTON) == KeyState.DOWN:
            dx = float(current[0] - self._last_mouse[0])
            dy = float(current[1] - self._last_mouse[1])
            cam_transform.theta += dx * MOUSE_SENSITIVITY
            cam_transform.phi += dy * MOUSE_SENSITIVITY
        self._last_mouse = current

        x, y, z = (float(v) for v in entity.transform.position)
        if inputs.get_key_state(ord("Z")) == KeyState.DOWN:
            z += MOVE_SPEED * float(cam_transform.forward[2])
        if inputs.get_key_state(ord("S")) == KeyState.DOWN:
            z -= MOVE_SPEED * float(cam_transform.forward[2])
        if inputs.get_key_state(ord("Q")) == KeyState.DOWN:
            x -= MOVE_SPEED * float(cam_transform.right[0])
        if inputs.get_key_state(ord("D")) == KeyState.DOWN:
            x += MOVE_SPEED * float(cam_transform.right[0])

        blend = _BLEND_RATE * delta_time
        if inputs.get_key_state(VK_LSHIFT) == KeyState.DOWN:
            self.fov = lerp(self.fov, self.speed_fov, blend)
            self.speed = lerp(self.speed, _BOOST_SPEED, blend)
        else:
            self.fov = lerp(self.fov, self.base_fov, blend)
            self.speed = lerp(self.speed, _BASE_SPEED, blend)
        self.set_fov(self.fov)

        if inputs.get_key_state(ord("F")) == KeyState.DOWN:
            inputs.toggle_cursor_lock()

        entity.transform.set_position(x, y, z)
        cam_transform.set_position(x, y, z)
        cam_transform.rotate_quaternion(
            quaternion_rotation_roll_pitch_yaw(cam_transform.phi, cam_transform.theta, 0.0)
        )
        camera.view = np.linalg.inv(cam_transform.matrix)

    def set_fov(self, fov: float) -> None:
        """Set the projection of every camera to a vertical field of view in degrees."""
        for entity in self.manager.entities:
            if not self._is_camera(entity):
                continue
            camera = self.manager.get_component(entity, CameraComponent)
            camera.proj = perspective_fov_lh(
                fov * (math.pi / 180.0), ASPECT_RATIO, NEAR_PLANE, FAR_PLANE
            )