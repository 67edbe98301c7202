"""Position, rotation and scale of an object, with the matching 4x4 matrices.

Conventions: row vectors multiplied on the left of row-major matrices,
a left-handed coordinate system, and quaternions stored as (x, y, z, w).
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Sequence

import numpy as np

__all__ = [
    "Transform",
    "look_at_lh",
    "matrix_rotation_quaternion",
    "perspective_fov_lh",
    "quaternion_multiply",
    "quaternion_normalize",
    "quaternion_rotation_axis",
    "quaternion_rotation_roll_pitch_yaw",
    "quaternion_slerp",
]

_log = logging.getLogger(__name__)

_SLERP_ONE_MINUS_EPSILON = 1.0 - 0.00001
_IDENTITY_QUAT = (0.0, 0.0, 0.0, 1.0)


def _as_vector(values: Sequence[float], size: int) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got {arr.shape[0]}")
    return arr


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        return np.zeros_like(v)
    return v / length


def quaternion_rotation_axis(axis: Sequence[float], angle: float) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    unit = _normalize(_as_vector(axis, 3))
    half = 0.5 * angle
    s = math.sin(half)
    return np.array([unit[0] * s, unit[1] * s, unit[2] * s, math.cos(half)])


def quaternion_multiply(q1: Sequence[float], q2: Sequence[float]) -> np.ndarray:
    """Compose two rotations: the result applies ``q1`` first, then ``q2``."""
    qx, qy, qz, qw = _as_vector(q1, 4)
    px, py, pz, pw = _as_vector(q2, 4)
    return np.array(
        [
            pw * qx + px * qw + py * qz - pz * qy,
            pw * qy - px * qz + py * qw + pz * qx,
            pw * qz + px * qy - py * qx + pz * qw,
            pw * qw - px * qx - py * qy - pz * qz,
        ]
    )


def quaternion_normalize(q: Sequence[float]) -> np.ndarray:
    """Scale ``q`` to unit length; a zero quaternion stays zero."""
    return _normalize(_as_vector(q, 4))


def quaternion_slerp(q0: Sequence[float], q1: Sequence[float], t: float) -> np.ndarray:
    """Spherical linear interpolation along the shorter arc from ``q0`` to ``q1``."""
    a = _as_vector(q0, 4)
    b = _as_vector(q1, 4)
    cos_omega = float(a @ b)
    sign = -1.0 if cos_omega < 0.0 else 1.0
    cos_omega *= sign
    if cos_omega < _SLERP_ONE_MINUS_EPSILON:
        sin_omega = math.sqrt(max(0.0, 1.0 - cos_omega * cos_omega))
        omega = math.atan2(sin_omega, cos_omega)
        s0 = math.sin((1.0 - t) * omega) / sin_omega
        s1 = math.sin(t * omega) / sin_omega
    else:
        s0 = 1.0 - t
        s1 = t
    return a * s0 + b * (s1 * sign)


def quaternion_rotation_roll_pitch_yaw(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Quaternion applying roll (Z), then pitch (X), then yaw (Y)."""
    q_roll = quaternion_rotation_axis((0.0, 0.0, 1.0), roll)
    q_pitch = quaternion_rotation_axis((1.0, 0.0, 0.0), pitch)
    q_yaw = quaternion_rotation_axis((0.0, 1.0, 0.0), yaw)
    return quaternion_multiply(quaternion_multiply(q_roll, q_pitch), q_yaw)


def matrix_rotation_quaternion(q: Sequence[float]) -> np.ndarray:
    """4x4 rotation matrix of a unit quaternion."""
    x, y, z, w = _as_vector(q, 4)
    return np.array(
        [
            [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y + z * w), 2.0 * (x * z - y * w), 0.0],
            [2.0 * (x * y - z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z + x * w), 0.0],
            [2.0 * (x * z + y * w), 2.0 * (y * z - x * w), 1.0 - 2.0 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at_lh(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Left-handed view matrix for a camera at ``eye`` looking at ``target``."""
    eye_v = _as_vector(eye, 3)
    forward = _normalize(_as_vector(target, 3) - eye_v)
    right = _normalize(np.cross(_as_vector(up, 3), forward))
    true_up = np.cross(forward, right)
    view = np.eye(4)
    view[:3, 0] = right
    view[:3, 1] = true_up
    view[:3, 2] = forward
    view[3, :3] = (-(right @ eye_v), -(true_up @ eye_v), -(forward @ eye_v))
    return view


def perspective_fov_lh(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth [near, far] to [0, 1]."""
    half = 0.5 * fov_y
    height = math.cos(half) / math.sin(half)
    width = height / aspect
    depth = far / (far - near)
    return np.array(
        [
            [width, 0.0, 0.0, 0.0],
            [0.0, height, 0.0, 0.0],
            [0.0, 0.0, depth, 1.0],
            [0.0, 0.0, -depth * near, 0.0],
        ]
    )


class Transform:
    """Scale, rotation and position combined into a world matrix (S * R * T)."""

    def __init__(self) -> None:
        self.phi = math.pi / 2
        self.theta = 0.0
        self.identity()

    def identity(self) -> None:
        """Reset scale, rotation and position."""
        self._scale = np.ones(3)
        self._rotation = np.array(_IDENTITY_QUAT)
        self._rotation_matrix = np.eye(4)
        self._position = np.zeros(3)
        self.update_matrix()

    def update_matrix(self) -> None:
        """Rebuild the world matrix and the local axes from the current state."""
        scaling = np.diag([*self._scale, 1.0])
        translation = np.eye(4)
        translation[3, :3] = self._position
        self._matrix = scaling @ self._rotation_matrix @ translation
        self._right = self._rotation_matrix[0, :3].copy()
        self._up = self._rotation_matrix[1, :3].copy()
        self._forward = self._rotation_matrix[2, :3].copy()

    def _apply_rotation(self, quat: np.ndarray) -> None:
        self._rotation = quat
        self._rotation_matrix = matrix_rotation_quaternion(quat)
        self.update_matrix()

    def add_rotate(self, yaw: float, pitch: float, roll: float) -> None:
        """Rotate further about the current local axes."""
        q_pitch = quaternion_rotation_axis(self._right, pitch)
        q_yaw = quaternion_rotation_axis(self._up, yaw)
        q_roll = quaternion_rotation_axis(self._forward, roll)
        combined = quaternion_multiply(q_roll, quaternion_multiply(q_pitch, q_yaw))
        combined = quaternion_multiply(combined, self._rotation)
        self._apply_rotation(quaternion_normalize(combined))

    def set_rotation(self, yaw: float, pitch: float, roll: float) -> None:
        """Replace the rotation with one about the world axes."""
        q_pitch = quaternion_rotation_axis((1.0, 0.0, 0.0), pitch)
        q_yaw = quaternion_rotation_axis((0.0, 1.0, 0.0), yaw)
        q_roll = quaternion_rotation_axis((0.0, 0.0, 1.0), roll)
        combined = quaternion_multiply(q_roll, quaternion_multiply(q_pitch, q_yaw))
        self._apply_rotation(quaternion_normalize(combined))

    def rotate_quaternion(self, quat: Sequence[float]) -> None:
        """Replace the rotation with ``quat``, normalised."""
        self._apply_rotation(quaternion_normalize(quat))

    def slerp_rotation(self, target_quat: Sequence[float], t: float) -> None:
        """Move the rotation towards ``target_quat``; ``t`` is clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        blended = quaternion_slerp(self._rotation, target_quat, t)
        self._apply_rotation(quaternion_normalize(blended))

    def set_position(self, x: float, y: float, z: float) -> None:
        self._position = np.array([x, y, z], dtype=float)
        self.update_matrix()

    def lerp_position(self, target: Sequence[float], t: float) -> None:
        """Move the position towards ``target``; ``t`` is clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        goal = _as_vector(target, 3)
        self._position = self._position + (goal - self._position) * t
        self.update_matrix()

    def translate(self, x: float, y: float, z: float) -> None:
        self._position = self._position + np.array([x, y, z], dtype=float)
        self.update_matrix()

    def set_scale(self, x: float, y: float, z: float) -> None:
        self._scale = np.array([x, y, z], dtype=float)
        self.update_matrix()

    def look_at(self, target: Sequence[float]) -> None:
        """Use the view matrix towards ``target`` as the rotation matrix.

        Does nothing when ``target`` equals the current position.
        """
        goal = _as_vector(target, 3)
        if np.array_equal(goal, self._position):
            _log.debug("look_at target equals position; ignored")
            return
        self._rotation_matrix = look_at_lh(self._position, goal, (0.0, 1.0, 0.0))
        self.update_matrix()

    def copy(self) -> "Transform":
        """Return an independent copy."""
        return copy.deepcopy(self)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._rotation_matrix.copy()

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def rotation(self) -> np.ndarray:
        """The rotation quaternion (x, y, z, w)."""
        return self._rotation.copy()