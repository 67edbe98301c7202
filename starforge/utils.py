"""Vector types and small helpers for printing and screen-space picking."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

import numpy as np

__all__ = [
    "SCREEN_HEIGHT",
    "SCREEN_WIDTH",
    "Vector3f",
    "Vector3i",
    "format_matrix",
    "format_vector",
    "lerp",
    "normalize",
    "screen_to_world_ray",
]

SCREEN_WIDTH = 1920.0
SCREEN_HEIGHT = 1080.0

_MATRIX_HEADER = "----- Matrice Transform -----"
_MATRIX_FOOTER = "----------------------------"


def _fmt(value: float) -> str:
    return format(float(value), "g")


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a 4x4 matrix as text, one row per line, between rulers."""
    rows = np.asarray(matrix, dtype=float)
    if rows.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    lines = [_MATRIX_HEADER]
    lines.extend(" ".join(_fmt(v) for v in row) for row in rows)
    lines.append(_MATRIX_FOOTER)
    return "\n".join(lines)


def format_vector(name: str, vec: Sequence[float]) -> str:
    """Render a named 3-vector as ``name: (x, y, z)``."""
    x, y, z = (float(v) for v in vec)
    return f"{name}: ({_fmt(x)}, {_fmt(y)}, {_fmt(z)})"


def normalize(vec: Sequence[float]) -> np.ndarray:
    """Return ``vec`` scaled to unit length; a zero vector stays zero."""
    v = np.asarray(list(vec), dtype=float)
    if v.shape != (3,):
        raise ValueError("expected a 3-vector")
    length = float(np.linalg.norm(v))
    if length == 0.0:
        return np.zeros(3)
    return v / length


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a + t * (b - a)


@dataclass
class Vector3f:
    """A mutable float 3-vector; division by zero yields the zero vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Any) -> "Vector3f":
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Any) -> "Vector3f":
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3f":
        return Vector3f(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vector3f":
        if scalar == 0.0:
            return Vector3f()
        return Vector3f(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other: "Vector3f") -> "Vector3f":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3f") -> "Vector3f":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> "Vector3f":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vector3f":
        if scalar != 0.0:
            self.x /= scalar
            self.y /= scalar
            self.z /= scalar
        return self

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3f":
        """Unit vector in the same direction, or the zero vector."""
        mag = self.magnitude()
        return self / mag if mag > 0.0 else Vector3f()


@dataclass(unsafe_hash=True)
class Vector3i:
    """A mutable, hashable integer 3-vector, used for grid cells."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Any) -> "Vector3i":
        if not isinstance(other, Vector3i):
            return NotImplemented
        return Vector3i(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Any) -> "Vector3i":
        if not isinstance(other, Vector3i):
            return NotImplemented
        return Vector3i(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: int) -> "Vector3i":
        return Vector3i(self.x * scalar, self.y * scalar, self.z * scalar)


def screen_to_world_ray(screen_pos: Sequence[float], camera: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Return the origin and unit direction of the world ray through a screen pixel.

    ``camera`` provides ``proj`` and ``view`` 4x4 matrices and a ``position``.
    """
    sx, sy = screen_pos
    x = (2.0 * sx) / SCREEN_WIDTH - 1.0
    y = 1.0 - (2.0 * sy) / SCREEN_HEIGHT

    inv_proj = np.linalg.inv(np.asarray(camera.proj, dtype=float))
    inv_view = np.linalg.inv(np.asarray(camera.view, dtype=float))

    eye = np.array([x, y, 1.0, 1.0]) @ inv_proj
    eye = eye / eye[3]
    ray_eye = np.array([eye[0], eye[1], 1.0])

    direction = normalize(ray_eye @ inv_view[:3, :3])
    origin = np.asarray(camera.position, dtype=float)[:3].copy()
    return origin, direction