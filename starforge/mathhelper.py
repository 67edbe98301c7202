"""Small numeric helpers: random numbers, interpolation, angles and matrices."""

from __future__ import annotations

import math
import random
from typing import Sequence, TypeVar

import numpy as np

__all__ = [
    "INFINITY",
    "PI",
    "angle_from_xy",
    "clamp",
    "identity4x4",
    "inverse_transpose",
    "lerp",
    "rand_f",
    "rand_hemisphere_unit_vec3",
    "rand_int",
    "rand_unit_vec3",
    "spherical_to_cartesian",
]

INFINITY = 3.4028234663852886e38
PI = 3.1415926535

T = TypeVar("T")


def rand_f(a: float = 0.0, b: float = 1.0) -> float:
    """Return a random float in [a, b)."""
    return a + random.random() * (b - a)


def rand_int(a: int, b: int) -> int:
    """Return a random integer in [a, b], both ends included."""
    return random.randint(a, b)


def lerp(a: T, b: T, t: float) -> T:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


def clamp(x: T, low: T, high: T) -> T:
    """Clamp ``x`` into ``[low, high]``."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def _ratio(y: float, x: float) -> float:
    if x != 0.0:
        return y / x
    if y == 0.0:
        return math.nan
    return math.copysign(math.inf, y) * math.copysign(1.0, x)


def angle_from_xy(x: float, y: float) -> float:
    """Return the polar angle of the point (x, y) in [0, 2*PI)."""
    theta = math.atan(_ratio(y, x))
    if x >= 0.0:
        if theta < 0.0:
            theta += 2.0 * PI
        return theta
    return theta + PI


def spherical_to_cartesian(radius: float, theta: float, phi: float) -> np.ndarray:
    """Convert spherical coordinates to a homogeneous point (x, y, z, 1)."""
    return np.array(
        [
            radius * math.sin(phi) * math.cos(theta),
            radius * math.cos(phi),
            radius * math.sin(phi) * math.sin(theta),
            1.0,
        ]
    )


def inverse_transpose(m: Sequence[Sequence[float]]) -> np.ndarray:
    """Inverse-transpose of a 4x4 matrix with its translation row removed."""
    a = np.array(m, dtype=float)
    if a.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    a[3] = (0.0, 0.0, 0.0, 1.0)
    return np.linalg.inv(a).T


def identity4x4() -> np.ndarray:
    """Return a fresh 4x4 identity matrix."""
    return np.eye(4)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        return np.zeros(3)
    return v / length


def _random_in_unit_ball() -> np.ndarray:
    while True:
        v = np.array([rand_f(-1.0, 1.0) for _ in range(3)])
        if float(v @ v) <= 1.0:
            return v


def rand_unit_vec3() -> np.ndarray:
    """Return a random, evenly distributed unit 3-vector."""
    return _normalize(_random_in_unit_ball())


def rand_hemisphere_unit_vec3(n: Sequence[float]) -> np.ndarray:
    """Return a random unit 3-vector in the hemisphere around ``n``."""
    normal = np.asarray(n, dtype=float)[:3]
    while True:
        v = _random_in_unit_ball()
        if float(normal @ v) < 0.0:
            continue
        return _normalize(v)