"""4x4 matrix helpers for a right-handed, column-vector 3-D pipeline."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def _vec3(value: ArrayLike) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _mat4(value: ArrayLike) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def normalize(vector: ArrayLike) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    arr = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Build a view matrix looking from ``eye`` towards ``center``."""
    eye_v, center_v, up_v = _vec3(eye), _vec3(center), _vec3(up)
    forward = normalize(center_v - eye_v)
    side = normalize(np.cross(forward, up_v))
    true_up = np.cross(side, forward)

    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = true_up
    result[2, :3] = -forward
    result[0, 3] = -(side @ eye_v)
    result[1, 3] = -(true_up @ eye_v)
    result[2, 3] = forward @ eye_v
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection with clip-space depth in [-1, 1].

    ``fovy`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def rotate(matrix: ArrayLike, angle: float, axis: ArrayLike) -> np.ndarray:
    """Return ``matrix`` multiplied by a rotation of ``angle`` radians about ``axis``."""
    base = _mat4(matrix)
    a = normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    skew = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    rotation = np.identity(4)
    rotation[:3, :3] = c * np.identity(3) + s * skew + (1.0 - c) * np.outer(a, a)
    return base @ rotation


def translate(matrix: ArrayLike, offset: ArrayLike) -> np.ndarray:
    """Return ``matrix`` multiplied by a translation by ``offset``."""
    base = _mat4(matrix)
    translation = np.identity(4)
    translation[:3, 3] = _vec3(offset)
    return base @ translation