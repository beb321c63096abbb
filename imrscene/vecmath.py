"""Scalar helpers and 4x4 matrix utilities shared by the shaders and the camera.

Matrices are row-major numpy arrays that multiply column vectors: ``m @ v``.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Sequence, Union

import numpy as np

Scalar = Union[float, int]
VectorLike = Union[Sequence[float], np.ndarray]


def clamp(value: Scalar, low: Scalar, high: Scalar) -> Scalar:
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def step(edge: float, x: float) -> float:
    """Return 0.0 when ``x`` is below ``edge``, otherwise 1.0."""
    if x < edge:
        return 0.0
    return 1.0


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation between 0 and 1 as ``x`` goes from ``edge0`` to ``edge1``."""
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def mix(x, y, a: float):
    """Linear blend ``x * (1 - a) + y * a`` of scalars or vectors."""
    if isinstance(x, Real) and isinstance(y, Real):
        return float(x) * (1.0 - a) + float(y) * a
    return np.asarray(x, dtype=float) * (1.0 - a) + np.asarray(y, dtype=float) * a


def normalize(v: VectorLike) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Build a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def identity_mat4() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.identity(4, dtype=float)


def translate_mat4(offset: VectorLike) -> np.ndarray:
    """Matrix translating points by ``offset``."""
    x, y, z = (float(c) for c in offset)
    m = identity_mat4()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def rotate_axis_mat4(axis: int, angle: float) -> np.ndarray:
    """Matrix rotating by ``angle`` radians about coordinate axis 0, 1 or 2."""
    if axis not in (0, 1, 2):
        raise ValueError(f"axis must be 0, 1 or 2, not {axis!r}")
    m = np.zeros((4, 4), dtype=float)
    m[3, 3] = 1.0
    t = (axis + 2) % 3
    s = (axis + 1) % 3
    c = math.cos(angle)
    sn = math.sin(angle)
    m[t, t] = c
    m[t, s] = -sn
    m[s, t] = sn
    m[s, s] = c
    m[axis, axis] = 1.0
    return m


def perspective_mat4(aspect: float, fov: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fov`` is the vertical field of view in degrees.

    Depth runs from 0 at the near plane to 1 at the far plane, looking down -Z.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    s = 1.0 / math.tan(math.radians(fov) * 0.5)
    m = np.zeros((4, 4), dtype=float)
    m[0, 0] = s / aspect
    m[1, 1] = s
    m[2, 2] = -far / (far - near)
    m[2, 3] = -(far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def transform_point(matrix: np.ndarray, point: VectorLike) -> np.ndarray:
    """Apply ``matrix`` to a 3D point and divide by the resulting w."""
    homogeneous = np.append(np.asarray(point, dtype=float), 1.0)
    result = np.asarray(matrix, dtype=float) @ homogeneous
    w = result[3]
    if w == 0.0:
        raise ZeroDivisionError("transformed point has w == 0")
    return result[:3] / w