"""Cube geometry, push-constant timing and per-frame transforms of the compute demos."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .camera import Camera, camera_view_matrix
from .vecmath import VectorLike, identity_mat4, rotate_axis_mat4, transform_point, translate_mat4, vec3

_WORKGROUP_SIZE = 32
_TIME_WRAP_MICROS = 10_000_000_000


def _vec(v: VectorLike) -> np.ndarray:
    return np.asarray(v, dtype=float)


@dataclass
class Triangle:
    """Three vertices and a flat colour."""

    v0: np.ndarray
    v1: np.ndarray
    v2: np.ndarray
    color: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.v0 = _vec(self.v0)
        self.v1 = _vec(self.v1)
        self.v2 = _vec(self.v2)
        self.color = _vec(self.color)

    @property
    def vertices(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.v0, self.v1, self.v2

    def transformed(self, matrix: np.ndarray) -> "Triangle":
        """A copy with every vertex moved by ``matrix``."""
        return transform_triangle(matrix, self)


def make_cube() -> List[Triangle]:
    """The twelve triangles of the unit cube spanning (0,0,0)..(1,1,1)."""
    a = vec3(0, 0, 0)
    b = vec3(1, 0, 0)
    c = vec3(1, 1, 0)
    d = vec3(0, 1, 0)
    e = vec3(0, 0, 1)
    f = vec3(1, 0, 1)
    g = vec3(1, 1, 1)
    h = vec3(0, 1, 1)

    faces = [
        ((h, d, c, g), vec3(0, 1, 0)),  # top
        ((a, b, c, d), vec3(1, 0, 0)),  # north
        ((a, d, h, e), vec3(0, 0, 1)),  # west
        ((f, g, c, b), vec3(1, 0, 1)),  # east
        ((e, h, g, f), vec3(0, 1, 1)),  # south
        ((e, f, b, a), vec3(1, 1, 0)),  # bottom
    ]
    triangles: List[Triangle] = []
    for (q0, q1, q2, q3), color in faces:
        triangles.append(Triangle(q0, q1, q3, color))
        triangles.append(Triangle(q1, q2, q3, color))
    return triangles


def shader_time(nanos: int) -> float:
    """Seconds value pushed to the shaders, wrapping every 10^10 microseconds."""
    return ((int(nanos) // 1000) % _TIME_WRAP_MICROS) / 1_000_000.0


def frame_delta(now_nanos: int, prev_nanos: int) -> float:
    """Seconds between two timestamps, truncated to whole microseconds."""
    diff = int(now_nanos) - int(prev_nanos)
    micros = abs(diff) // 1000
    if diff < 0:
        micros = -micros
    return micros / 1_000_000.0


def workgroup_count(width: int, height: int) -> Tuple[int, int, int]:
    """Dispatch size covering an image with 32x32 workgroups."""
    if width < 0 or height < 0:
        raise ValueError("image size must be non-negative")
    return (
        (width + _WORKGROUP_SIZE - 1) // _WORKGROUP_SIZE,
        (height + _WORKGROUP_SIZE - 1) // _WORKGROUP_SIZE,
        1,
    )


def _flip_y() -> np.ndarray:
    m = identity_mat4()
    m[1, 1] = -1.0
    return m


_CENTER_CUBE = (-0.5, -0.5, -0.5)


def spinning_cube_matrix(time: float) -> np.ndarray:
    """Tilted cube spinning about Y at the given time, centred on the origin."""
    m = identity_mat4()
    m = m @ _flip_y()
    m = m @ rotate_axis_mat4(0, 0.2)
    m = m @ rotate_axis_mat4(1, time)
    m = m @ translate_mat4(_CENTER_CUBE)
    return m


def camera_cube_matrix(camera: Camera, width: int, height: int) -> np.ndarray:
    """Centred cube seen through ``camera`` on a target of the given size."""
    m = identity_mat4()
    m = m @ _flip_y()
    m = m @ camera_view_matrix(camera, width, height)
    m = m @ translate_mat4(_CENTER_CUBE)
    return m


def transform_triangle(matrix: np.ndarray, triangle: Triangle) -> Triangle:
    """Apply ``matrix`` with perspective divide to each vertex; the colour is kept."""
    return Triangle(
        transform_point(matrix, triangle.v0),
        transform_point(matrix, triangle.v1),
        transform_point(matrix, triangle.v2),
        triangle.color.copy(),
    )