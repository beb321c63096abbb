"""Vertex data for the render-pipeline demo: test cubes, the terrain grid and its layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]

_COMPONENT_SIZE = 4
_COMPONENTS = 3
_ATTRIBUTE_SIZE = _COMPONENT_SIZE * _COMPONENTS
VERTEX_STRIDE = 2 * _ATTRIBUTE_SIZE
VERTEX_FORMAT = "R32G32B32_SFLOAT"
DEFAULT_TESSELATION = 512

VERTEX_1_COLOR: Vec3 = (1.0, 0.0, 0.0)
VERTEX_2_COLOR: Vec3 = (0.0, 1.0, 0.0)
VERTEX_3_COLOR: Vec3 = (1.0, 1.0, 0.0)
VERTEX_4_COLOR: Vec3 = (0.0, 0.0, 1.0)
VERTEX_5_COLOR: Vec3 = (1.0, 0.0, 1.0)
VERTEX_6_COLOR: Vec3 = (0.0, 1.0, 1.0)
VERTEX_7_COLOR: Vec3 = (1.0, 1.0, 1.0)

# Six faces, two triangles each, of a unit cube centred on the origin.
_CUBE_POSITIONS: Tuple[Vec3, ...] = (
    # face 1
    (-0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
    # face 2
    (0.5, 0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5),
    (0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (0.5, 0.5, -0.5),
    # face 3
    (0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5),
    (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, 0.5),
    # face 4
    (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, -0.5),
    # face 5
    (0.5, 0.5, 0.5), (0.5, -0.5, 0.5), (0.5, -0.5, -0.5),
    (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, -0.5),
    # face 6
    (-0.5, 0.5, 0.5), (-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5),
    (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
)

_SECOND_CUBE_Z_OFFSET = -2.0


@dataclass(frozen=True)
class Vertex:
    """A position and a colour, each three floats."""

    position: Vec3
    color: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_vec3(self.position))
        object.__setattr__(self, "color", _as_vec3(self.color))


@dataclass(frozen=True)
class VertexAttribute:
    """Where one vertex attribute lives inside a vertex of the bound buffer."""

    binding: int
    location: int
    format: str
    offset: int


def _as_vec3(v: Sequence[float]) -> Vec3:
    x, y, z = v
    return float(x), float(y), float(z)


def cube_vertices() -> List[Vertex]:
    """Two coloured cubes, the second two units further down -Z."""
    first_colors = (VERTEX_1_COLOR, VERTEX_2_COLOR, VERTEX_3_COLOR)
    second_colors = (VERTEX_4_COLOR, VERTEX_5_COLOR, VERTEX_6_COLOR)
    first = [
        Vertex(pos, first_colors[n % 3]) for n, pos in enumerate(_CUBE_POSITIONS)
    ]
    second = [
        Vertex((x, y, z + _SECOND_CUBE_Z_OFFSET), second_colors[n % 3])
        for n, (x, y, z) in enumerate(_CUBE_POSITIONS)
    ]
    return first + second


def create_flat_surface(tesselation: int = DEFAULT_TESSELATION) -> List[Vertex]:
    """A flat grid on y = 0 spanning [-1, 1] in x and z, ``tesselation`` cells per unit."""
    if tesselation <= 0:
        return []
    grid = 1.0 / tesselation
    color = VERTEX_2_COLOR
    data: List[Vertex] = []
    for xi in range(-tesselation, tesselation):
        x0, x1 = xi * grid, (xi + 1) * grid
        for zi in range(-tesselation, tesselation):
            z0, z1 = zi * grid, (zi + 1) * grid
            a = Vertex((x1, 0.0, z1), color)
            b = Vertex((x0, 0.0, z1), color)
            c = Vertex((x1, 0.0, z0), color)
            d = Vertex((x0, 0.0, z0), color)
            data.extend((a, b, d, a, d, c))
    return data


def vertex_layout() -> Tuple[int, Tuple[VertexAttribute, ...]]:
    """The buffer stride and the attribute descriptions of a packed ``Vertex``."""
    attributes = (
        VertexAttribute(binding=0, location=0, format=VERTEX_FORMAT, offset=0),
        VertexAttribute(binding=0, location=1, format=VERTEX_FORMAT, offset=_ATTRIBUTE_SIZE),
    )
    return VERTEX_STRIDE, attributes


def pack_vertices(vertices: Iterable[Vertex]) -> bytes:
    """Little-endian float32 bytes: position then colour for each vertex."""
    rows = [(*v.position, *v.color) for v in vertices]
    array = np.array(rows, dtype="<f4").reshape(-1, 2 * _COMPONENTS)
    return array.tobytes()