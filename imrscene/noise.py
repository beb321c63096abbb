"""Procedural 2D noise used to shape and shade the terrain."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from .vecmath import clamp, step

Vec2 = Tuple[float, float]

_K1 = 0.366025404  # (sqrt(3) - 1) / 2
_K2 = 0.211324865  # (3 - sqrt(3)) / 6
_OFFSET = (15314.151, 0.22415)
_M1 = (1.6, -1.2)
_M2 = (1.2, 1.6)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _as_vec2(p: Sequence[float]) -> Vec2:
    x, y = p
    return float(x), float(y)


def hash2(p: Sequence[float]) -> Vec2:
    """Pseudo-random gradient in ``[-1, 1)`` for a lattice point."""
    px, py = _as_vec2(p)
    hx = math.sin(_dot((px, py), (127.1, 311.7))) * 43758.5453123
    hy = math.sin(_dot((px, py), (269.5, 183.3))) * 43758.5453123
    hx -= math.floor(hx)
    hy -= math.floor(hy)
    return hx * 2.0 - 1.0, hy * 2.0 - 1.0


def simplex_noise(p: Sequence[float]) -> float:
    """Two-dimensional simplex noise at ``p``."""
    px, py = _as_vec2(p)
    skew = (px + py) * _K1
    ix, iy = math.floor(px + skew), math.floor(py + skew)
    unskew = (ix + iy) * _K2
    a = (px - ix + unskew, py - iy + unskew)
    m = step(a[1], a[0])
    o = (m, 1.0 - m)
    b = (a[0] - o[0] + _K2, a[1] - o[1] + _K2)
    c = (a[0] - 1.0 + 2.0 * _K2, a[1] - 1.0 + 2.0 * _K2)

    corners = (
        (a, (ix, iy)),
        (b, (ix + o[0], iy + o[1])),
        (c, (ix + 1.0, iy + 1.0)),
    )
    total = 0.0
    for offset, lattice in corners:
        h = max(0.5 - _dot(offset, offset), 0.0)
        total += h ** 4 * _dot(offset, hash2(lattice))
    return total * 70.0


def _rotate(uv: Vec2) -> Vec2:
    return _dot(_M1, uv), _dot(_M2, uv)


def perlin_noise(uv: Sequence[float], vertex: bool = False) -> float:
    """Fractal sum of simplex octaves; ``vertex`` drops the three finest octaves."""
    origin = _as_vec2(uv)
    shifted = simplex_noise((origin[0] + _OFFSET[0], origin[1] + _OFFSET[1]))
    c = 0.5
    k = 1.0
    f = 0.0
    u = (origin[0] * 0.125, origin[1] * 0.125)

    for scale, weight in ((0.01, 5.0), (0.1, 1.0), (0.2, 1.0)):
        f += k * simplex_noise((u[0] * scale, u[1] * scale)) * weight

    def octave(factor: float) -> None:
        nonlocal f, u, k
        f += k * simplex_noise(u)
        u = _rotate(u)
        k *= factor

    octave(c)
    octave(c)
    octave(shifted)
    octave(c)
    octave(c)
    tallness = 1.0 - clamp(f * 2.0, 0.0, 1.0)
    octave(tallness * 0.5 + shifted)
    for _ in range(4):
        octave(c)
    if not vertex:
        for _ in range(3):
            octave(c)
    return f