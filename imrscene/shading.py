"""CPU evaluation of the terrain vertex and fragment shaders."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .noise import perlin_noise
from .vecmath import VectorLike, clamp, mix, normalize, smoothstep, vec3

_GRADIENT_STEP = 0.001
_LIGHT_DIR = normalize(vec3(0.5, 1.0, 0.25))
_GRASS = vec3(0.1, 0.9, 0.3)
_PEAK = vec3(1.0, 1.0, 1.0)
_AMBIENT = 0.2
_FOG = vec3(0.8, 0.9, 1.0)


@dataclass
class VertexOutput:
    """What the vertex stage hands on: clip position plus interpolated attributes."""

    position: np.ndarray
    frag_color: np.ndarray
    frag_uv: np.ndarray


def vertex_shader(
    position: VectorLike,
    color: VectorLike,
    render_matrix: np.ndarray,
    camera_pos: VectorLike,
) -> VertexOutput:
    """Stretch the flat grid around the camera and lift it by the terrain height."""
    x, y, z = (float(c) for c in position)
    cam = np.asarray(camera_pos, dtype=float)
    distance = max(abs(x), abs(z))
    scale = clamp(2.0 + math.pow(4.0, distance * 4.0), 1.0, 16000.0)
    x = x * scale + float(cam[0])
    z = z * scale + float(cam[2])

    uv = np.array([x, z], dtype=float)
    height = 0.8 * perlin_noise((x, z), True)
    world = np.array([x, height, z, 1.0], dtype=float)
    clip = np.asarray(render_matrix, dtype=float) @ world
    return VertexOutput(
        position=clip,
        frag_color=np.asarray(color, dtype=float).copy(),
        frag_uv=uv,
    )


def fragment_shader(frag_color: VectorLike, frag_uv: VectorLike, depth: float) -> np.ndarray:
    """Shade a terrain fragment with diffuse lighting and distance fog; returns RGBA.

    The interpolated vertex colour is accepted but the shading is derived from the
    terrain height alone.
    """
    u, v = (float(c) for c in frag_uv)
    off = _GRADIENT_STEP
    f = perlin_noise((u, v))
    fx = perlin_noise((u, v + off))
    fy = perlin_noise((u + off, v))
    dx = fx - f
    dy = fy - f

    va = normalize(vec3(off, 0.0, dx))
    vb = normalize(vec3(0.0, off, dy))
    normal = normalize(np.cross(va, vb))

    diffuse = mix(_GRASS, _PEAK, clamp(math.pow(1.0 - f, 3.0), 0.0, 1.0))
    lambert = np.maximum(float(np.dot(_LIGHT_DIR, normal)), np.zeros(3))
    color = lambert * diffuse + _AMBIENT * diffuse

    fog_dropoff = clamp(math.pow(smoothstep(0.95, 1.0, depth), 3.0), 0.0, 1.0)
    color = mix(color, _FOG, fog_dropoff)
    return np.append(color, 1.0)