"""Free-look camera: view matrices and mouse/keyboard driven movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .vecmath import (
    VectorLike,
    identity_mat4,
    perspective_mat4,
    rotate_axis_mat4,
    translate_mat4,
    vec3,
)

_NEAR = 0.1
_FAR = 1000.0


@dataclass
class Rotation:
    """Camera orientation in radians."""

    yaw: float = 0.0
    pitch: float = 0.0


@dataclass
class Camera:
    """Position, orientation and vertical field of view (degrees)."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: Rotation = field(default_factory=Rotation)
    fov: float = 60.0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)


@dataclass
class CameraFreelookState:
    """Tuning and mouse tracking carried between frames."""

    fly_speed: float = 1.0
    mouse_sensitivity: float = 1.0
    last_mouse_x: float = 0.0
    last_mouse_y: float = 0.0
    mouse_was_held: bool = False


@dataclass
class MovementKeys:
    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False


@dataclass
class CameraInput:
    """One frame's input snapshot; ``should_capture`` is written back by movement."""

    mouse_held: bool = False
    should_capture: bool = False
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    keys: MovementKeys = field(default_factory=MovementKeys)


def camera_rotation_matrix(camera: Camera) -> np.ndarray:
    """Yaw about Y followed by pitch about X."""
    matrix = identity_mat4()
    matrix = rotate_axis_mat4(1, camera.rotation.yaw) @ matrix
    matrix = rotate_axis_mat4(0, camera.rotation.pitch) @ matrix
    return matrix


def camera_view_matrix(camera: Camera, width: int, height: int) -> np.ndarray:
    """Combined view and projection matrix for a target of the given size."""
    if height == 0:
        raise ValueError("height must be non-zero")
    matrix = translate_mat4(-camera.position)
    matrix = camera_rotation_matrix(camera) @ matrix
    ratio = float(width) / float(height)
    return perspective_mat4(ratio, camera.fov, _NEAR, _FAR) @ matrix


def _to_world(camera: Camera, direction: VectorLike) -> np.ndarray:
    inverse = np.linalg.inv(camera_rotation_matrix(camera))
    result = inverse @ np.append(np.asarray(direction, dtype=float), 1.0)
    return result[:3] * (1.0 / result[3])


def camera_forward_vec(camera: Camera, forward: Optional[VectorLike] = None) -> np.ndarray:
    """World-space direction of a camera-space ``forward`` vector (default -Z)."""
    if forward is None:
        forward = vec3(0.0, 0.0, -1.0)
    return _to_world(camera, forward)


def camera_right_vec(camera: Camera) -> np.ndarray:
    """World-space direction of the camera's +X axis."""
    return _to_world(camera, vec3(1.0, 0.0, 0.0))


def camera_move_freelook(
    camera: Camera,
    state: CameraFreelookState,
    inputs: CameraInput,
    delta: float,
) -> bool:
    """Apply one frame of mouse look and WASD flight; return whether the camera moved."""
    moved = False
    if inputs.mouse_held:
        if state.mouse_was_held:
            diff_x = inputs.mouse_x - state.last_mouse_x
            diff_y = inputs.mouse_y - state.last_mouse_y
            scale = 180.0 * math.pi
            camera.rotation.yaw += diff_x / scale * state.mouse_sensitivity
            camera.rotation.pitch += diff_y / scale * state.mouse_sensitivity
            moved = True
        else:
            inputs.should_capture = True
        state.last_mouse_x = inputs.mouse_x
        state.last_mouse_y = inputs.mouse_y
    else:
        inputs.should_capture = False
    state.mouse_was_held = inputs.mouse_held

    distance = state.fly_speed * delta
    keys = inputs.keys
    if keys.forward:
        camera.position = camera.position + camera_forward_vec(camera) * distance
        moved = True
    elif keys.back:
        camera.position = camera.position - camera_forward_vec(camera) * distance
        moved = True

    if keys.right:
        camera.position = camera.position + camera_right_vec(camera) * distance
        moved = True
    elif keys.left:
        camera.position = camera.position - camera_right_vec(camera) * distance
        moved = True
    return moved


def camera_scale_from_hfov(fov: float, aspect: float) -> np.ndarray:
    """Screen half-extents for a horizontal field of view given in radians."""
    sw = math.tan(fov * 0.5)
    return np.array([sw, sw / aspect], dtype=float)