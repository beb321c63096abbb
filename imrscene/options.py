"""Command-line options, depth-format selection and camera controls of the render-pipeline demo."""

from __future__ import annotations

import enum
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .camera import Camera, CameraFreelookState

_FOV_STEP = 0.02

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class DepthFormat(enum.Enum):
    """Depth attachment formats the demo is willing to use."""

    D32_SFLOAT = "D32_SFLOAT"
    D32_SFLOAT_S8_UINT = "D32_SFLOAT_S8_UINT"
    D24_UNORM_S8_UINT = "D24_UNORM_S8_UINT"


_DEPTH_CANDIDATES: Tuple[DepthFormat, ...] = (
    DepthFormat.D32_SFLOAT,
    DepthFormat.D32_SFLOAT_S8_UINT,
    DepthFormat.D24_UNORM_S8_UINT,
)


def has_stencil_component(depth_format: DepthFormat) -> bool:
    """Whether the format carries a stencil aspect as well as depth."""
    return depth_format in (DepthFormat.D32_SFLOAT_S8_UINT, DepthFormat.D24_UNORM_S8_UINT)


def find_supported_depth_format(supported: Iterable[DepthFormat]) -> DepthFormat:
    """First candidate depth format, in order of preference, found in ``supported``."""
    available = set(supported)
    for candidate in _DEPTH_CANDIDATES:
        if candidate in available:
            return candidate
    raise RuntimeError("failed to find supported format!")


def _parse_float(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


@dataclass
class CommandArguments:
    """Options given on the command line; unset values leave the defaults alone."""

    use_glsl: bool = False
    camera_speed: Optional[float] = None
    camera_eye: Optional[Tuple[float, float, float]] = None
    camera_rotation: Optional[Tuple[float, float]] = None
    camera_fov: Optional[float] = None

    def apply(self, camera: Camera, state: CameraFreelookState) -> None:
        """Override the camera and fly speed with whatever was given."""
        if self.camera_eye is not None:
            camera.position = np.array(self.camera_eye, dtype=float)
        if self.camera_rotation is not None:
            camera.rotation.yaw, camera.rotation.pitch = self.camera_rotation
        if self.camera_fov is not None:
            camera.fov = self.camera_fov
        if self.camera_speed is not None:
            state.fly_speed = self.camera_speed


def parse_arguments(argv: Optional[Sequence[str]] = None) -> CommandArguments:
    """Parse the demo's options; ``argv`` excludes the program name. Unknown words are ignored."""
    if argv is None:
        argv = sys.argv[1:]
    args = CommandArguments()
    it = iter(argv)

    def take(option: str, count: int) -> List[float]:
        values = []
        for _ in range(count):
            try:
                values.append(_parse_float(next(it)))
            except StopIteration:
                raise ValueError(f"{option} expects {count} value(s)") from None
        return values

    for word in it:
        if word == "--speed":
            args.camera_speed = take(word, 1)[0]
        elif word == "--position":
            x, y, z = take(word, 3)
            args.camera_eye = (x, y, z)
        elif word == "--rotation":
            yaw, pitch = take(word, 2)
            args.camera_rotation = (yaw, pitch)
        elif word == "--fov":
            args.camera_fov = take(word, 1)[0]
        elif word == "--glsl":
            args.use_glsl = True
        elif word == "--spv":
            args.use_glsl = False
    return args


def shader_paths(executable_dir, use_glsl: bool) -> Tuple[Path, Path]:
    """Vertex and fragment SPIR-V files next to the executable."""
    shaders = Path(executable_dir) / "shaders"
    suffix = ".spv" if use_glsl else ".cpp.spv"
    return shaders / f"shader.vert{suffix}", shaders / f"shader.frag{suffix}"


def describe_camera(camera: Camera) -> str:
    """The command-line options that reproduce the current camera."""
    x, y, z = (float(c) for c in camera.position)
    return "--position %f %f %f --rotation %f %f --fov %f" % (
        x,
        y,
        z,
        float(camera.rotation.yaw),
        float(camera.rotation.pitch),
        float(camera.fov),
    )


def adjust_fov(camera: Camera, key: str) -> float:
    """Narrow the field of view on "-", widen it on "="; return the resulting fov."""
    if key == "-":
        camera.fov -= _FOV_STEP
    elif key == "=":
        camera.fov += _FOV_STEP
    return camera.fov