from pathlib import Path

import numpy as np
import pytest

from imrscene.camera import Camera, CameraFreelookState, Rotation
from imrscene.options import (
    CommandArguments,
    DepthFormat,
    adjust_fov,
    describe_camera,
    find_supported_depth_format,
    has_stencil_component,
    parse_arguments,
    shader_paths,
)


def test_defaults_without_arguments():
    args = parse_arguments([])
    assert args == CommandArguments()
    assert args.use_glsl is False
    assert args.camera_speed is None


def test_parse_all_options():
    args = parse_arguments(
        ["--speed", "2.5", "--position", "1", "2", "3", "--rotation", "0.5", "0.25", "--fov", "45", "--glsl"]
    )
    assert args.camera_speed == 2.5
    assert args.camera_eye == (1.0, 2.0, 3.0)
    assert args.camera_rotation == (0.5, 0.25)
    assert args.camera_fov == 45.0
    assert args.use_glsl is True


def test_last_shader_flag_wins():
    assert parse_arguments(["--glsl", "--spv"]).use_glsl is False
    assert parse_arguments(["--spv", "--glsl"]).use_glsl is True


def test_unknown_words_are_ignored():
    args = parse_arguments(["model.obj", "--speed", "3"])
    assert args.camera_speed == 3.0


def test_numbers_parse_leading_prefix():
    assert parse_arguments(["--speed", "1.5xyz"]).camera_speed == 1.5
    assert parse_arguments(["--speed", "abc"]).camera_speed == 0.0
    assert parse_arguments(["--fov", "-2e1"]).camera_fov == -20.0


def test_missing_value_raises():
    with pytest.raises(ValueError):
        parse_arguments(["--position", "1", "2"])
    with pytest.raises(ValueError):
        parse_arguments(["--speed"])


def test_stencil_component():
    assert has_stencil_component(DepthFormat.D32_SFLOAT_S8_UINT)
    assert has_stencil_component(DepthFormat.D24_UNORM_S8_UINT)
    assert not has_stencil_component(DepthFormat.D32_SFLOAT)


def test_depth_format_preference_order():
    all_formats = list(DepthFormat)
    assert find_supported_depth_format(reversed(all_formats)) is DepthFormat.D32_SFLOAT
    assert (
        find_supported_depth_format([DepthFormat.D24_UNORM_S8_UINT, DepthFormat.D32_SFLOAT_S8_UINT])
        is DepthFormat.D32_SFLOAT_S8_UINT
    )
    assert find_supported_depth_format([DepthFormat.D24_UNORM_S8_UINT]) is DepthFormat.D24_UNORM_S8_UINT


def test_no_supported_depth_format():
    with pytest.raises(RuntimeError):
        find_supported_depth_format([])


def test_apply_overrides_camera_and_state():
    camera = Camera(position=[0.0, 0.0, 0.0], rotation=Rotation(0.0, 0.0), fov=60.0)
    state = CameraFreelookState(fly_speed=1.0)
    args = parse_arguments(["--position", "4", "5", "6", "--rotation", "0.1", "0.2", "--fov", "70", "--speed", "9"])
    args.apply(camera, state)
    assert np.allclose(camera.position, [4.0, 5.0, 6.0])
    assert camera.rotation.yaw == pytest.approx(0.1)
    assert camera.rotation.pitch == pytest.approx(0.2)
    assert camera.fov == 70.0
    assert state.fly_speed == 9.0


def test_apply_without_options_keeps_values():
    camera = Camera(position=[1.0, 2.0, 3.0], rotation=Rotation(0.3, 0.4), fov=50.0)
    state = CameraFreelookState(fly_speed=2.0)
    CommandArguments().apply(camera, state)
    assert np.allclose(camera.position, [1.0, 2.0, 3.0])
    assert (camera.rotation.yaw, camera.rotation.pitch) == (0.3, 0.4)
    assert camera.fov == 50.0
    assert state.fly_speed == 2.0


def test_shader_paths():
    vert, frag = shader_paths("/opt/demo", True)
    assert vert == Path("/opt/demo/shaders/shader.vert.spv")
    assert frag == Path("/opt/demo/shaders/shader.frag.spv")
    vert, frag = shader_paths("/opt/demo", False)
    assert vert == Path("/opt/demo/shaders/shader.vert.cpp.spv")
    assert frag == Path("/opt/demo/shaders/shader.frag.cpp.spv")


def test_describe_camera_round_trips_through_parser():
    camera = Camera(position=[1.0, 2.0, 3.0], rotation=Rotation(0.5, 0.25), fov=60.0)
    text = describe_camera(camera)
    assert text == "--position 1.000000 2.000000 3.000000 --rotation 0.500000 0.250000 --fov 60.000000"
    args = parse_arguments(text.split())
    assert args.camera_eye == (1.0, 2.0, 3.0)
    assert args.camera_rotation == (0.5, 0.25)
    assert args.camera_fov == 60.0


def test_adjust_fov():
    camera = Camera(fov=60.0)
    assert adjust_fov(camera, "-") == pytest.approx(59.98)
    assert adjust_fov(camera, "=") == pytest.approx(60.0)
    assert adjust_fov(camera, "=") == pytest.approx(60.02)
    assert adjust_fov(camera, "x") == pytest.approx(60.02)
    assert camera.fov == pytest.approx(60.02)