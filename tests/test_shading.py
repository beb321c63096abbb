import numpy as np
import pytest

from imrscene.noise import perlin_noise
from imrscene.shading import VertexOutput, fragment_shader, vertex_shader


def test_vertex_at_origin_follows_camera():
    out = vertex_shader((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), np.identity(4), (3.0, 7.0, -2.0))
    assert isinstance(out, VertexOutput)
    assert np.allclose(out.frag_uv, [3.0, -2.0])
    assert out.position[0] == pytest.approx(3.0)
    assert out.position[2] == pytest.approx(-2.0)
    assert out.position[3] == pytest.approx(1.0)


def test_vertex_height_comes_from_vertex_noise():
    out = vertex_shader((0.1, 0.0, 0.05), (0.0, 1.0, 0.0), np.identity(4), (0.0, 0.0, 0.0))
    expected = 0.8 * perlin_noise(tuple(out.frag_uv), True)
    assert out.position[1] == pytest.approx(expected)


def test_vertex_color_is_passed_through():
    out = vertex_shader((0.2, 0.0, 0.2), (0.25, 0.5, 0.75), np.identity(4), (0.0, 0.0, 0.0))
    assert np.allclose(out.frag_color, [0.25, 0.5, 0.75])


def test_vertex_stretch_is_capped():
    out = vertex_shader((10.0, 0.0, 0.0), (0.0, 0.0, 0.0), np.identity(4), (0.0, 0.0, 0.0))
    assert out.frag_uv[0] == pytest.approx(10.0 * 16000.0)


def test_vertex_applies_render_matrix():
    matrix = np.identity(4)
    matrix[0, 3] = 5.0
    plain = vertex_shader((0.1, 0.0, 0.1), (0, 0, 0), np.identity(4), (0.0, 0.0, 0.0))
    moved = vertex_shader((0.1, 0.0, 0.1), (0, 0, 0), matrix, (0.0, 0.0, 0.0))
    assert moved.position[0] == pytest.approx(plain.position[0] + 5.0)
    assert moved.position[1] == pytest.approx(plain.position[1])


def test_fragment_far_depth_is_full_fog():
    rgba = fragment_shader((0.0, 1.0, 0.0), (12.0, 34.0), 1.0)
    assert np.allclose(rgba[:3], [0.8, 0.9, 1.0])
    assert rgba[3] == pytest.approx(1.0)


def test_fragment_near_depth_has_no_fog_dependence():
    near = fragment_shader((0.0, 1.0, 0.0), (5.5, -3.25), 0.0)
    mid = fragment_shader((0.0, 1.0, 0.0), (5.5, -3.25), 0.9)
    assert np.allclose(near, mid)


def test_fragment_color_is_non_negative():
    for uv in [(0.0, 0.0), (100.0, 42.0), (-7.5, 19.0)]:
        rgba = fragment_shader((1.0, 1.0, 1.0), uv, 0.5)
        assert rgba.shape == (4,)
        assert np.all(rgba[:3] >= 0.0)