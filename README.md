# imrscene

`imrscene` holds the host-side maths behind a small set of real-time
rendering demos: 4×4 matrix helpers, a free-look camera, 2D simplex and
fractal ("perlin") noise, a flat terrain grid and two test cubes as vertex
data, the unit cube used by the compute-shader demos, and a CPU evaluation
of the terrain vertex and fragment shaders. It is plain Python on top of
NumPy.

Matrices are row-major 4×4 NumPy arrays that multiply column vectors
(`m @ v`).

## Modules

| Module | What it offers |
| --- | --- |
| `imrscene.vecmath` | `clamp`, `step`, `smoothstep`, `mix`, `normalize`, `vec3`, `identity_mat4`, `translate_mat4`, `rotate_axis_mat4`, `perspective_mat4`, `transform_point` |
| `imrscene.noise` | `hash2`, `simplex_noise`, `perlin_noise` |
| `imrscene.camera` | `Camera`, `Rotation`, `CameraFreelookState`, `CameraInput`, `MovementKeys`, `camera_rotation_matrix`, `camera_view_matrix`, `camera_forward_vec`, `camera_right_vec`, `camera_move_freelook`, `camera_scale_from_hfov` |
| `imrscene.geometry` | `Triangle`, `make_cube`, `transform_triangle`, `spinning_cube_matrix`, `camera_cube_matrix`, `workgroup_count`, `shader_time`, `frame_delta` |
| `imrscene.shading` | `VertexOutput`, `vertex_shader`, `fragment_shader` |
| `imrscene.scene` | `Vertex`, `VertexAttribute`, `cube_vertices`, `create_flat_surface`, `vertex_layout`, `pack_vertices` |
| `imrscene.options` | `CommandArguments`, `DepthFormat`, `parse_arguments`, `has_stencil_component`, `find_supported_depth_format`, `shader_paths`, `describe_camera`, `adjust_fov` |

## A quick tour

Build the unit cube out of twelve coloured triangles and spin it:

```python
from imrscene.geometry import make_cube, spinning_cube_matrix, shader_time

cube = make_cube()                      # 12 Triangle objects, two per face
matrix = spinning_cube_matrix(shader_time(1_500_000_000))
projected = [tri.transformed(matrix) for tri in cube]
```

`shader_time` turns a nanosecond timestamp into seconds, wrapping every
10^10 microseconds; `frame_delta` gives the seconds between two timestamps,
truncated to whole microseconds.

Work out how many 32×32 workgroups cover a frame:

```python
from imrscene.geometry import workgroup_count

groups = workgroup_count(1024, 768)     # (32, 24, 1)
```

Sample the terrain height the vertex shader lifts the ground grid by:

```python
from imrscene.noise import perlin_noise

height = 0.8 * perlin_noise((12.5, -3.0), True)
```

Passing `True` drops the three finest octaves, as the vertex stage does.

Generate the ground grid and pack it as interleaved position/colour floats:

```python
from imrscene.scene import create_flat_surface, pack_vertices, vertex_layout

surface = create_flat_surface(16)       # 6 vertices per cell, x and z in [-1, 1]
data = pack_vertices(surface)           # little-endian float32 bytes
stride, attributes = vertex_layout()    # 24, two VertexAttribute entries
```

Run the terrain shaders on the CPU:

```python
import numpy as np
from imrscene.shading import vertex_shader, fragment_shader

out = vertex_shader((0.1, 0.0, 0.2), (0.0, 1.0, 0.0), np.identity(4), (0.0, 0.0, 0.0))
rgba = fragment_shader(out.frag_color, out.frag_uv, depth=0.5)
```

The fragment colour is derived from the terrain height, lighting and fog
alone; the interpolated vertex colour is accepted but not used.

## Options and camera controls

`parse_arguments` reads `--speed S`, `--position X Y Z`, `--rotation YAW PITCH`,
`--fov F`, `--glsl` and `--spv` from a list of words (unknown words are
ignored; a missing value raises `ValueError`). The returned
`CommandArguments.apply(camera, state)` copies any given position, rotation,
field of view and fly speed onto a `Camera` and its `CameraFreelookState`.

```python
from imrscene.camera import Camera, CameraFreelookState
from imrscene.options import parse_arguments, describe_camera

camera, state = Camera(), CameraFreelookState()
parse_arguments(["--position", "0", "1", "5", "--fov", "45", "--glsl"]).apply(camera, state)
describe_camera(camera)   # "--position 0.000000 1.000000 5.000000 --rotation ..."
```

`shader_paths(executable_dir, use_glsl)` gives the vertex and fragment
SPIR-V file paths under `executable_dir/shaders`. `find_supported_depth_format`
picks the first of `D32_SFLOAT`, `D32_SFLOAT_S8_UINT`, `D24_UNORM_S8_UINT`
found among the supported formats, raising `RuntimeError` if none is.

`camera_move_freelook(camera, state, inputs, delta)` applies one frame of a
`CameraInput`: dragging with the mouse held turns the camera (yaw and pitch),
and the movement keys fly it along its forward and right axes by
`fly_speed × delta`. It returns whether the camera moved. `adjust_fov`
narrows the field of view by 0.02 on `"-"` and widens it on `"="`.

## What it does not do

`imrscene` computes data only. It opens no window, reads no keyboard or
mouse itself, talks to no GPU, loads no shader files and installs no
command-line program: the caller supplies input state, collects the
matrices, vertex bytes and colours, and hands them to whatever renderer it
uses.

## Running the tests

Install the `test` extra and run `pytest`.