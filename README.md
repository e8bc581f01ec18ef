# cubescene

A small OpenGL scene: ten textured cubes floating in space, viewed through a
first-person camera that you steer with the keyboard and mouse. Windowing,
shaders and textures go through pyglet; the maths is plain numpy.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the scene

```
cubescene
cubescene --root path/to/scene
```

This opens a resizable 1920×1080 window titled "Open GL Window" with an
OpenGL 3.3 context and captures the mouse. `--root` (default: the current
directory) names the directory that holds the scene's files:

- `shaders/vertex/vert0.vert` – vertex shader for every object
- `shaders/fragment/frag0.frag` – fragment shader for the textured cubes
- `shaders/fragment/lightFrag.frag` – fragment shader for light sources
- `assets/container.jpg` – loaded as RGB into texture unit 0
- `assets/awesomeface.png` – loaded as RGBA into texture unit 1

The cube mesh feeds vertex attribute 0 with the position (`vec3`) and
attribute 1 with the texture coordinates (`vec2`). Each object sets the
uniforms `projection`, `view` and `model` (4×4 matrices) and the integer
uniforms `texture1 = 0` and `texture2 = 1`. Uniforms a shader does not
declare are ignored.

On start-up each cube's state is printed. If no suitable window can be
created the command prints the reason and exits with status 1.

Controls:

- **W / S**: move forward and back
- **A / D**: strafe left and right
- **Mouse**: look around (pitch is clamped to ±89°)

Movement speeds up to 8.5 units per second over 0.2 seconds and stops at
once when no movement key is held. The camera is an FPS camera, so it stays
level as it moves, whichever way it looks.

## What the package does not include

No shader sources or texture images come with the package; the `cubescene`
command expects you to supply the files listed above. A missing shader file
raises `ShaderError`, a missing or unreadable texture raises `OSError`.
There is no scene file format: the ten cube positions are fixed in
`cubescene.app.CUBE_POSITIONS`.

## Using the pieces

The modules work on their own too, so you can build your own scenes. Only
`Shader`, `create_uv_cube_vao`, `load_texture` and `SceneObject.render` need
a current OpenGL context; everything else is plain Python and numpy.

- `cubescene.transforms`: `normalize`, `look_at`, `perspective` (field of
  view in radians), `rotate` (angle in radians) and `translate` on numpy
  vectors and 4×4 matrices. Bad shapes, zero-length vectors and degenerate
  projections raise `ValueError`.
- `cubescene.camera`: `Camera` and `CameraType` (`FREE_CAMERA`,
  `FPS_CAMERA`). A camera starts at `(0, 0, 3)` looking down −z, with
  `look_at_matrix()`, `projection_matrix(width, height)` (near 0.1, far
  100), `move_by_relative(front_delta, up_delta, right_delta)`,
  `rotate_by(pitch_delta, yaw_delta)` and `set_rotation(pitch, yaw)` in
  degrees. Pass `Camera.CLAMP_ROTATION` as the flags to keep pitch within
  ±89°. `up_delta` is accepted but does not move the camera.
- `cubescene.shader`: `Shader` compiles and links a program from two files
  and sets uniforms with `set_bool`, `set_int`, `set_float`, `set_mat4` and
  `set_vec3`; `use()` makes it current. It raises `ShaderError` when
  reading, compiling or linking fails. `read_shader_sources` reads the two
  files.
- `cubescene.scene_object`: `SceneObject` with `position`,
  `euler_rotation` (radians), `uuod`, `set_shader_int`, `set_shader_float`,
  `model_matrix()`, `render(projection, view)`, `copy()`, `debug_state()`
  and `log_state_debug()`; also `MeshData`, `SceneObjectType`, and the
  abstract `Renderable` and `SceneObjectBehaviour` bases. Rendering an
  object that has no shader raises `RuntimeError`.
- `cubescene.builder`: `SceneObjectBuilder` sets up a cube or light source
  (`make_simple_cube()`, `make_light_source()`) with its shader uniforms,
  then hands out independent copies from `build()`. The mesh comes from
  `create_uv_cube_vao` unless you pass another `mesh_factory`. Calling
  `build()` or a setter before a `make_*` call raises `RuntimeError`.
- `cubescene.rotation_script`: `ExampleRotationScript` spins an object
  around its x axis by 8 radians per second of `delta_time`.
- `cubescene.renderer`: `SceneRenderer` keeps a list of renderables and
  `render_all()` draws them in registration order with the camera's view
  and a projection for its `viewport_size` (1920×1080 by default).
- `cubescene.app`: `MovementController`, `MouseLook`, `load_texture` and
  the `main` function behind the `cubescene` command.

```python
from cubescene.camera import Camera, CameraType

camera = Camera(65.0, Camera.CLAMP_ROTATION, CameraType.FPS_CAMERA)
camera.rotate_by(10.0, 30.0)
camera.move_by_relative(1.0, 0.0, 0.0)
view = camera.look_at_matrix()
projection = camera.projection_matrix(1920, 1080)
```