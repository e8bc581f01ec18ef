"""The interactive scene: ten textured cubes and a first-person camera."""

from __future__ import annotations

import argparse
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from cubescene.camera import Camera, CameraType
from cubescene.transforms import normalize

_log = logging.getLogger(__name__)

GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_TEXTURE0 = 0x84C0

_PIXEL_FORMATS = {GL_RGB: "RGB", GL_RGBA: "RGBA"}

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
WINDOW_TITLE = "Open GL Window"
CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)

CUBE_POSITIONS = (
    (0.0, 0.0, 0.0),
    (2.0, 5.0, -15.0),
    (-1.5, -2.2, -2.5),
    (-3.8, -2.0, -12.3),
    (2.4, -0.4, -3.5),
    (-1.7, 3.0, -7.5),
    (1.3, -2.0, -2.5),
    (1.5, 2.0, -2.5),
    (1.5, 0.2, -1.5),
    (-1.3, 1.0, -1.5),
)


@dataclass
class MovementController:
    """Keyboard movement that ramps up to full speed and stops at once."""

    MAX_SPEED = 8.5  # units per second
    ACCELERATION_TIME = 0.2  # seconds

    current_speed: float = 0.0

    def update(self, camera, delta_time, forward, backward, left, right) -> np.ndarray:
        """Move ``camera`` for the keys held; return the relative step taken."""
        acceleration = self.MAX_SPEED / self.ACCELERATION_TIME
        self.current_speed = min(
            self.current_speed + acceleration * delta_time, self.MAX_SPEED
        )
        movement = np.zeros(3)
        if forward:
            movement[0] += 1.0
        if backward:
            movement[0] -= 1.0
        if left:
            movement[2] -= 1.0
        if right:
            movement[2] += 1.0

        if np.linalg.norm(movement) > 0.0:
            movement = normalize(movement) * self.current_speed * delta_time
            camera.move_by_relative(*movement)
        else:
            self.current_speed = 0.0
        return movement


@dataclass
class MouseLook:
    """Turns a camera from cursor positions, with y growing downwards."""

    SENSITIVITY = 0.05

    last_x: float = 400.0
    last_y: float = 300.0
    _first: bool = field(default=True, repr=False)

    def handle(self, camera, x, y) -> None:
        if self._first:
            self.last_x, self.last_y = x, y
            self._first = False
        x_offset = (x - self.last_x) * self.SENSITIVITY
        y_offset = (self.last_y - y) * self.SENSITIVITY
        self.last_x, self.last_y = x, y
        camera.rotate_by(y_offset, x_offset)


def load_texture(path, texture_unit, pixel_format, flip_vertical=True) -> int:
    """Load an image file into a new 2-D texture bound on ``texture_unit``.

    Needs a current OpenGL context once the file has been read.
    """
    if pixel_format not in _PIXEL_FORMATS:
        raise ValueError(f"unsupported pixel format {pixel_format:#x}")
    fmt = _PIXEL_FORMATS[pixel_format]
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise OSError(f"failed to load texture {path}: {exc}") from exc

    import pyglet
    from pyglet import gl

    try:
        image = pyglet.image.load(str(path), file=io.BytesIO(raw))
    except Exception as exc:  # decoders raise a variety of errors
        raise OSError(f"failed to load texture {path}: {exc}") from exc
    width, height = image.width, image.height
    pitch = width * len(fmt)
    # Positive pitch yields rows bottom-first, which is what OpenGL expects.
    data = image.get_image_data().get_bytes(fmt, pitch if flip_vertical else -pitch)

    texture_ids = (gl.GLuint * 1)()
    gl.glGenTextures(1, texture_ids)
    texture = texture_ids[0]
    gl.glActiveTexture(texture_unit)
    gl.glBindTexture(gl.GL_TEXTURE_2D, texture)
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D, 0, gl.GL_RGB, width, height, 0,
        pixel_format, gl.GL_UNSIGNED_BYTE, data,
    )
    gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
    return texture


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Fly around a scene of textured cubes.")
    parser.add_argument(
        "--root", type=Path, default=Path("."),
        help="directory holding the shaders/ and assets/ folders",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    root: Path = args.root

    import pyglet
    from pyglet import gl
    from pyglet.window import key

    from cubescene.builder import SceneObjectBuilder
    from cubescene.shader import Shader

    print("[DEBUG] Initializing...")
    config = pyglet.gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, double_buffer=True,
        depth_size=24,
    )
    try:
        window = pyglet.window.Window(
            WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True, config=config
        )
    except (pyglet.window.NoSuchConfigException, pyglet.gl.ContextException) as exc:
        print(f"Failed to create window: {exc}")
        return 1
    window.set_exclusive_mouse(True)

    camera = Camera(65.0, Camera.CLAMP_ROTATION, CameraType.FPS_CAMERA)
    movement = MovementController()
    mouse_look = MouseLook()
    keys = key.KeyStateHandler()
    window.push_handlers(keys)

    cube_shader = Shader(root / "shaders/vertex/vert0.vert", root / "shaders/fragment/frag0.frag")
    lighting_shader = Shader(
        root / "shaders/vertex/vert0.vert", root / "shaders/fragment/lightFrag.frag"
    )
    load_texture(root / "assets/container.jpg", GL_TEXTURE0, GL_RGB)
    load_texture(root / "assets/awesomeface.png", GL_TEXTURE0 + 1, GL_RGBA)

    builder = (
        SceneObjectBuilder(lighting_shader, cube_shader)
        .make_simple_cube()
        .set_shader_int("texture1", 0)
        .set_shader_int("texture2", 1)
    )
    scene_objects = []
    for position in CUBE_POSITIONS:
        obj = builder.build()
        obj.position = position
        obj.log_state_debug()
        scene_objects.append(obj)

    cursor = [0.0, 0.0]

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        cursor[0] += dx
        cursor[1] -= dy  # window y grows upwards; the look handler expects downwards
        mouse_look.handle(camera, cursor[0], cursor[1])

    def update(delta_time):
        movement.update(
            camera, delta_time,
            forward=keys[key.W], backward=keys[key.S],
            left=keys[key.A], right=keys[key.D],
        )

    @window.event
    def on_draw():
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glEnable(gl.GL_DEPTH_TEST)
        width, height = window.get_size()
        projection = camera.projection_matrix(width, height)
        view = camera.look_at_matrix()
        for obj in scene_objects:
            obj.render(projection, view)

    pyglet.clock.schedule(update)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())