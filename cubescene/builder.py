"""Fluent construction of scene objects from prototypes."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from cubescene.scene_object import MeshData, SceneObject, SceneObjectType

_log = logging.getLogger(__name__)

CUBE_VERTEX_COUNT = 36
FLOATS_PER_VERTEX = 5

# Position (x, y, z) followed by texture coordinates (u, v), two triangles per face.
UV_CUBE_VERTICES = np.array(
    [
        [-0.5, -0.5, -0.5, 0.0, 0.0],
        [0.5, -0.5, -0.5, 1.0, 0.0],
        [0.5, 0.5, -0.5, 1.0, 1.0],
        [0.5, 0.5, -0.5, 1.0, 1.0],
        [-0.5, 0.5, -0.5, 0.0, 1.0],
        [-0.5, -0.5, -0.5, 0.0, 0.0],

        [-0.5, -0.5, 0.5, 0.0, 0.0],
        [0.5, -0.5, 0.5, 1.0, 0.0],
        [0.5, 0.5, 0.5, 1.0, 1.0],
        [0.5, 0.5, 0.5, 1.0, 1.0],
        [-0.5, 0.5, 0.5, 0.0, 1.0],
        [-0.5, -0.5, 0.5, 0.0, 0.0],

        [-0.5, 0.5, 0.5, 1.0, 0.0],
        [-0.5, 0.5, -0.5, 1.0, 1.0],
        [-0.5, -0.5, -0.5, 0.0, 1.0],
        [-0.5, -0.5, -0.5, 0.0, 1.0],
        [-0.5, -0.5, 0.5, 0.0, 0.0],
        [-0.5, 0.5, 0.5, 1.0, 0.0],

        [0.5, 0.5, 0.5, 1.0, 0.0],
        [0.5, 0.5, -0.5, 1.0, 1.0],
        [0.5, -0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, 0.5, 0.0, 0.0],
        [0.5, 0.5, 0.5, 1.0, 0.0],

        [-0.5, -0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, -0.5, 1.0, 1.0],
        [0.5, -0.5, 0.5, 1.0, 0.0],
        [0.5, -0.5, 0.5, 1.0, 0.0],
        [-0.5, -0.5, 0.5, 0.0, 0.0],
        [-0.5, -0.5, -0.5, 0.0, 1.0],

        [-0.5, 0.5, -0.5, 0.0, 1.0],
        [0.5, 0.5, -0.5, 1.0, 1.0],
        [0.5, 0.5, 0.5, 1.0, 0.0],
        [0.5, 0.5, 0.5, 1.0, 0.0],
        [-0.5, 0.5, 0.5, 0.0, 0.0],
        [-0.5, 0.5, -0.5, 0.0, 1.0],
    ],
    dtype=np.float32,
)
UV_CUBE_VERTICES.setflags(write=False)


def create_uv_cube_vao() -> int:
    """Upload the textured cube to the GPU and return its vertex array id.

    Needs a current OpenGL context.
    """
    from pyglet import gl

    vao_ids = (gl.GLuint * 1)()
    gl.glGenVertexArrays(1, vao_ids)
    vao = vao_ids[0]
    gl.glBindVertexArray(vao)

    flat = UV_CUBE_VERTICES.ravel()
    data = (gl.GLfloat * flat.size)(*flat.tolist())
    vbo_ids = (gl.GLuint * 1)()
    gl.glGenBuffers(1, vbo_ids)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo_ids[0])
    gl.glBufferData(gl.GL_ARRAY_BUFFER, flat.nbytes, data, gl.GL_STATIC_DRAW)

    stride = FLOATS_PER_VERTEX * flat.itemsize
    gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
    gl.glEnableVertexAttribArray(0)
    gl.glVertexAttribPointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * flat.itemsize)
    gl.glEnableVertexAttribArray(1)
    return vao


class SceneObjectBuilder:
    """Configures a prototype object and hands out independent copies of it."""

    def __init__(
        self,
        light_source_shader,
        simple_cube_shader,
        mesh_factory: Callable[[], int] = create_uv_cube_vao,
    ):
        self.light_source_shader = light_source_shader
        self.simple_cube_shader = simple_cube_shader
        self._mesh_factory = mesh_factory
        self._prototype: SceneObject | None = None
        if light_source_shader is None or simple_cube_shader is None:
            _log.warning("builder created with a null shader")

    @property
    def prototype(self) -> SceneObject | None:
        return self._prototype

    def _make(self, object_type: SceneObjectType, shader) -> "SceneObjectBuilder":
        mesh = MeshData(vertices_to_draw=CUBE_VERTEX_COUNT, vao=self._mesh_factory())
        self._prototype = SceneObject(object_type, shader, mesh)
        return self

    def _require_prototype(self) -> SceneObject:
        if self._prototype is None:
            raise RuntimeError("nothing has been built with this builder yet")
        return self._prototype

    def make_light_source(self) -> "SceneObjectBuilder":
        """Start a new light-source cube."""
        return self._make(SceneObjectType.LIGHT_SOURCE, self.light_source_shader)

    def make_simple_cube(self) -> "SceneObjectBuilder":
        """Start a new textured cube."""
        return self._make(SceneObjectType.SIMPLE_CUBE, self.simple_cube_shader)

    def set_shader_int(self, name, value) -> "SceneObjectBuilder":
        self._require_prototype().set_shader_int(name, value)
        return self

    def set_shader_float(self, name, value) -> "SceneObjectBuilder":
        self._require_prototype().set_shader_float(name, value)
        return self

    def build(self) -> SceneObject:
        """Return a fresh copy of the object configured so far."""
        return self._require_prototype().copy()