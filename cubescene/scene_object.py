"""Objects placed in a scene and drawn with a shader."""

from __future__ import annotations

import copy as _copy
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

import numpy as np

from cubescene.transforms import rotate, translate

_log = logging.getLogger(__name__)

_UUOD_RANGE = 10_000_000


def _new_uuod() -> str:
    return f"UUOD-{random.randrange(_UUOD_RANGE)}"


def _vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


class SceneObjectType(Enum):
    SIMPLE_CUBE = 0
    LIGHT_SOURCE = 1


@dataclass
class MeshData:
    """A vertex array object and the number of vertices to draw from it."""

    vertices_to_draw: int
    vao: int


class Renderable(ABC):
    """Something that can draw itself with given projection and view matrices."""

    @abstractmethod
    def render(self, projection, view) -> None:
        ...


class SceneObject(Renderable):
    """A mesh with a position, an Euler rotation and shader uniforms."""

    def __init__(self, object_type, shader, mesh):
        if shader is None:
            _log.warning("object created with no shader")
        self.object_type = SceneObjectType(object_type)
        self.shader = shader
        self.mesh = mesh
        self._position = np.zeros(3)
        self._euler_rotation = np.zeros(3)
        self._shader_ints: dict[str, int] = {}
        self._shader_floats: dict[str, float] = {}
        self._uuod = _new_uuod()

    @property
    def uuod(self) -> str:
        return self._uuod

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)

    @property
    def euler_rotation(self) -> np.ndarray:
        """Rotation about x, y and z in radians."""
        return self._euler_rotation.copy()

    @euler_rotation.setter
    def euler_rotation(self, value) -> None:
        self._euler_rotation = _vec3(value)

    @property
    def shader_ints(self) -> Mapping[str, int]:
        return MappingProxyType(self._shader_ints)

    @property
    def shader_floats(self) -> Mapping[str, float]:
        return MappingProxyType(self._shader_floats)

    def copy(self) -> "SceneObject":
        """Return an independent copy with a fresh identifier."""
        clone = _copy.copy(self)
        clone._uuod = _new_uuod()
        clone._position = self._position.copy()
        clone._euler_rotation = self._euler_rotation.copy()
        clone._shader_ints = dict(self._shader_ints)
        clone._shader_floats = dict(self._shader_floats)
        return clone

    def model_matrix(self) -> np.ndarray:
        """Rotation about z, then y, then x, followed by the translation."""
        x, y, z = self._euler_rotation
        model = np.identity(4)
        model = rotate(model, z, (0.0, 0.0, 1.0))
        model = rotate(model, y, (0.0, 1.0, 0.0))
        model = rotate(model, x, (1.0, 0.0, 0.0))
        return translate(model, self._position)

    def render(self, projection, view) -> None:
        if self.shader is None:
            _log.error("trying to render object with no shader at %s", self._uuod)
            raise RuntimeError(f"object {self._uuod} has no shader to render with")
        self.shader.use()
        for name, value in self._shader_floats.items():
            self.shader.set_float(name, value)
        for name, value in self._shader_ints.items():
            self.shader.set_int(name, value)
        self.shader.set_mat4("projection", projection)
        self.shader.set_mat4("view", view)
        self.shader.set_mat4("model", self.model_matrix())

        from pyglet import gl

        gl.glBindVertexArray(self.mesh.vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, self.mesh.vertices_to_draw)

    def set_shader_int(self, name, value) -> None:
        self._shader_ints[name] = int(value)

    def set_shader_float(self, name, value) -> None:
        self._shader_floats[name] = float(value)

    def debug_state(self) -> str:
        """A readable dump of the object's state."""

        def triple(v) -> str:
            return ", ".join(f"{c:g}" for c in v)

        lines = [
            f"{self._uuod}: {{ ",
            f"    type: {self.object_type.value},",
            f"    position: ({triple(self._position)}),",
            f"    eulerRotation: ({triple(self._euler_rotation)}),",
            "    meshData: { ",
            f"        VAO: {self.mesh.vao},",
            f"        verticesToDraw: {self.mesh.vertices_to_draw},",
            "    }, ",
            "    shaderInts: { ",
            *(f"        {k}: {v}," for k, v in self._shader_ints.items()),
            "    }, ",
            "    shaderFloats: { ",
            *(f"        {k}: {v:g}," for k, v in self._shader_floats.items()),
            "    }, ",
            "}",
        ]
        return "\n".join(lines) + "\n"

    def log_state_debug(self) -> None:
        print(self.debug_state(), end="")


class SceneObjectBehaviour(ABC):
    """A script run on a scene object every frame."""

    @abstractmethod
    def on_update(self, obj: SceneObject, delta_time: float) -> None:
        ...