"""GLSL shader programs loaded from source files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np


class ShaderError(Exception):
    """A shader could not be read, compiled or linked."""


def read_shader_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Read the vertex and fragment shader source texts."""
    try:
        vertex_code = Path(vertex_path).read_text()
        fragment_code = Path(fragment_path).read_text()
    except OSError as exc:
        raise ShaderError(f"shader file not successfully read: {exc}") from exc
    return vertex_code, fragment_code


class Shader:
    """A linked vertex and fragment shader program with uniform setters.

    Needs a current OpenGL context. Setting a uniform that the program
    does not use is silently ignored, as OpenGL does.
    """

    def __init__(self, vertex_path, fragment_path):
        vertex_code, fragment_code = read_shader_sources(vertex_path, fragment_path)

        from pyglet.graphics.shader import Shader as _Stage
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            vertex = _Stage(vertex_code, "vertex")
        except ShaderException as exc:
            raise ShaderError(f"vertex shader compilation failed:\n{exc}") from exc
        try:
            fragment = _Stage(fragment_code, "fragment")
        except ShaderException as exc:
            vertex.delete()
            raise ShaderError(f"fragment shader compilation failed:\n{exc}") from exc
        try:
            self._program = ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            raise ShaderError(f"shader program linking failed:\n{exc}") from exc
        finally:
            vertex.delete()
            fragment.delete()

    @property
    def id(self) -> int:
        return self._program.id

    def use(self) -> None:
        self._program.use()

    def _set(self, name: str, value) -> None:
        if name in self._program.uniforms:
            self._program[name] = value

    def set_bool(self, name, value) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name, value) -> None:
        self._set(name, int(value))

    def set_float(self, name, value) -> None:
        self._set(name, float(value))

    def set_mat4(self, name, matrix) -> None:
        arr = np.asarray(matrix, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
        self._set(name, tuple(arr.flatten(order="F")))

    def set_vec3(self, name, vector: Sequence[float]) -> None:
        arr = np.asarray(vector, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
        self._set(name, tuple(arr))